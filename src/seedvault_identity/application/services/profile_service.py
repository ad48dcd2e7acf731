"""Profile read and update for the authenticated user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from seedvault_identity.domain.user import User, UserNotFoundError

if TYPE_CHECKING:
    from seedvault_identity.application.context import UserContext
    from seedvault_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """Profile operations, always bound to the caller's own identity."""

    def __init__(self, user_repository: UserRepository, user_context: UserContext):
        self._user_repo = user_repository
        self._user_context = user_context

    async def get_profile(self) -> User:
        user = await self._user_repo.find_by_id(self._user_context.user_id)
        if user is None:
            raise UserNotFoundError(str(self._user_context.user_id))
        return user

    async def update_email(self, new_email: str) -> User:
        """Change the caller's email.

        Raises InvalidEmailError, EmailAlreadyExistsError or
        UserNotFoundError.
        """
        user = await self._user_repo.update_email(self._user_context.user_id, new_email)
        logger.info("User %s changed email", user.id)
        return user
