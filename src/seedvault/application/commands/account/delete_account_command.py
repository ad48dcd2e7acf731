"""Delete the current user's account together with all of their secrets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from seedvault.domain.secrets import SecretRepository
from seedvault_identity.domain.user import UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from seedvault.application.factories import RepositoryFactory
    from seedvault.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class DeleteAccountCommand:
    """Remove every secret of the current user, then the user.

    Both steps run on the same session; the caller commits once afterwards
    or rolls back.
    """

    def __init__(
        self,
        secret_repository: SecretRepository,
        user_repository: UserRepository,
        current_user: CurrentUser,
    ):
        self._secret_repo = secret_repository
        self._user_repo = user_repository
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAccountCommand:
        return cls(
            secret_repository=factory.secret_repository(),
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(self) -> int:
        """Returns the number of secrets removed."""
        user_id = self._current_user.user_id

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        deleted_secrets = await self._secret_repo.delete_all()

        if not await self._user_repo.delete(user_id):
            raise UserNotFoundError(str(user_id))

        logger.info(
            "Deleted account %s and %d secret(s)",
            user_id,
            deleted_secrets,
        )
        return deleted_secrets
