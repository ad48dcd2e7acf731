"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from seedvault_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    WeakPasswordError,
)
from seedvault_identity.domain.user import Email, EmailAlreadyExistsError, User

if TYPE_CHECKING:
    from seedvault_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int, min_length: int) -> str:
    """Digest checked against when a login names no known account.

    Computed once per process and cost factor, so an unknown email costs
    one bcrypt check, the same as a wrong password.
    """
    service = PasswordHashingService(rounds=rounds, min_length=min_length)
    return service.hash("x" * min_length)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates seedvault_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password

    bcrypt runs in a worker thread so a slow hash never blocks the event
    loop.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(self, email: str, password: str) -> User:
        """Create an account. No token is issued; the client logs in next.

        Raises
        ------
        InvalidEmailError
            If the email is malformed
        EmailAlreadyExistsError
            If the email is already registered (in any casing)
        WeakPasswordError
            If the password does not meet the policy
        """
        email_obj = Email(email)

        if await self._user_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = await self._user_repo.create(email_obj, password_hash)

        logger.info("User registered: %s", user.email)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and issue an access token.

        Unknown email and wrong password raise the same
        InvalidCredentialsError. A digest made with another bcrypt cost is
        replaced after a successful check, so the caller must commit.
        """
        user = await self._find_user_for_login(email)

        if user is None:
            dummy_hash = await asyncio.to_thread(
                dummy_password_hash,
                self._password_service.rounds,
                self._password_service.min_length,
            )
            await asyncio.to_thread(self._password_service.verify, password, dummy_hash)
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not password_ok:
            logger.info("Failed login for user: %s", user.id)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            user = await self._rehash(user, password)

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

        logger.info("User logged in: %s", user.email)
        return user, access_token

    @property
    def access_token_expire_seconds(self) -> int:
        return self._jwt_service.access_token_expire_seconds

    async def _find_user_for_login(self, email: str) -> User | None:
        try:
            email_obj = Email(email)
        except ValueError:
            return None
        return await self._user_repo.find_by_email(email_obj)

    async def _rehash(self, user: User, password: str) -> User:
        try:
            new_hash = await asyncio.to_thread(self._password_service.hash, password)
        except WeakPasswordError:
            # Predates the current length policy; the old digest stays
            logger.info("Kept old password digest for user: %s", user.id)
            return user

        logger.info("Upgrading password digest for user: %s", user.id)
        return await self._user_repo.update_password_hash(user.id, new_hash)
