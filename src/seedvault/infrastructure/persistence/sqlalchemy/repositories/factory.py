"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from seedvault.infrastructure.adapters.identity import IdentityAdapter
from seedvault.infrastructure.persistence.sqlalchemy.repositories.secrets import (
    SecretRepositorySQLAlchemy,
)
from seedvault_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from seedvault.application.ports.identity import CurrentUser
    from seedvault_identity.application.context import UserContext


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, user_context: UserContext):
        self._session = session
        self._current_user = IdentityAdapter.to_current_user(user_context)

        # Cached instances (created on demand)
        self._secret_repo: SecretRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def secret_repository(self) -> SecretRepositorySQLAlchemy:
        if self._secret_repo is None:
            self._secret_repo = SecretRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._secret_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
