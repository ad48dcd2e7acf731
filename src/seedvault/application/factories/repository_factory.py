"""What commands and queries need from the persistence layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from seedvault.domain.secrets import SecretRepository
from seedvault_identity.domain.user.repositories import UserRepository

if TYPE_CHECKING:
    from seedvault.application.ports.identity import CurrentUser


class RepositoryFactory(Protocol):
    """Hands out repositories already bound to one caller.

    ``session`` is typed ``Any`` so this layer never imports SQLAlchemy;
    only routers commit or roll it back.
    """

    @property
    def current_user(self) -> CurrentUser: ...

    @property
    def session(self) -> Any: ...

    def secret_repository(self) -> SecretRepository:
        """Secrets of ``current_user`` only."""
        ...

    def user_repository(self) -> UserRepository: ...
