"""Secret repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from seedvault.domain.secrets.entities import Secret, SecretMetadata


class SecretRepository(ABC):
    """Owner-scoped storage for secrets.

    An implementation is bound to one authenticated user when it is built.
    Every read, write and delete is restricted to that user's rows; there is
    no unscoped access.
    """

    @abstractmethod
    async def save(self, secret: Secret) -> None:
        """Persist a new secret owned by the bound user."""

    @abstractmethod
    async def list_metadata(self) -> list[SecretMetadata]:
        """List the bound user's secrets, newest first."""

    @abstractmethod
    async def find_by_id(self, secret_id: UUID) -> Optional[Secret]:
        """Find a secret; None for missing and foreign ids alike."""

    @abstractmethod
    async def delete(self, secret_id: UUID) -> bool:
        """Delete one secret. Returns True if a row was removed."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every secret of the bound user; returns the count."""

    @abstractmethod
    async def count(self) -> int:
        """Count the bound user's secrets."""
