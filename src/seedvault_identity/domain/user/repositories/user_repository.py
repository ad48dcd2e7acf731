"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from seedvault_identity.domain.user.aggregates.user import User
from seedvault_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations flush but never commit; the caller owns the transaction.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def create(self, email: Union[str, Email], password_hash: str) -> User:
        """Insert a new user.

        Raises EmailAlreadyExistsError if the email is taken, including when
        a concurrent insert wins the unique index.
        """

    @abstractmethod
    async def update_email(self, user_id: UUID, new_email: Union[str, Email]) -> User:
        """Change a user's email.

        Raises UserNotFoundError or EmailAlreadyExistsError.
        """

    @abstractmethod
    async def update_password_hash(self, user_id: UUID, password_hash: str) -> User:
        """Replace a user's bcrypt digest. Raises UserNotFoundError."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user by ID. Returns True if a row was removed."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
