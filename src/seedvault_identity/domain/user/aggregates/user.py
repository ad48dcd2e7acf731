"""The account that owns stored secrets."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from seedvault.domain.shared.time import utc_now
from seedvault_identity.domain.user.value_objects.email import Email

EmailLike = Union[str, Email]


def _as_email(value: EmailLike) -> Email:
    return value if isinstance(value, Email) else Email(value)


class User:
    """
    Account aggregate root.

    Identity is the id alone; two instances with the same id are equal
    even if one holds a stale email. ``password_hash`` is a bcrypt digest
    and is left out of ``repr``.
    """

    def __init__(
        self,
        email: EmailLike,
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._email = _as_email(email)
        self._password_hash = password_hash
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(cls, email: EmailLike, password_hash: str) -> "User":
        """A brand-new account with a fresh id."""
        return cls(email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: EmailLike,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a stored account without touching its timestamps."""
        return cls(email, password_hash, id, created_at, updated_at)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        if isinstance(other, User):
            return self._id == other._id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self.email})"
