"""Who is making the current request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from seedvault_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Identity of the authenticated caller, resolved once per request.

    Everything user-scoped (repositories, profile changes, account
    deletion) is bound to this object rather than to ids from the request.
    """

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email)

    @classmethod
    def from_values(cls, user_id: UUID, email: str) -> UserContext:
        return cls(user_id=user_id, email=email)
