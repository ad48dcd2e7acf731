"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    iat
        Token issue timestamp
    exp
        Token expiration timestamp
    """

    user_id: UUID
    email: str
    iat: datetime
    exp: datetime


class TokenStatus(str, Enum):
    """Outcome of a non-raising token check."""

    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


@dataclass(frozen=True)
class TokenVerification:
    """Result of ``JWTService.check_token``.

    ``payload`` is set only for VALID tokens, ``reason`` only for the
    failure outcomes.
    """

    status: TokenStatus
    payload: TokenPayload | None = None
    reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID

    @property
    def is_expired(self) -> bool:
        return self.status is TokenStatus.EXPIRED

    @classmethod
    def valid(cls, payload: TokenPayload) -> "TokenVerification":
        return cls(status=TokenStatus.VALID, payload=payload)

    @classmethod
    def expired(cls, reason: str = "Token has expired") -> "TokenVerification":
        return cls(status=TokenStatus.EXPIRED, reason=reason)

    @classmethod
    def invalid(cls, reason: str) -> "TokenVerification":
        return cls(status=TokenStatus.INVALID, reason=reason)
