"""Shared domain building blocks."""

from seedvault.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    ValidationError,
)
from seedvault.domain.shared.time import ensure_tz_aware, utc_now
from seedvault.domain.shared.value_objects import SecureString

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "PersistenceError",
    "SecureString",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
