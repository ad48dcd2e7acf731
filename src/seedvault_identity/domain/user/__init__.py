"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, email, password digest)
- Email normalization and validation
- The repository contract for persisting users

Stored secrets are handled by seedvault.domain.secrets and only reference
the user id.
"""

from seedvault_identity.domain.user.aggregates import User
from seedvault_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from seedvault_identity.domain.user.repositories import UserRepository
from seedvault_identity.domain.user.value_objects import (
    EMAIL_PATTERN,
    Email,
    is_valid_email,
)

__all__ = [
    "EMAIL_PATTERN",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "is_valid_email",
]
