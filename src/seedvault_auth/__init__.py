"""SeedVault Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the vault domain. It handles:
- Password hashing (bcrypt)
- JWT access token creation and verification

Architecture:
    seedvault_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from seedvault_auth import PasswordHashingService, JWTService
"""

from seedvault_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    WeakPasswordError,
)
from seedvault_auth.schemas import TokenPayload, TokenStatus, TokenVerification
from seedvault_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    "TokenStatus",
    "TokenVerification",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "TokenExpiredError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
