"""SeedVault Identity - User management and authentication.

This module handles all identity-related concerns:
- User management (registration, profile, deletion)
- Authentication (login, access tokens)
- Request-scoped user context

The vault domain (seedvault) only references user_id, keeping identity
concerns separated.
"""

from seedvault_identity.application.context import UserContext
from seedvault_identity.application.services import (
    AuthenticationService,
    ProfileService,
)
from seedvault_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    # Application Context
    "UserContext",
    # Application Services
    "AuthenticationService",
    "ProfileService",
]
