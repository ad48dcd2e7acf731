"""Authentication services (pure logic, no persistence)."""

from seedvault_auth.services.jwt_service import JWTService
from seedvault_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
