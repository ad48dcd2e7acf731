from seedvault_identity.application.services.authentication_service import (
    AuthenticationService,
)
from seedvault_identity.application.services.profile_service import ProfileService

__all__ = [
    "AuthenticationService",
    "ProfileService",
]
