"""Request/response models for the HTTP API."""

from seedvault.presentation.api.schemas.auth import (
    AuthResponse,
    DeleteAccountResponse,
    LoginRequest,
    SignupRequest,
    UpdateProfileRequest,
    UserResponse,
)
from seedvault.presentation.api.schemas.secrets import (
    SecretCreatedResponse,
    SecretCreateRequest,
    SecretListResponse,
    SecretMetadataResponse,
    SecretRevealResponse,
    WalletTypesResponse,
)

__all__ = [
    "AuthResponse",
    "DeleteAccountResponse",
    "LoginRequest",
    "SecretCreateRequest",
    "SecretCreatedResponse",
    "SecretListResponse",
    "SecretMetadataResponse",
    "SecretRevealResponse",
    "SignupRequest",
    "UpdateProfileRequest",
    "UserResponse",
    "WalletTypesResponse",
]
