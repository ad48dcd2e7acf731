"""Authentication and profile schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignupRequest(BaseModel):
    """Request schema for user registration.

    Password strength is checked by the hashing service (400), not here.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        max_length=128,
        description="Password (at least 8 characters, at most 72 bytes)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is a plain string so a malformed address fails like any other
    unknown account.
    """

    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class UpdateProfileRequest(BaseModel):
    """Request schema for changing the caller's email."""

    email: EmailStr


class UserResponse(BaseModel):
    """Response schema for user data. Never includes the password digest."""

    id: UUID
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserResponse


class DeleteAccountResponse(BaseModel):
    """Response schema for account deletion."""

    message: str
    deleted_secrets: int
