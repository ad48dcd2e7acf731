"""Secret schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SecretCreateRequest(BaseModel):
    """Request schema for storing a new recovery phrase.

    Field rules (word count, wallet catalogue, lengths) are enforced by the
    domain and reported as 400 errors. Unknown fields, such as an owner id,
    are ignored.
    """

    wallet_name: str = Field(..., description="Label for the wallet (1-50 chars)")
    wallet_type: str = Field(..., description="One of GET /secrets/wallet-types")
    secret_phrase: str = Field(
        ...,
        max_length=1024,
        description="12, 15, 18, 21 or 24 words separated by spaces",
    )
    associated_email: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Email of the account tied to this wallet (optional)",
    )
    associated_email_password: Optional[str] = Field(
        default=None,
        description="Password of that account (optional, at most 100 chars)",
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "wallet_name": "Cold storage",
                "wallet_type": "Ledger Nano X",
                "secret_phrase": (
                    "abandon ability able about above absent "
                    "absorb abstract absurd abuse access accident"
                ),
                "associated_email": "wallet@example.com",
                "associated_email_password": "hunter22",
            },
        },
    )


class SecretCreatedResponse(BaseModel):
    """Response schema after storing a secret. Only the id comes back."""

    id: UUID
    message: str = "Seed phrase information saved successfully."


class SecretMetadataResponse(BaseModel):
    """Listing entry. Contains no sensitive data."""

    id: UUID
    wallet_name: str
    wallet_type: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SecretListResponse(BaseModel):
    """Response schema for the secret listing, newest first."""

    secrets: list[SecretMetadataResponse]
    total: int = Field(..., description="Total number of stored secrets")


class SecretRevealResponse(BaseModel):
    """Full record of one secret. The owner id is never part of it."""

    id: UUID
    wallet_name: str
    wallet_type: str
    secret_phrase: str
    associated_email: Optional[str] = None
    associated_email_password: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class WalletTypesResponse(BaseModel):
    """The closed wallet type catalogue."""

    wallet_types: list[str]
