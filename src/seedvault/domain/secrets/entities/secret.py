"""Stored secret entity and its listing projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from seedvault.domain.secrets.exceptions import (
    InvalidAssociatedEmailError,
    InvalidAssociatedPasswordError,
)
from seedvault.domain.secrets.value_objects import (
    SecretPhrase,
    WalletName,
    WalletType,
)
from seedvault.domain.shared.time import utc_now
from seedvault.domain.shared.value_objects import SecureString
from seedvault_identity.domain.user import is_valid_email

MAX_ASSOCIATED_PASSWORD_LENGTH = 100


@dataclass(frozen=True)
class SecretMetadata:
    """Listing view of a secret. Carries no sensitive field."""

    id: UUID
    wallet_name: str
    wallet_type: str
    created_at: datetime


@dataclass
class Secret:
    """
    Entity representing one stored recovery phrase.

    The owner is fixed at creation. The recovery phrase and the optional
    associated account password are SecureStrings; the associated email is
    stored as given (trimmed) after a format check.
    """

    owner_id: UUID
    wallet_name: WalletName
    wallet_type: WalletType
    secret_phrase: SecretPhrase
    associated_email: Optional[str] = None
    associated_email_password: Optional[SecureString] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        owner_id: UUID,
        wallet_name: str,
        wallet_type: str,
        secret_phrase: str,
        associated_email: Optional[str] = None,
        associated_email_password: Optional[str] = None,
    ) -> Secret:
        """Validate raw input and build a new secret.

        Empty associated values are stored as None.
        """
        return cls(
            owner_id=owner_id,
            wallet_name=WalletName(wallet_name),
            wallet_type=WalletType(wallet_type),
            secret_phrase=SecretPhrase.parse(secret_phrase),
            associated_email=_clean_associated_email(associated_email),
            associated_email_password=_clean_associated_password(
                associated_email_password,
            ),
        )

    def __repr__(self) -> str:
        return (
            f"Secret(id={self.id}, owner_id={self.owner_id}, "
            f"wallet_name={self.wallet_name.value!r}, "
            f"wallet_type={self.wallet_type.value!r}, phrase=*****)"
        )


def _clean_associated_email(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    if not is_valid_email(trimmed):
        raise InvalidAssociatedEmailError
    return trimmed


def _clean_associated_password(value: Optional[str]) -> Optional[SecureString]:
    if value is not None and len(value) > MAX_ASSOCIATED_PASSWORD_LENGTH:
        raise InvalidAssociatedPasswordError(MAX_ASSOCIATED_PASSWORD_LENGTH)
    return SecureString.optional(value)
