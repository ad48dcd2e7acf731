"""Secrets domain: recovery phrases stored per owner.

This domain handles:
- The Secret entity and its metadata projection
- Validation of phrases, wallet names and wallet types
- The owner-scoped repository contract
"""

from seedvault.domain.secrets.entities import (
    MAX_ASSOCIATED_PASSWORD_LENGTH,
    Secret,
    SecretMetadata,
)
from seedvault.domain.secrets.exceptions import (
    InvalidAssociatedEmailError,
    InvalidAssociatedPasswordError,
    InvalidSecretIdError,
    InvalidSecretPhraseError,
    InvalidWalletNameError,
    InvalidWalletTypeError,
    SecretNotFoundError,
)
from seedvault.domain.secrets.repositories import SecretRepository
from seedvault.domain.secrets.value_objects import (
    ALLOWED_WORD_COUNTS,
    MAX_WALLET_NAME_LENGTH,
    WALLET_TYPES,
    SecretPhrase,
    WalletName,
    WalletType,
    parse_secret_id,
)

__all__ = [
    "ALLOWED_WORD_COUNTS",
    "MAX_ASSOCIATED_PASSWORD_LENGTH",
    "MAX_WALLET_NAME_LENGTH",
    "WALLET_TYPES",
    "InvalidAssociatedEmailError",
    "InvalidAssociatedPasswordError",
    "InvalidSecretIdError",
    "InvalidSecretPhraseError",
    "InvalidWalletNameError",
    "InvalidWalletTypeError",
    "Secret",
    "SecretMetadata",
    "SecretNotFoundError",
    "SecretPhrase",
    "SecretRepository",
    "WalletName",
    "WalletType",
    "parse_secret_id",
]
