"""Secrets domain exceptions.

Validation failures map to 400, lookups that miss (including foreign
records) map to 404 with the same message, so the API never reveals that
another user's secret exists.
"""

from typing import Any

from seedvault.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidSecretPhraseError(ValidationError):
    """Raised when a recovery phrase has the wrong shape."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, ErrorCode.INVALID_SECRET_PHRASE, details)


class InvalidWalletNameError(ValidationError):
    """Raised when a wallet name is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_WALLET_NAME)


class InvalidWalletTypeError(ValidationError):
    """Raised when a wallet type is not in the catalogue."""

    def __init__(self, wallet_type: str) -> None:
        super().__init__(
            "Invalid wallet type selected.",
            ErrorCode.INVALID_WALLET_TYPE,
            {"wallet_type": wallet_type},
        )


class InvalidAssociatedEmailError(ValidationError):
    """Raised when the email stored alongside a phrase is malformed."""

    def __init__(self) -> None:
        super().__init__(
            "Associated email must be a valid email address.",
            ErrorCode.INVALID_ASSOCIATED_EMAIL,
        )


class InvalidAssociatedPasswordError(ValidationError):
    """Raised when the password stored alongside a phrase is too long."""

    def __init__(self, max_length: int) -> None:
        super().__init__(
            f"Associated password cannot exceed {max_length} characters.",
            ErrorCode.INVALID_ASSOCIATED_PASSWORD,
        )


class InvalidSecretIdError(ValidationError):
    """Raised when a secret id is not a well-formed UUID."""

    def __init__(self, raw_id: str) -> None:
        super().__init__(
            "Invalid seed phrase ID format.",
            ErrorCode.INVALID_ID,
            {"secret_id": raw_id},
        )


class SecretNotFoundError(EntityNotFoundError):
    """Raised when a secret is missing or owned by someone else."""

    def __init__(self, secret_id: Any) -> None:
        super().__init__(
            "Seed phrase not found.",
            ErrorCode.SECRET_NOT_FOUND,
            {"secret_id": str(secret_id)},
        )
