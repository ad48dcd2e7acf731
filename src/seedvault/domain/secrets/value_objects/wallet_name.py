"""Wallet name value object."""

from dataclasses import dataclass

from seedvault.domain.secrets.exceptions import InvalidWalletNameError

MAX_WALLET_NAME_LENGTH = 50


@dataclass(frozen=True)
class WalletName:
    """User-chosen label for a stored phrase, trimmed, 1-50 characters."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "Wallet name/label is required."
            raise InvalidWalletNameError(msg)

        trimmed = self.value.strip()
        if not trimmed:
            msg = "Wallet name/label is required."
            raise InvalidWalletNameError(msg)
        if len(trimmed) > MAX_WALLET_NAME_LENGTH:
            msg = f"Wallet name cannot exceed {MAX_WALLET_NAME_LENGTH} characters."
            raise InvalidWalletNameError(msg)

        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
