from seedvault.domain.secrets.value_objects.secret_id import parse_secret_id
from seedvault.domain.secrets.value_objects.secret_phrase import (
    ALLOWED_WORD_COUNTS,
    SecretPhrase,
)
from seedvault.domain.secrets.value_objects.wallet_name import (
    MAX_WALLET_NAME_LENGTH,
    WalletName,
)
from seedvault.domain.secrets.value_objects.wallet_type import (
    WALLET_TYPES,
    WalletType,
)

__all__ = [
    "ALLOWED_WORD_COUNTS",
    "MAX_WALLET_NAME_LENGTH",
    "WALLET_TYPES",
    "SecretPhrase",
    "WalletName",
    "WalletType",
    "parse_secret_id",
]
