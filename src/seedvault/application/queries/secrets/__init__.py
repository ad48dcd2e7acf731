from seedvault.application.queries.secrets.list_secret_metadata_query import (
    ListSecretMetadataQuery,
    SecretMetadataListResult,
)
from seedvault.application.queries.secrets.reveal_secret_query import (
    RevealedSecret,
    RevealSecretQuery,
)

__all__ = [
    "ListSecretMetadataQuery",
    "RevealSecretQuery",
    "RevealedSecret",
    "SecretMetadataListResult",
]
