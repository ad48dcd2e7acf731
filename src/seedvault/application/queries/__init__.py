"""Query layer - read operations that never mutate state."""

from seedvault.application.queries.secrets import (
    ListSecretMetadataQuery,
    RevealedSecret,
    RevealSecretQuery,
    SecretMetadataListResult,
)

__all__ = [
    "ListSecretMetadataQuery",
    "RevealSecretQuery",
    "RevealedSecret",
    "SecretMetadataListResult",
]
