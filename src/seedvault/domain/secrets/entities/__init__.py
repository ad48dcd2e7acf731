from seedvault.domain.secrets.entities.secret import (
    MAX_ASSOCIATED_PASSWORD_LENGTH,
    Secret,
    SecretMetadata,
)

__all__ = ["MAX_ASSOCIATED_PASSWORD_LENGTH", "Secret", "SecretMetadata"]
