from seedvault.domain.secrets.repositories.secret_repository import SecretRepository

__all__ = ["SecretRepository"]
