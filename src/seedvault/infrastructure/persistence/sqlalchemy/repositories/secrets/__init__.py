from seedvault.infrastructure.persistence.sqlalchemy.repositories.secrets.secret_repository import (  # noqa: E501
    SecretRepositorySQLAlchemy,
)

__all__ = ["SecretRepositorySQLAlchemy"]
