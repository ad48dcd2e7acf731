"""SQLAlchemy repository implementations."""

from seedvault.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from seedvault.infrastructure.persistence.sqlalchemy.repositories.secrets import (
    SecretRepositorySQLAlchemy,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "SecretRepositorySQLAlchemy",
]
