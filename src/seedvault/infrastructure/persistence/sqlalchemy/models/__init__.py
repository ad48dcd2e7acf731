"""SQLAlchemy models for persistence layer."""

from seedvault.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    TimestampMixin,
)
from seedvault.infrastructure.persistence.sqlalchemy.models.secret_model import (
    SecretModel,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "SecretModel",
    "TimestampMixin",
]
