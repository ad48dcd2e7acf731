"""SQLAlchemy persistence for the identity domain.

Usage:
    from seedvault_identity.infrastructure.persistence.sqlalchemy import (
        UserModel,
        UserRepositorySQLAlchemy,
    )
"""

from seedvault_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from seedvault_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from seedvault_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
