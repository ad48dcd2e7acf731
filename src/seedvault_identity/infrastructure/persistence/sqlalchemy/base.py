"""SQLAlchemy declarative base for seedvault_identity models.

Uses the same metadata as seedvault's Base to allow cross-module foreign keys.
"""

from seedvault.infrastructure.persistence.sqlalchemy.models.base import Base

# Use the same metadata as seedvault's Base so secrets can reference users
IdentityBase = Base
