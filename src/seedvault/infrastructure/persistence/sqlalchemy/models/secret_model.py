"""SQLAlchemy model for stored secrets."""

from typing import Optional
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from seedvault.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
)


class SecretModel(Base, CreatedAtMixin):
    """One recovery phrase row, owned by exactly one user.

    Rows go away with their owner (ON DELETE CASCADE). The composite index
    serves the newest-first listing per owner.
    """

    __tablename__ = "secrets"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    wallet_name: Mapped[str] = mapped_column(String(50), nullable=False)
    wallet_type: Mapped[str] = mapped_column(String(100), nullable=False)
    secret_phrase: Mapped[str] = mapped_column(Text, nullable=False)
    associated_email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    associated_email_password: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_secrets_owner_id_created_at", "owner_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<SecretModel(id={self.id}, owner_id={self.owner_id}, "
            f"wallet_name={self.wallet_name!r})>"
        )
