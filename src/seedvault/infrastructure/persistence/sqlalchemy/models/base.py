"""Declarative base and timestamp columns shared by vault and identity tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from seedvault.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """One metadata for ``users`` and ``secrets`` so the FK between them resolves."""


class CreatedAtMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


class TimestampMixin(CreatedAtMixin):
    """Adds ``updated_at``, refreshed by SQLAlchemy on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
