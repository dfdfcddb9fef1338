"""Declarative bases for the identity tables.

Domain entities never inherit from these; repositories translate.

The generic Uuid and DateTime(timezone=True) column types keep the schema
portable between PostgreSQL (production) and SQLite (tests).
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Shared metadata, a UUIDv7 primary key and created_at."""

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BaseMutableModel(BaseModel):
    """BaseModel plus updated_at, for rows changed after insert."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime read back from the database.

    PostgreSQL returns aware datetimes for DateTime(timezone=True); SQLite
    returns naive ones. Every timestamp this package writes is UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
