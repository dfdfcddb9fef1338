"""Persistence layer: SQLAlchemy models, repositories, database, seeders."""

from review_identity.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)
from review_identity.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database"]
