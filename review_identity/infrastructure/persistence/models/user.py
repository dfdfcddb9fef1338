"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email: unique, stored trimmed and lowercased
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from review_identity.domain.enums import UserRole
from review_identity.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and account management.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user registered (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        display_name: Public display name
        role: "user" or "admin"
        email_verified: Email ownership proven
        email_verified_at: When ownership was proven (nullable)

    Indexes:
        - ix_users_email: (email) unique, for login and registration
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password (cost factor 12)",
    )

    display_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Public display name",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=UserRole.USER.value,
        server_default=UserRole.USER.value,
        comment="Account role (user, admin)",
    )

    email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="Email ownership proven",
    )

    email_verified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When email ownership was proven",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
