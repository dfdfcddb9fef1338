"""Refresh token database model.

Security:
    - token_hash: SHA-256 of the opaque token (NOT plaintext)
    - revoked_at: Set on rotation or logout, never cleared
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from review_identity.infrastructure.persistence.base import BaseMutableModel


class RefreshToken(BaseMutableModel):
    """Refresh token model.

    Token Lifecycle:
        1. Created on register/login/refresh
        2. Revoked (revoked_at set) on rotation or logout
        3. Expires naturally after refresh_token_expire_days
        4. Purged by the cleanup job once expired or revoked

    Indexes:
        - ix_refresh_tokens_user_id: (user_id) for a user's sessions
        - ix_refresh_tokens_token_hash: (token_hash) unique, for lookup
        - ix_refresh_tokens_expires_at: (expires_at) for cleanup queries

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )

    token_hash: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the refresh token (NEVER plaintext)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Timestamp when token expires",
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp when token was revoked (NULL = active)",
    )

    revoked_reason: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Why token was revoked (rotated, logout)",
    )
