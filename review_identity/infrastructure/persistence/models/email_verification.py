"""Email verification database model.

One table for both email-proof flows, tagged by kind:
    registration_code: numeric code, user_id NULL until completion
    email_link: 64-char hex token, user_id set at creation
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from review_identity.infrastructure.persistence.base import BaseMutableModel


class EmailVerification(BaseMutableModel):
    """Verification record model.

    Fields:
        kind: registration_code or email_link
        email: Target email address
        secret: Code or token
        user_id: Linked user (nullable)
        expires_at: Expiry timestamp
        used: Consumed flag (set once, never cleared)

    Constraints:
        - uq_email_verifications_kind_email_secret: a secret is unique per
          (kind, email), which is also the lookup key for codes

    Foreign Keys:
        - user_id: References users(id) ON DELETE CASCADE
    """

    __tablename__ = "email_verifications"
    __table_args__ = (
        UniqueConstraint(
            "kind", "email", "secret", name="uq_email_verifications_kind_email_secret"
        ),
    )

    kind: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Verification flow (registration_code, email_link)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Target email address",
    )

    secret: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Numeric code or hex token",
    )

    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="Linked user (NULL until a registration code is consumed)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Timestamp when the secret expires",
    )

    used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="Consumed flag",
    )
