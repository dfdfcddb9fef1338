"""create_identity_tables

Revision ID: 5b1e7c2a9d40
Revises:
Create Date: 2026-03-01 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5b1e7c2a9d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create users, refresh_tokens and email_verifications."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password (cost factor 12)",
        ),
        sa.Column(
            "display_name",
            sa.String(length=50),
            nullable=False,
            comment="Public display name",
        ),
        sa.Column(
            "role",
            sa.String(length=20),
            server_default="user",
            nullable=False,
            comment="Account role (user, admin)",
        ),
        sa.Column(
            "email_verified",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            comment="Email ownership proven",
        ),
        sa.Column(
            "email_verified_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="When email ownership was proven",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "refresh_tokens",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="User who owns this refresh token",
        ),
        sa.Column(
            "token_hash",
            sa.String(length=64),
            nullable=False,
            comment="SHA-256 hex digest of the refresh token (NEVER plaintext)",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Timestamp when token expires",
        ),
        sa.Column(
            "revoked_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Timestamp when token was revoked (NULL = active)",
        ),
        sa.Column(
            "revoked_reason",
            sa.String(length=50),
            nullable=True,
            comment="Why token was revoked (rotated, logout)",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_refresh_tokens_user_id", "refresh_tokens", ["user_id"])
    op.create_index(
        "ix_refresh_tokens_token_hash", "refresh_tokens", ["token_hash"], unique=True
    )
    op.create_index("ix_refresh_tokens_expires_at", "refresh_tokens", ["expires_at"])

    op.create_table(
        "email_verifications",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "kind",
            sa.String(length=32),
            nullable=False,
            comment="Verification flow (registration_code, email_link)",
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Target email address",
        ),
        sa.Column(
            "secret",
            sa.String(length=64),
            nullable=False,
            comment="Numeric code or hex token",
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=True,
            comment="Linked user (NULL until a registration code is consumed)",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Timestamp when the secret expires",
        ),
        sa.Column(
            "used",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
            comment="Consumed flag",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "kind", "email", "secret", name="uq_email_verifications_kind_email_secret"
        ),
    )
    op.create_index("ix_email_verifications_email", "email_verifications", ["email"])
    op.create_index("ix_email_verifications_secret", "email_verifications", ["secret"])
    op.create_index("ix_email_verifications_user_id", "email_verifications", ["user_id"])
    op.create_index(
        "ix_email_verifications_expires_at", "email_verifications", ["expires_at"]
    )


def downgrade() -> None:
    """Drop the identity tables."""
    op.drop_table("email_verifications")
    op.drop_table("refresh_tokens")
    op.drop_table("users")
