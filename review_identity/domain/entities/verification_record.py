"""Verification record entity.

A time-bounded, single-use secret proving control of an email address.
One shape serves both flows; `kind` says which:

    REGISTRATION_CODE: numeric code, user_id None until the new account
        is linked on completion.
    EMAIL_LINK: 64-char hex token, user_id set at creation.

Lifecycle:
    pending -> used (exactly once, irreversible)
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from review_identity.domain.enums import VerificationKind


@dataclass
class VerificationRecord:
    """Stored verification secret.

    Attributes:
        id: Record identifier
        kind: Which email-proof flow issued the record
        email: Target email address (normalized)
        secret: Numeric code or hex token
        expires_at: Expiry timestamp (timezone-aware)
        used: Consumed flag
        user_id: Linked account (None for an unconsumed registration code)
        created_at: Creation timestamp
        updated_at: Last modification timestamp
    """

    id: UUID
    kind: VerificationKind
    email: str
    secret: str
    expires_at: datetime
    created_at: datetime
    updated_at: datetime
    used: bool = False
    user_id: UUID | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the expiry timestamp has passed."""
        return (now or datetime.now(UTC)) >= self.expires_at

    def is_valid(self, now: datetime | None = None) -> bool:
        """Unused and not yet expired.

        Args:
            now: Reference time (defaults to now, UTC).

        Returns:
            bool: True if the secret may still be redeemed.
        """
        return not self.used and not self.is_expired(now)

    @property
    def is_linked(self) -> bool:
        """True once a user id is attached."""
        return self.user_id is not None
