"""EmailVerificationRepository protocol (port) for domain layer.

Verification records of both flows share one store. Lookups are scoped by
kind: get_by_token() only sees link tokens and get_by_email_and_token()
only sees registration codes.

Single-use enforcement is delegated to the store: mark_used() and
link_token_to_user() only succeed on a record that is still unused.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from review_identity.domain.entities.verification_record import VerificationRecord
from review_identity.domain.enums import VerificationKind


class EmailVerificationRepository(Protocol):
    """Protocol for verification record persistence.

    Record Lifecycle:
        1. Created per send attempt
        2. Looked up (non-consuming) by token or by (email, code)
        3. Consumed once: mark_used() or link_token_to_user()
        4. Expired and used records swept by the cleanup job
    """

    async def create(
        self,
        *,
        kind: VerificationKind,
        email: str,
        secret: str,
        expires_at: datetime,
        user_id: UUID | None = None,
    ) -> VerificationRecord:
        """Store a new pending record."""
        ...

    async def get_by_token(self, token: str) -> VerificationRecord | None:
        """Find a link record by its token (used or not)."""
        ...

    async def get_by_email_and_token(
        self, email: str, token: str
    ) -> VerificationRecord | None:
        """Find a registration-code record by exact (email, code)."""
        ...

    async def get_latest_by_user_id(self, user_id: UUID) -> VerificationRecord | None:
        """Most recently created record linked to the user."""
        ...

    async def mark_used(
        self,
        secret: str,
        *,
        kind: VerificationKind,
        email: str | None = None,
    ) -> bool:
        """Atomically mark an unused record as used.

        Args:
            secret: Token or code.
            kind: Namespace of the secret.
            email: Required to disambiguate registration codes.

        Returns:
            True if this call consumed the record.
        """
        ...

    async def link_token_to_user(self, record_id: UUID, user_id: UUID) -> bool:
        """Atomically set user_id and used=True on an unused record.

        Returns:
            True if this call consumed the record.
        """
        ...

    async def delete_expired_or_used(self) -> int:
        """Delete every expired or used record. Returns number deleted."""
        ...

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every record linked to the user."""
        ...

    async def delete_by_email(self, email: str) -> int:
        """Delete registration-code records for the email."""
        ...
