"""User domain entity.

Pure business logic, no framework dependencies.

Email Verification:
    - email_verified: Ownership of the email address has been proven
    - email_verified_at: Set if and only if email_verified is True
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from review_identity.domain.enums import UserRole


@dataclass
class User:
    """User account entity.

    Business Rules:
        - Email is unique and stored normalized (trimmed, lowercase)
        - Role defaults to USER
        - Verified timestamp is present exactly when the verified flag is set
        - Never hard-deleted by the identity core

    Attributes:
        id: Unique user identifier
        email: Normalized email address
        password_hash: bcrypt hash (never plaintext)
        display_name: Public name shown on reviews
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated
        role: Account role
        email_verified: Email ownership proven
        email_verified_at: When ownership was proven (None while unverified)

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="reader@example.com",
        ...     password_hash="$2b$12$...",
        ...     display_name="Reader",
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.mark_email_verified()
        >>> user.email_verified
        True
    """

    id: UUID
    email: str
    password_hash: str
    display_name: str
    created_at: datetime
    updated_at: datetime
    role: UserRole = UserRole.USER
    email_verified: bool = False
    email_verified_at: datetime | None = None

    def __post_init__(self) -> None:
        """Reject a verified flag without a timestamp (and vice versa).

        Raises:
            ValueError: If flag and timestamp disagree.
        """
        if self.email_verified != (self.email_verified_at is not None):
            raise ValueError(
                "email_verified_at must be set if and only if email_verified is True"
            )

    def mark_email_verified(self, at: datetime | None = None) -> datetime:
        """Record proof of email ownership.

        Args:
            at: Verification time (defaults to now, UTC).

        Returns:
            The verification timestamp that was stored.
        """
        verified_at = at or datetime.now(UTC)
        self.email_verified = True
        self.email_verified_at = verified_at
        self.updated_at = verified_at
        return verified_at

    def is_admin(self) -> bool:
        """Check if user holds the admin role."""
        return self.role == UserRole.ADMIN
