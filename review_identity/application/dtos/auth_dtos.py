"""Authentication DTOs (Data Transfer Objects).

Results carried from the services back to the presentation layer.

DTOs:
    - UserView: Sanitized user (no password hash, no secrets)
    - AuthResult: Token pair plus the user it was issued to
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from review_identity.domain.entities.user import User
from review_identity.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class UserView:
    """Sanitized user representation.

    Attributes:
        id: User identifier.
        email: Normalized email.
        display_name: Public name.
        role: Account role.
        email_verified: Ownership proven.
        email_verified_at: When ownership was proven.
        created_at: Registration time.
    """

    id: UUID
    email: str
    display_name: str
    role: UserRole
    email_verified: bool
    email_verified_at: datetime | None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        """Build the view from the entity, dropping the password hash."""
        return cls(
            id=user.id,
            email=user.email,
            display_name=user.display_name,
            role=user.role,
            email_verified=user.email_verified,
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Response from register, login and refresh.

    Attributes:
        access_token: JWT access token (short-lived).
        refresh_token: Opaque refresh token (long-lived, single use).
        user: Sanitized user.
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    user: UserView
    token_type: str = "bearer"
    expires_in: int = 3600
