"""SQLAlchemy repository adapters."""

from review_identity.infrastructure.persistence.repositories.email_verification_repository import (
    EmailVerificationRepository,
)
from review_identity.infrastructure.persistence.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)
from review_identity.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "EmailVerificationRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
