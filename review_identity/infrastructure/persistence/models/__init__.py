"""Database models.

Importing this package registers every table on BaseModel.metadata
(required by create_all() and Alembic autogenerate).
"""

from review_identity.infrastructure.persistence.models.email_verification import (
    EmailVerification,
)
from review_identity.infrastructure.persistence.models.refresh_token import (
    RefreshToken,
)
from review_identity.infrastructure.persistence.models.user import User

__all__ = ["EmailVerification", "RefreshToken", "User"]
