"""Domain enums.

Available Enums:
    - UserRole: Account roles (admin, user)
    - VerificationKind: Email-proof flow of a verification record
"""

from review_identity.domain.enums.user_role import UserRole
from review_identity.domain.enums.verification_kind import VerificationKind

__all__ = [
    "UserRole",
    "VerificationKind",
]
