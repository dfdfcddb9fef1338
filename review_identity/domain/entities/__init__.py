"""Domain entities."""

from review_identity.domain.entities.user import User
from review_identity.domain.entities.verification_record import VerificationRecord

__all__ = ["User", "VerificationRecord"]
