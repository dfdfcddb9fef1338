"""Application services."""

from review_identity.application.services.auth_service import AuthService
from review_identity.application.services.email_verification_service import (
    EmailVerificationService,
)
from review_identity.application.services.registration_service import (
    RegistrationService,
)

__all__ = [
    "AuthService",
    "EmailVerificationService",
    "RegistrationService",
]
