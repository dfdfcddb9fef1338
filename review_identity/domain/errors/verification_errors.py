"""Email verification error catalogue.

Shared by the pre-registration code flow and the verification link flow.
"""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
)


class VerificationErrors:
    """Email verification error constants."""

    CODE_REQUIRED = ValidationError(
        code=ErrorCode.CODE_REQUIRED,
        message="Email and code are required",
    )

    INVALID_TOKEN = AuthenticationError(
        code=ErrorCode.INVALID_TOKEN,
        message="Invalid verification code or token",
    )

    EXPIRED = AuthenticationError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Verification code or token has expired",
    )

    EMAIL_ALREADY_VERIFIED = ConflictError(
        code=ErrorCode.EMAIL_ALREADY_VERIFIED,
        message="Email is already verified",
        resource_type="User",
        conflicting_field="email_verified",
    )

    USER_NOT_FOUND = NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
    )

    EMAIL_SERVICE_NOT_CONFIGURED = DependencyError(
        code=ErrorCode.EMAIL_SERVICE_NOT_CONFIGURED,
        message="Email service is not configured",
        dependency="email",
    )
