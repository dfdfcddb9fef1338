"""Authentication error catalogue.

Canonical error values for register/login/refresh/logout. Every failure of
the same kind returns the same instance, so callers (and tests) can compare
with ``==`` and the login path cannot leak which check failed.

Usage:
    from review_identity.domain.errors import AuthErrors

    if user is None or not password_ok:
        return Failure(error=AuthErrors.INVALID_CREDENTIALS)
"""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
)


class AuthErrors:
    """Authentication error constants."""

    # Credential errors (identical for unknown email and wrong password)
    INVALID_CREDENTIALS = AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid email or password",
    )

    # Session errors (missing, revoked and expired are indistinguishable)
    INVALID_REFRESH_TOKEN = AuthenticationError(
        code=ErrorCode.INVALID_REFRESH_TOKEN,
        message="Invalid or expired refresh token",
    )

    # Access token subject no longer resolves
    INVALID_ACCESS_TOKEN = AuthenticationError(
        code=ErrorCode.INVALID_TOKEN,
        message="Invalid access token",
    )

    EMAIL_ALREADY_USED = ConflictError(
        code=ErrorCode.EMAIL_ALREADY_USED,
        message="Email is already registered",
        resource_type="User",
        conflicting_field="email",
    )

    PERMISSION_DENIED = AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message="Insufficient permissions",
    )
