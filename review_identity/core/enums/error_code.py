"""Machine-readable error codes.

The closed set of error tags produced by the identity core. Callers branch on
these codes (never on message text).

Categories:
- Input errors (INVALID_*, CODE_REQUIRED)
- Conflict errors (EMAIL_ALREADY_*)
- Authentication errors (INVALID_CREDENTIALS, INVALID_*_TOKEN, TOKEN_*)
- Not-found errors (USER_NOT_FOUND)
- Authorization errors (PERMISSION_DENIED)
- Dependency errors (EMAIL_SERVICE_NOT_CONFIGURED, EMAIL_SEND_FAILED, STORE_FAILURE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes produced by the identity core."""

    # Input errors
    INVALID_LENGTH = "invalid_length"
    INVALID_CREDENTIALS_FORMAT = "invalid_credentials_format"
    CODE_REQUIRED = "code_required"

    # Conflict errors
    EMAIL_ALREADY_USED = "email_already_used"
    EMAIL_ALREADY_VERIFIED = "email_already_verified"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_REFRESH_TOKEN = "invalid_refresh_token"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_MALFORMED = "token_malformed"
    TOKEN_INVALID_SIGNATURE = "token_invalid_signature"

    # Not-found errors
    USER_NOT_FOUND = "user_not_found"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # Dependency errors
    EMAIL_SERVICE_NOT_CONFIGURED = "email_service_not_configured"
    EMAIL_SEND_FAILED = "email_send_failed"
    STORE_FAILURE = "store_failure"
