"""Access token validation errors."""

from review_identity.core.enums import ErrorCode
from review_identity.core.errors import AuthenticationError


class TokenErrors:
    """Access token error constants.

    Returned by the token issuer's validate(); no storage is consulted.
    """

    MALFORMED = AuthenticationError(
        code=ErrorCode.TOKEN_MALFORMED,
        message="Malformed token",
    )

    EXPIRED = AuthenticationError(
        code=ErrorCode.TOKEN_EXPIRED,
        message="Token expired",
    )

    INVALID_SIGNATURE = AuthenticationError(
        code=ErrorCode.TOKEN_INVALID_SIGNATURE,
        message="Token signature is invalid",
    )
