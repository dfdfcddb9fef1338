"""Token issuer protocol for domain layer.

Access tokens are short-lived signed JWTs validated without any storage
access. They cannot be revoked individually; ending a session revokes the
refresh token and the access token simply runs out.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from review_identity.core.errors import AuthenticationError
from review_identity.core.result import Result


@dataclass(frozen=True)
class AccessTokenClaims:
    """Verified claims of an access token.

    Attributes:
        user_id: Subject (sub).
        issued_at: Issued-at (iat), UTC.
        expires_at: Expiry (exp), UTC.
        token_id: Unique token id (jti).
    """

    user_id: UUID
    issued_at: datetime
    expires_at: datetime
    token_id: str


class TokenGenerationProtocol(Protocol):
    """Access token issuance and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 signed JWT

    Usage:
        token = token_service.issue(user.id)

        match token_service.validate(token):
            case Success(value=claims):
                user_id = claims.user_id
            case Failure(error=error):
                # TOKEN_MALFORMED, TOKEN_EXPIRED or TOKEN_INVALID_SIGNATURE
                ...
    """

    def issue(self, user_id: UUID) -> str:
        """Mint a signed access token for the user.

        Args:
            user_id: Stored in the 'sub' claim.

        Returns:
            Encoded token (header.payload.signature).
        """
        ...

    def validate(self, token: str) -> Result[AccessTokenClaims, AuthenticationError]:
        """Verify signature and expiry and extract the claims.

        Never blocks: purely cryptographic.
        """
        ...
