"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token
    - Required claims: sub, iat, exp

Access tokens are never revocable individually; they expire naturally once
the refresh token behind the session has been revoked.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import (
    ExpiredSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
)
from uuid_extensions import uuid7

from review_identity.core.constants import MIN_SECRET_KEY_BYTES
from review_identity.core.errors import AuthenticationError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.errors import TokenErrors
from review_identity.domain.protocols import AccessTokenClaims


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        from review_identity.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.issue(user.id)
        result = token_service.validate(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 60) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            expiration_minutes: Token lifetime in minutes (default: 60).

        Raises:
            ValueError: If secret_key is too short or the lifetime is not positive.
        """
        if len(secret_key.encode("utf-8")) < MIN_SECRET_KEY_BYTES:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if expiration_minutes <= 0:
            msg = "Access token lifetime must be positive"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"  # HMAC-SHA256

    def issue(self, user_id: UUID) -> str:
        """Generate JWT access token.

        Args:
            user_id: User's unique identifier.

        Returns:
            JWT access token string.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.issue(uuid7())
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate(self, token: str) -> Result[AccessTokenClaims, AuthenticationError]:
        """Validate JWT access token and extract claims.

        Args:
            token: JWT access token string to validate.

        Returns:
            Success(AccessTokenClaims), or Failure with TOKEN_EXPIRED,
            TOKEN_INVALID_SIGNATURE or TOKEN_MALFORMED.

        Note:
            - ExpiredSignatureError and InvalidSignatureError both subclass
              InvalidTokenError, so they are matched first.
            - Stateless (no database lookup)
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(error=TokenErrors.EXPIRED)
        except InvalidSignatureError:
            return Failure(error=TokenErrors.INVALID_SIGNATURE)
        except InvalidTokenError:
            return Failure(error=TokenErrors.MALFORMED)

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError:
            return Failure(error=TokenErrors.MALFORMED)

        return Success(
            value=AccessTokenClaims(
                user_id=user_id,
                issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
                token_id=str(payload.get("jti", "")),
            )
        )
