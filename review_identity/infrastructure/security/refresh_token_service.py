"""Opaque refresh tokens.

A token is 32 random bytes in urlsafe base64. Only its SHA-256 hex digest
is stored: with 256 bits of entropy a fast unsalted digest cannot be
brute-forced and keeps lookups on a unique index. Expiry lives in the
database row, not in the token.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from review_identity.core.constants import REFRESH_TOKEN_BYTES


class RefreshTokenService:
    """Issues refresh tokens and digests presented ones.

    Args:
        expiration_days: Lifetime of a new token.
    """

    def __init__(self, expiration_days: int = 30) -> None:
        self._lifetime = timedelta(days=expiration_days)

    def generate_token(self) -> tuple[str, str]:
        """Return (token for the client, digest for the store).

        >>> token, digest = RefreshTokenService().generate_token()
        >>> len(token), len(digest)
        (43, 64)
        """
        token = secrets.token_urlsafe(REFRESH_TOKEN_BYTES)
        return token, self.hash_token(token)

    def hash_token(self, token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def calculate_expiration(self) -> datetime:
        return datetime.now(UTC) + self._lifetime
