"""RefreshTokenServiceProtocol - opaque refresh token generation.

Refresh tokens are random opaque strings handed to the client; only their
digest is stored.
"""

from datetime import datetime
from typing import Protocol


class RefreshTokenServiceProtocol(Protocol):
    """Protocol for refresh token generation and hashing.

    Implementations:
        - RefreshTokenService: review_identity/infrastructure/security/refresh_token_service.py
    """

    def generate_token(self) -> tuple[str, str]:
        """Generate refresh token and its hash.

        Returns:
            Tuple of (token, token_hash):
                - token: Plain token to return to user (urlsafe base64)
                - token_hash: Digest to store in database
        """
        ...

    def hash_token(self, token: str) -> str:
        """Digest a presented token for lookup."""
        ...

    def calculate_expiration(self) -> datetime:
        """Expiration datetime (UTC) for a token issued now."""
        ...
