"""RefreshTokenRepository protocol (port).

Rotation safety lives here: revoke() is an atomic test-and-set, so of two
concurrent rotations of the same token exactly one wins.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID


@dataclass
class RefreshTokenData:
    """Data transfer object for a stored refresh token."""

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    created_at: datetime
    revoked_at: datetime | None = None
    revoked_reason: str | None = None

    def is_active(self, now: datetime | None = None) -> bool:
        """Not revoked and not expired."""
        return self.revoked_at is None and (now or datetime.now(UTC)) < self.expires_at


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token persistence operations.

    Token Lifecycle:
        1. Created on register/login/refresh
        2. Looked up by hash on refresh/logout
        3. Revoked on rotation or logout (never reactivated)
        4. Expired and revoked rows purged by the cleanup job
    """

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        """Create new refresh token.

        Args:
            user_id: Owning user.
            token_hash: Digest of the token (never store plaintext).
            expires_at: Expiration timestamp.
        """
        ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find refresh token by hash, revoked or not."""
        ...

    async def revoke(self, token_id: UUID, reason: str) -> bool:
        """Atomically revoke a token that is still active.

        Returns:
            True if this call revoked the token; False if it was already
            revoked, expired or missing.
        """
        ...

    async def delete_expired_or_revoked(self) -> int:
        """Purge unusable tokens. Returns number deleted."""
        ...
