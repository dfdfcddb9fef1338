"""RefreshTokenRepository - SQLAlchemy implementation.

revoke() is a single conditional UPDATE; its rowcount decides which of two
concurrent rotations of the same token wins.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.domain.protocols import RefreshTokenData
from review_identity.infrastructure.persistence.base import ensure_utc
from review_identity.infrastructure.persistence.models.refresh_token import (
    RefreshToken,
)


def _to_data(model: RefreshToken) -> RefreshTokenData:
    """Convert database model to DTO."""
    return RefreshTokenData(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        expires_at=ensure_utc(model.expires_at),
        created_at=ensure_utc(model.created_at),
        revoked_at=ensure_utc(model.revoked_at) if model.revoked_at else None,
        revoked_reason=model.revoked_reason,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation of RefreshTokenRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> RefreshTokenData:
        now = datetime.now(UTC)
        token_model = RefreshToken(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            created_at=now,
            updated_at=now,
        )
        self.session.add(token_model)
        await self.session.commit()
        return _to_data(token_model)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find refresh token by hash.

        Revoked and expired tokens are returned too; callers check
        is_active() and the atomic revoke() has the final word.
        """
        stmt = select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def revoke(self, token_id: UUID, reason: str) -> bool:
        """Revoke a token if, and only if, it is still active.

        Args:
            token_id: Token's unique identifier.
            reason: Stored in revoked_reason ("rotated", "logout").

        Returns:
            True if this call performed the revocation.
        """
        now = datetime.now(UTC)
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.id == token_id,
                RefreshToken.revoked_at.is_(None),
                RefreshToken.expires_at > now,
            )
            .values(revoked_at=now, revoked_reason=reason, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount == 1

    async def delete_expired_or_revoked(self) -> int:
        """Delete tokens that can never be used again.

        Returns:
            Number of tokens deleted.
        """
        now = datetime.now(UTC)
        stmt = (
            delete(RefreshToken)
            .where(
                or_(
                    RefreshToken.revoked_at.is_not(None),
                    RefreshToken.expires_at <= now,
                )
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0
