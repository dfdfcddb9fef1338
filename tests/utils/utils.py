"""Test builders and in-memory doubles."""

import asyncio
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from review_identity.domain.entities.user import User
from review_identity.domain.entities.verification_record import VerificationRecord
from review_identity.domain.enums import UserRole, VerificationKind
from review_identity.domain.protocols import RefreshTokenData


def create_test_user(
    user_id: UUID | None = None,
    email: str = "reviewer@example.com",
    password_hash: str = "hashed_password",
    display_name: str = "Reviewer",
    role: UserRole = UserRole.USER,
    email_verified: bool = False,
) -> User:
    """Create a User with all required fields."""
    now = datetime.now(UTC)
    return User(
        id=user_id or uuid7(),
        email=email,
        password_hash=password_hash,
        display_name=display_name,
        role=role,
        email_verified=email_verified,
        email_verified_at=now if email_verified else None,
        created_at=now,
        updated_at=now,
    )


def create_test_record(
    kind: VerificationKind = VerificationKind.REGISTRATION_CODE,
    email: str = "reviewer@example.com",
    secret: str = "123456",
    expires_in: timedelta = timedelta(minutes=10),
    used: bool = False,
    user_id: UUID | None = None,
) -> VerificationRecord:
    """Create a VerificationRecord expiring `expires_in` from now."""
    now = datetime.now(UTC)
    return VerificationRecord(
        id=uuid7(),
        kind=kind,
        email=email,
        secret=secret,
        expires_at=now + expires_in,
        created_at=now,
        updated_at=now,
        used=used,
        user_id=user_id,
    )


class InMemoryRefreshTokenRepository:
    """RefreshTokenRepository double with the store's atomic revoke.

    Lookups yield to the event loop so concurrent callers interleave;
    revoke() checks and sets without yielding, like a conditional UPDATE.
    """

    def __init__(self) -> None:
        self.tokens: dict[UUID, RefreshTokenData] = {}

    async def save(
        self, user_id: UUID, token_hash: str, expires_at: datetime
    ) -> RefreshTokenData:
        data = RefreshTokenData(
            id=uuid7(),
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            created_at=datetime.now(UTC),
        )
        self.tokens[data.id] = data
        return data

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        await asyncio.sleep(0)
        for data in self.tokens.values():
            if data.token_hash == token_hash:
                return data
        return None

    async def revoke(self, token_id: UUID, reason: str) -> bool:
        data = self.tokens.get(token_id)
        if data is None or not data.is_active():
            return False
        self.tokens[token_id] = replace(
            data, revoked_at=datetime.now(UTC), revoked_reason=reason
        )
        return True

    async def delete_expired_or_revoked(self) -> int:
        dead = [k for k, v in self.tokens.items() if not v.is_active()]
        for key in dead:
            del self.tokens[key]
        return len(dead)

    def active_count(self) -> int:
        return sum(1 for v in self.tokens.values() if v.is_active())
