"""Integration tests for the cleanup job."""

from datetime import UTC, datetime, timedelta

import pytest

from review_identity.domain.enums import VerificationKind
from review_identity.infrastructure.jobs import CleanupSummary, run_verification_cleanup
from review_identity.infrastructure.persistence.repositories import (
    EmailVerificationRepository,
    RefreshTokenRepository,
    UserRepository,
)
from tests.utils.utils import create_test_user


@pytest.mark.integration
async def test_cleanup_removes_spent_secrets(test_database):
    past = datetime.now(UTC) - timedelta(minutes=1)
    future = datetime.now(UTC) + timedelta(hours=1)

    async with test_database.get_session() as session:
        user = create_test_user()
        await UserRepository(session=session).create(user)

        records = EmailVerificationRepository(session=session)
        await records.create(
            kind=VerificationKind.EMAIL_LINK, email=user.email, secret="live", expires_at=future
        )
        await records.create(
            kind=VerificationKind.EMAIL_LINK, email=user.email, secret="old", expires_at=past
        )
        await records.create(
            kind=VerificationKind.REGISTRATION_CODE,
            email=user.email,
            secret="444444",
            expires_at=future,
        )
        await records.mark_used("444444", kind=VerificationKind.REGISTRATION_CODE)

        tokens = RefreshTokenRepository(session=session)
        await tokens.save(user.id, "d" * 64, future)
        await tokens.save(user.id, "e" * 64, past)

    summary = await run_verification_cleanup(test_database)

    assert summary == CleanupSummary(verification_records=2, refresh_tokens=1)
    async with test_database.get_session() as session:
        assert await EmailVerificationRepository(session=session).get_by_token("live")
        assert await RefreshTokenRepository(session=session).find_by_token_hash("d" * 64)


@pytest.mark.integration
async def test_cleanup_on_empty_database(test_database):
    summary = await run_verification_cleanup(test_database)

    assert summary == CleanupSummary(verification_records=0, refresh_tokens=0)
