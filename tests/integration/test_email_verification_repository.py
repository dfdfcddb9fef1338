"""Integration tests for EmailVerificationRepository (SQLite via aiosqlite).

Tests cover:
- Link tokens and registration codes are separate namespaces
- mark_used / link_token_to_user succeed exactly once
- Deletes (expired or used, by user, by email)
- A failed insert logs and returns no secret
"""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import text
from uuid_extensions import uuid7

from review_identity.application.services.store_call import store_call
from review_identity.core.result import Failure
from review_identity.domain.enums import VerificationKind
from review_identity.infrastructure.logging import ConsoleAdapter
from review_identity.infrastructure.persistence.repositories import (
    EmailVerificationRepository,
    UserRepository,
)
from tests.utils.utils import create_test_user

LATER = timedelta(hours=1)


@pytest.fixture
def repo(db_session):
    return EmailVerificationRepository(session=db_session)


async def _create(repo, kind, email="reviewer@example.com", secret="123456", **kwargs):
    kwargs.setdefault("expires_at", datetime.now(UTC) + LATER)
    return await repo.create(kind=kind, email=email, secret=secret, **kwargs)


@pytest.mark.integration
class TestEmailVerificationLookups:
    """Test kind-scoped lookups."""

    async def test_get_by_token_only_matches_links(self, repo):
        await _create(repo, VerificationKind.REGISTRATION_CODE, secret="shared")

        assert await repo.get_by_token("shared") is None

        link = await _create(repo, VerificationKind.EMAIL_LINK, secret="shared")
        found = await repo.get_by_token("shared")
        assert found is not None
        assert found.id == link.id
        assert found.kind == VerificationKind.EMAIL_LINK

    async def test_get_by_email_and_token_only_matches_codes(self, repo):
        await _create(repo, VerificationKind.EMAIL_LINK, secret="654321")

        assert await repo.get_by_email_and_token("reviewer@example.com", "654321") is None

        code = await _create(repo, VerificationKind.REGISTRATION_CODE, secret="654321")
        found = await repo.get_by_email_and_token("reviewer@example.com", "654321")
        assert found.id == code.id
        assert await repo.get_by_email_and_token("other@example.com", "654321") is None

    async def test_get_latest_by_user_id(self, repo, db_session):
        user = create_test_user()
        await UserRepository(session=db_session).create(user)
        await _create(repo, VerificationKind.EMAIL_LINK, secret="old", user_id=user.id)
        newest = await _create(repo, VerificationKind.EMAIL_LINK, secret="new", user_id=user.id)

        found = await repo.get_latest_by_user_id(user.id)

        assert found.id == newest.id
        assert await repo.get_latest_by_user_id(uuid7()) is None

    async def test_timestamps_are_utc(self, repo):
        record = await _create(repo, VerificationKind.EMAIL_LINK, secret="tz")

        found = await repo.get_by_token("tz")

        assert found.expires_at.tzinfo is not None
        assert found.expires_at == record.expires_at


@pytest.mark.integration
class TestEmailVerificationConsumption:
    """Test single-use consumption."""

    async def test_mark_used_once(self, repo):
        await _create(repo, VerificationKind.EMAIL_LINK, secret="tok")

        assert await repo.mark_used("tok", kind=VerificationKind.EMAIL_LINK) is True
        assert await repo.mark_used("tok", kind=VerificationKind.EMAIL_LINK) is False
        assert (await repo.get_by_token("tok")).used is True

    async def test_mark_used_respects_kind_and_email(self, repo):
        await _create(repo, VerificationKind.REGISTRATION_CODE, secret="111111")

        assert await repo.mark_used("111111", kind=VerificationKind.EMAIL_LINK) is False
        assert (
            await repo.mark_used(
                "111111",
                kind=VerificationKind.REGISTRATION_CODE,
                email="other@example.com",
            )
            is False
        )
        assert (
            await repo.mark_used(
                "111111",
                kind=VerificationKind.REGISTRATION_CODE,
                email="reviewer@example.com",
            )
            is True
        )

    async def test_link_token_to_user_once(self, repo, db_session):
        user = create_test_user()
        await UserRepository(session=db_session).create(user)
        record = await _create(repo, VerificationKind.REGISTRATION_CODE)

        assert await repo.link_token_to_user(record.id, user.id) is True
        assert await repo.link_token_to_user(record.id, user.id) is False

        found = await repo.get_latest_by_user_id(user.id)
        assert found.id == record.id
        assert found.used is True


@pytest.mark.integration
class TestEmailVerificationDeletes:
    """Test bulk deletes."""

    async def test_delete_expired_or_used(self, repo):
        await _create(repo, VerificationKind.EMAIL_LINK, secret="live")
        await _create(
            repo,
            VerificationKind.EMAIL_LINK,
            secret="expired",
            expires_at=datetime.now(UTC) - timedelta(minutes=1),
        )
        await _create(repo, VerificationKind.REGISTRATION_CODE, secret="222222")
        await repo.mark_used("222222", kind=VerificationKind.REGISTRATION_CODE)

        assert await repo.delete_expired_or_used() == 2
        assert await repo.get_by_token("live") is not None

    async def test_delete_by_user_id(self, repo, db_session):
        user = create_test_user()
        await UserRepository(session=db_session).create(user)
        await _create(repo, VerificationKind.EMAIL_LINK, secret="a", user_id=user.id)
        await _create(repo, VerificationKind.EMAIL_LINK, secret="b", user_id=user.id)
        await _create(repo, VerificationKind.EMAIL_LINK, secret="c")

        assert await repo.delete_by_user_id(user.id) == 2
        assert await repo.get_by_token("c") is not None

    async def test_delete_by_email_keeps_links(self, repo):
        await _create(repo, VerificationKind.REGISTRATION_CODE, secret="333333")
        await _create(repo, VerificationKind.EMAIL_LINK, secret="link")

        assert await repo.delete_by_email("reviewer@example.com") == 1
        assert await repo.get_by_token("link") is not None
        assert await repo.get_by_email_and_token("reviewer@example.com", "333333") is None


@pytest.mark.integration
class TestStoreErrorOutput:
    """Driver errors surface without the secret being written."""

    async def test_failed_insert_does_not_log_secret(self, test_database, capsys):
        async with test_database.engine.begin() as conn:
            await conn.execute(text("DROP TABLE email_verifications"))
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        async with test_database.async_session() as session:
            result = await store_call(
                "create_registration_code",
                EmailVerificationRepository(session=session).create(
                    kind=VerificationKind.REGISTRATION_CODE,
                    email="reviewer@example.com",
                    secret="913377",
                    expires_at=datetime.now(UTC) + LATER,
                ),
                logger,
            )

        assert isinstance(result, Failure)
        assert "913377" not in result.error.message
        out = capsys.readouterr().out
        assert "store_operation_failed" in out
        assert "913377" not in out
