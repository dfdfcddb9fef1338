"""Unit tests for AuthService.

Tests cover:
- Register (success, duplicate email, policy violations, lost race)
- Login (success, unknown email and wrong password are indistinguishable)
- Refresh (rotation, reuse rejected, concurrent rotation)
- Logout (revokes, second logout fails)
- Authenticate (access token -> user)
- Store failures become STORE_FAILURE

Architecture:
- Mocked repositories and collaborators (AsyncMock/Mock)
- In-memory refresh token store for the concurrency test
"""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from review_identity.application.services import AuthService
from review_identity.core.enums import ErrorCode
from review_identity.core.result import Failure, Success
from review_identity.domain.enums import UserRole
from review_identity.domain.errors import AuthErrors, TokenErrors
from review_identity.domain.protocols import AccessTokenClaims, RefreshTokenData
from review_identity.infrastructure.security import RefreshTokenService
from tests.utils.utils import InMemoryRefreshTokenRepository, create_test_user


def make_token_data(user_id, revoked=False, expired=False) -> RefreshTokenData:
    now = datetime.now(UTC)
    return RefreshTokenData(
        id=uuid7(),
        user_id=user_id,
        token_hash="digest",
        expires_at=now - timedelta(days=1) if expired else now + timedelta(days=30),
        created_at=now,
        revoked_at=now if revoked else None,
    )


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.create.side_effect = lambda user: Success(value=user)
    return repo


@pytest.fixture
def refresh_token_repo():
    return AsyncMock()


@pytest.fixture
def password_hasher():
    hasher = Mock()
    hasher.hash_password.return_value = "hashed"
    hasher.verify_password.return_value = True
    return hasher


@pytest.fixture
def token_service():
    service = Mock()
    service.issue.return_value = "access.jwt.token"
    return service


@pytest.fixture
def refresh_token_service():
    service = Mock()
    service.generate_token.return_value = ("refresh-token", "refresh-digest")
    service.hash_token.return_value = "digest"
    service.calculate_expiration.return_value = datetime.now(UTC) + timedelta(days=30)
    return service


@pytest.fixture
def auth_service(
    user_repo,
    refresh_token_repo,
    password_hasher,
    token_service,
    refresh_token_service,
    mock_logger,
):
    return AuthService(
        user_repo=user_repo,
        refresh_token_repo=refresh_token_repo,
        password_service=password_hasher,
        token_service=token_service,
        refresh_token_service=refresh_token_service,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestRegister:
    """Test AuthService.register."""

    async def test_register_creates_user_and_issues_pair(
        self, auth_service, user_repo, refresh_token_repo
    ):
        """Should normalize the email, create a USER and return tokens."""
        result = await auth_service.register("  Reader@Example.COM ", "password123", "Reader")

        assert isinstance(result, Success)
        auth = result.value
        assert auth.access_token == "access.jwt.token"
        assert auth.refresh_token == "refresh-token"
        assert auth.token_type == "bearer"
        assert auth.expires_in == 3600
        assert auth.user.email == "reader@example.com"
        assert auth.user.role == UserRole.USER
        assert auth.user.email_verified is False
        assert not hasattr(auth.user, "password_hash")

        user_repo.find_by_email.assert_awaited_once_with("reader@example.com")
        created = user_repo.create.call_args.args[0]
        assert created.password_hash == "hashed"
        refresh_token_repo.save.assert_awaited_once()
        assert refresh_token_repo.save.call_args.kwargs["token_hash"] == "refresh-digest"

    async def test_register_existing_email_fails_regardless_of_password(
        self, auth_service, user_repo, password_hasher
    ):
        """Should return EMAIL_ALREADY_USED without hashing or creating."""
        user_repo.find_by_email.return_value = create_test_user(email="dup@example.com")

        result = await auth_service.register("dup@example.com", "x", "")

        assert result == Failure(error=AuthErrors.EMAIL_ALREADY_USED)
        password_hasher.hash_password.assert_not_called()
        user_repo.create.assert_not_awaited()

    async def test_register_lost_race_on_unique_email(self, auth_service, user_repo):
        """Should pass through the repository's conflict."""
        user_repo.create.side_effect = None
        user_repo.create.return_value = Failure(error=AuthErrors.EMAIL_ALREADY_USED)

        result = await auth_service.register("race@example.com", "password123", "")

        assert result == Failure(error=AuthErrors.EMAIL_ALREADY_USED)

    @pytest.mark.parametrize(
        ("email", "password", "display_name", "field"),
        [
            ("not-an-email", "password123", "", "email"),
            ("reader@example.com", "short", "", "password"),
            ("reader@example.com", "p" * 73, "", "password"),
            ("reader@example.com", "password123", "n" * 51, "display_name"),
        ],
    )
    async def test_register_policy_violations(
        self, auth_service, user_repo, email, password, display_name, field
    ):
        """Should fail with INVALID_CREDENTIALS_FORMAT naming the field."""
        result = await auth_service.register(email, password, display_name)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS_FORMAT
        assert result.error.field == field
        user_repo.create.assert_not_awaited()

    async def test_blank_display_name_falls_back_to_local_part(self, auth_service):
        result = await auth_service.register("reader@example.com", "password123", "   ")

        assert isinstance(result, Success)
        assert result.value.user.display_name == "reader"

    async def test_store_exception_becomes_store_failure(
        self, auth_service, user_repo, mock_logger
    ):
        """Should log and return STORE_FAILURE instead of raising."""
        user_repo.find_by_email.side_effect = ConnectionError("db down")

        result = await auth_service.register("reader@example.com", "password123", "")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_FAILURE
        assert "find_user_by_email" in result.error.message
        mock_logger.error.assert_called_once()

    async def test_cancellation_is_not_swallowed(self, auth_service, user_repo):
        user_repo.find_by_email.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await auth_service.register("reader@example.com", "password123", "")


@pytest.mark.unit
class TestLogin:
    """Test AuthService.login."""

    async def test_login_success(self, auth_service, user_repo):
        user = create_test_user(email="reader@example.com")
        user_repo.find_by_email.return_value = user

        result = await auth_service.login(" READER@example.com", "password123")

        assert isinstance(result, Success)
        assert result.value.user.id == user.id
        user_repo.find_by_email.assert_awaited_once_with("reader@example.com")

    async def test_unknown_email_and_wrong_password_are_identical(
        self, auth_service, user_repo, password_hasher
    ):
        """Should return the same error value for both failures."""
        user_repo.find_by_email.return_value = None
        unknown = await auth_service.login("ghost@example.com", "password123")

        user_repo.find_by_email.return_value = create_test_user()
        password_hasher.verify_password.return_value = False
        mismatch = await auth_service.login("reviewer@example.com", "wrong")

        assert unknown == mismatch == Failure(error=AuthErrors.INVALID_CREDENTIALS)


@pytest.mark.unit
class TestRefresh:
    """Test AuthService.refresh."""

    async def test_refresh_rotates_token(
        self, auth_service, user_repo, refresh_token_repo
    ):
        user = create_test_user()
        token_data = make_token_data(user.id)
        refresh_token_repo.find_by_token_hash.return_value = token_data
        refresh_token_repo.revoke.return_value = True
        user_repo.find_by_id.return_value = user

        result = await auth_service.refresh("refresh-token")

        assert isinstance(result, Success)
        refresh_token_repo.revoke.assert_awaited_once_with(token_data.id, "rotated")
        refresh_token_repo.save.assert_awaited_once()

    @pytest.mark.parametrize(
        "token_data",
        [None, "revoked", "expired"],
    )
    async def test_refresh_rejects_missing_revoked_or_expired(
        self, auth_service, refresh_token_repo, token_data
    ):
        user_id = uuid7()
        refresh_token_repo.find_by_token_hash.return_value = (
            None
            if token_data is None
            else make_token_data(
                user_id,
                revoked=token_data == "revoked",
                expired=token_data == "expired",
            )
        )

        result = await auth_service.refresh("refresh-token")

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        refresh_token_repo.revoke.assert_not_awaited()

    async def test_refresh_loses_revoke_race(
        self, auth_service, refresh_token_repo, mock_logger
    ):
        """Should reject when the conditional revoke matched nothing."""
        refresh_token_repo.find_by_token_hash.return_value = make_token_data(uuid7())
        refresh_token_repo.revoke.return_value = False

        result = await auth_service.refresh("refresh-token")

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        mock_logger.warning.assert_called_once()

    async def test_empty_refresh_token_rejected(self, auth_service, refresh_token_repo):
        result = await auth_service.refresh("")

        assert result == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)
        refresh_token_repo.find_by_token_hash.assert_not_awaited()

    async def test_concurrent_refresh_has_exactly_one_winner(
        self, user_repo, password_hasher, token_service, mock_logger
    ):
        """Two rotations of the same token: one success, one rejection."""
        store = InMemoryRefreshTokenRepository()
        tokens = RefreshTokenService(expiration_days=30)
        service = AuthService(
            user_repo=user_repo,
            refresh_token_repo=store,
            password_service=password_hasher,
            token_service=token_service,
            refresh_token_service=tokens,
            logger=mock_logger,
        )
        user = create_test_user()
        user_repo.find_by_id.return_value = user
        other_session, other_hash = tokens.generate_token()
        await store.save(user.id, other_hash, tokens.calculate_expiration())
        presented, digest = tokens.generate_token()
        await store.save(user.id, digest, tokens.calculate_expiration())

        results = await asyncio.gather(
            service.refresh(presented), service.refresh(presented)
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert failures == [Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)]
        # Other session untouched, rotated one replaced by one new token
        assert store.active_count() == 2
        other = await store.find_by_token_hash(other_hash)
        assert other is not None and other.is_active()


@pytest.mark.unit
class TestLogout:
    """Test AuthService.logout."""

    async def test_logout_revokes_and_second_logout_fails(self, auth_service, refresh_token_repo):
        token_data = make_token_data(uuid7())
        refresh_token_repo.find_by_token_hash.return_value = token_data
        refresh_token_repo.revoke.return_value = True

        first = await auth_service.logout("refresh-token")

        assert first == Success(value=None)
        refresh_token_repo.revoke.assert_awaited_once_with(token_data.id, "logout")

        refresh_token_repo.find_by_token_hash.return_value = make_token_data(
            token_data.user_id, revoked=True
        )
        second = await auth_service.logout("refresh-token")

        assert second == Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)


@pytest.mark.unit
class TestAuthenticate:
    """Test AuthService.authenticate."""

    async def test_authenticate_returns_user(self, auth_service, token_service, user_repo):
        user = create_test_user()
        now = datetime.now(UTC)
        token_service.validate.return_value = Success(
            value=AccessTokenClaims(
                user_id=user.id,
                issued_at=now,
                expires_at=now + timedelta(hours=1),
                token_id="jti",
            )
        )
        user_repo.find_by_id.return_value = user

        result = await auth_service.authenticate("access.jwt.token")

        assert result == Success(value=user)

    async def test_authenticate_passes_through_token_errors(
        self, auth_service, token_service, user_repo
    ):
        token_service.validate.return_value = Failure(error=TokenErrors.EXPIRED)

        result = await auth_service.authenticate("stale")

        assert result == Failure(error=TokenErrors.EXPIRED)
        user_repo.find_by_id.assert_not_awaited()

    async def test_authenticate_unknown_subject(self, auth_service, token_service, user_repo):
        now = datetime.now(UTC)
        token_service.validate.return_value = Success(
            value=AccessTokenClaims(
                user_id=uuid7(), issued_at=now, expires_at=now, token_id="jti"
            )
        )
        user_repo.find_by_id.return_value = None

        result = await auth_service.authenticate("orphan")

        assert result == Failure(error=AuthErrors.INVALID_ACCESS_TOKEN)
