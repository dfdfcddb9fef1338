"""Auth service: register, login, refresh, logout.

Session state machine:
    Anonymous -> Authenticated(access, refresh)
              -> Authenticated(new access, new refresh)   [refresh]
              -> Anonymous                                [logout]

Flow (refresh):
1. Digest the presented token and look it up
2. Reject if missing, revoked or expired
3. Atomically revoke it (the store decides the winner of concurrent calls)
4. Load the owner and issue a new access + refresh pair

Architecture:
- Application layer ONLY imports from domain and core
- Repositories and token services are injected via protocols
- Rotation touches only the presented token; other sessions of the same
  user are unaffected
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from review_identity.application.dtos import AuthResult, UserView
from review_identity.application.services.store_call import store_call
from review_identity.core.constants import BCRYPT_MAX_PASSWORD_BYTES
from review_identity.core.enums import ErrorCode
from review_identity.core.errors import DomainError, ValidationError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.entities.user import User
from review_identity.domain.enums import UserRole
from review_identity.domain.errors import AuthErrors
from review_identity.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    RefreshTokenData,
    RefreshTokenRepository,
    RefreshTokenServiceProtocol,
    TokenGenerationProtocol,
    UserRepository,
)
from review_identity.domain.value_objects import Email, normalize_email


def _format_error(message: str, field: str) -> ValidationError:
    return ValidationError(
        code=ErrorCode.INVALID_CREDENTIALS_FORMAT,
        message=message,
        field=field,
    )


class AuthService:
    """Orchestrates credential checks, token issuance and rotation.

    Args:
        user_repo: User persistence.
        refresh_token_repo: Refresh token persistence.
        password_service: Password hashing collaborator.
        token_service: Access token issuer.
        refresh_token_service: Opaque refresh token generator.
        logger: Structured logger.
        password_min_length: Minimum password length.
        display_name_max_length: Maximum display name length.
        access_token_expire_minutes: Reported as expires_in on AuthResult.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        refresh_token_repo: RefreshTokenRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
        logger: LoggerProtocol,
        password_min_length: int = 8,
        display_name_max_length: int = 50,
        access_token_expire_minutes: int = 60,
    ) -> None:
        self._user_repo = user_repo
        self._refresh_token_repo = refresh_token_repo
        self._password_service = password_service
        self._token_service = token_service
        self._refresh_token_service = refresh_token_service
        self._logger = logger
        self._password_min_length = password_min_length
        self._display_name_max_length = display_name_max_length
        self._expires_in = access_token_expire_minutes * 60

    async def register(
        self,
        email: str,
        password: str,
        display_name: str,
    ) -> Result[AuthResult, DomainError]:
        """Create a user account and sign it in.

        Args:
            email: Raw email (trimmed and lowercased here).
            password: Plaintext password.
            display_name: Public name; falls back to the email local part
                when blank.

        Returns:
            Success(AuthResult) on success.
            Failure(EMAIL_ALREADY_USED) if the email belongs to a user,
            whatever the password.
            Failure(INVALID_CREDENTIALS_FORMAT) if email, password or
            display name fail the policy.
            Failure(STORE_FAILURE) if the store fails.
        """
        normalized = normalize_email(email)

        found = await store_call(
            "find_user_by_email", self._user_repo.find_by_email(normalized), self._logger
        )
        if isinstance(found, Failure):
            return found
        if found.value is not None:
            return Failure(error=AuthErrors.EMAIL_ALREADY_USED)

        policy = self._check_policy(normalized, password, display_name)
        if isinstance(policy, Failure):
            return policy
        name = policy.value

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            email=normalized,
            password_hash=self._password_service.hash_password(password),
            display_name=name,
            role=UserRole.USER,
            created_at=now,
            updated_at=now,
        )

        created = await store_call(
            "create_user", self._user_repo.create(user), self._logger
        )
        if isinstance(created, Failure):
            return created
        if isinstance(created.value, Failure):
            # Lost a race on the unique email constraint
            return created.value
        user = created.value.value

        self._logger.info("user_registered", user_id=str(user.id))
        return await self._issue_pair(user)

    async def login(self, email: str, password: str) -> Result[AuthResult, DomainError]:
        """Check credentials and issue a new token pair.

        Unknown email and wrong password return the same error value.

        Returns:
            Success(AuthResult) or Failure(INVALID_CREDENTIALS).
        """
        normalized = normalize_email(email)

        found = await store_call(
            "find_user_by_email", self._user_repo.find_by_email(normalized), self._logger
        )
        if isinstance(found, Failure):
            return found
        user = found.value

        if user is None:
            self._logger.info("login_failed", reason="unknown_email")
            return Failure(error=AuthErrors.INVALID_CREDENTIALS)

        if not self._password_service.verify_password(password, user.password_hash):
            self._logger.info("login_failed", reason="password_mismatch", user_id=str(user.id))
            return Failure(error=AuthErrors.INVALID_CREDENTIALS)

        return await self._issue_pair(user)

    async def refresh(self, refresh_token: str) -> Result[AuthResult, DomainError]:
        """Rotate a refresh token.

        The presented token is revoked before the new pair is issued. Of two
        concurrent calls with the same token exactly one succeeds.

        Returns:
            Success(AuthResult) or Failure(INVALID_REFRESH_TOKEN).
        """
        claimed = await self._claim_refresh_token(refresh_token, reason="rotated")
        if isinstance(claimed, Failure):
            return claimed
        token_data = claimed.value

        found = await store_call(
            "find_user_by_id",
            self._user_repo.find_by_id(token_data.user_id),
            self._logger,
        )
        if isinstance(found, Failure):
            return found
        user = found.value
        if user is None:
            self._logger.warning(
                "refresh_token_rejected",
                reason="user_missing",
                user_id=str(token_data.user_id),
            )
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        self._logger.info("refresh_token_rotated", user_id=str(user.id))
        return await self._issue_pair(user)

    async def logout(self, refresh_token: str) -> Result[None, DomainError]:
        """Revoke a refresh token.

        A second logout with the same token fails like any invalid token.

        Returns:
            Success(None) or Failure(INVALID_REFRESH_TOKEN).
        """
        claimed = await self._claim_refresh_token(refresh_token, reason="logout")
        if isinstance(claimed, Failure):
            return claimed
        self._logger.info("user_logged_out", user_id=str(claimed.value.user_id))
        return Success(value=None)

    async def authenticate(self, access_token: str) -> Result[User, DomainError]:
        """Resolve an access token to its user.

        Returns:
            Success(User); Failure(TOKEN_*) from the issuer; or
            Failure(INVALID_TOKEN) if the subject no longer exists.
        """
        validated = self._token_service.validate(access_token)
        if isinstance(validated, Failure):
            return validated

        found = await store_call(
            "find_user_by_id",
            self._user_repo.find_by_id(validated.value.user_id),
            self._logger,
        )
        if isinstance(found, Failure):
            return found
        if found.value is None:
            return Failure(error=AuthErrors.INVALID_ACCESS_TOKEN)
        return Success(value=found.value)

    async def _claim_refresh_token(
        self, refresh_token: str, *, reason: str
    ) -> Result[RefreshTokenData, DomainError]:
        """Find an active token and revoke it atomically."""
        if not refresh_token:
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        token_hash = self._refresh_token_service.hash_token(refresh_token)
        found = await store_call(
            "find_refresh_token",
            self._refresh_token_repo.find_by_token_hash(token_hash),
            self._logger,
        )
        if isinstance(found, Failure):
            return found
        token_data = found.value

        if token_data is None or not token_data.is_active():
            self._logger.info("refresh_token_rejected", reason="inactive", action=reason)
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        revoked = await store_call(
            "revoke_refresh_token",
            self._refresh_token_repo.revoke(token_data.id, reason),
            self._logger,
        )
        if isinstance(revoked, Failure):
            return revoked
        if not revoked.value:
            # Another request revoked it first
            self._logger.warning(
                "refresh_token_rejected",
                reason="already_revoked",
                action=reason,
                user_id=str(token_data.user_id),
            )
            return Failure(error=AuthErrors.INVALID_REFRESH_TOKEN)

        return Success(value=token_data)

    async def _issue_pair(self, user: User) -> Result[AuthResult, DomainError]:
        access_token = self._token_service.issue(user.id)
        refresh_token, token_hash = self._refresh_token_service.generate_token()

        saved = await store_call(
            "save_refresh_token",
            self._refresh_token_repo.save(
                user_id=user.id,
                token_hash=token_hash,
                expires_at=self._refresh_token_service.calculate_expiration(),
            ),
            self._logger,
        )
        if isinstance(saved, Failure):
            return saved

        return Success(
            value=AuthResult(
                access_token=access_token,
                refresh_token=refresh_token,
                user=UserView.from_user(user),
                expires_in=self._expires_in,
            )
        )

    def _check_policy(
        self, email: str, password: str, display_name: str
    ) -> Result[str, ValidationError]:
        """Validate email, password and display name.

        Returns:
            Success(cleaned display name) or the first policy violation.
        """
        try:
            Email(email)
        except ValueError:
            return Failure(error=_format_error("Invalid email address", "email"))

        if len(password) < self._password_min_length:
            return Failure(
                error=_format_error(
                    f"Password must be at least {self._password_min_length} characters",
                    "password",
                )
            )
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            return Failure(
                error=_format_error(
                    f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
                    "password",
                )
            )

        name = display_name.strip() or email.split("@", 1)[0]
        if len(name) > self._display_name_max_length:
            return Failure(
                error=_format_error(
                    f"Display name must be at most {self._display_name_max_length} characters",
                    "display_name",
                )
            )
        return Success(value=name)

