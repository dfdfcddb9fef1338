"""Email verification service.

Two independent flows over one record store.

Flow A - pre-registration code (email not yet a user):
1. send_registration_code: one live code per email, record first, send
   best-effort
2. validate_registration_code: non-consuming check
3. complete_registration_verification: after the account exists, verify
   the user and link (consume) the record

Flow B - post-registration link (existing unverified user):
1. send_verification_email / resend_verification_email
2. verify_email: consume the token and verify the user

Records are single use. Consumption goes through the store's conditional
update, so two concurrent redemptions of the same secret yield exactly one
success.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from review_identity.application.services.email_templates import (
    registration_code_email,
    verification_link_email,
)
from review_identity.application.services.store_call import store_call
from review_identity.core.enums import ErrorCode
from review_identity.core.errors import DomainError, ValidationError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.entities.verification_record import VerificationRecord
from review_identity.domain.enums import VerificationKind
from review_identity.domain.errors import AuthErrors, VerificationErrors
from review_identity.domain.protocols import (
    EmailSenderProtocol,
    EmailVerificationRepository,
    LoggerProtocol,
    SecretGeneratorProtocol,
    UserRepository,
)
from review_identity.domain.value_objects import Email, normalize_email


class EmailVerificationService:
    """Orchestrates both email-proof flows.

    Args:
        verification_repo: Verification record persistence.
        user_repo: User persistence.
        secret_generator: CSPRNG codes and tokens.
        email_sender: Mail transport.
        logger: Structured logger.
        verification_url_base: Frontend base URL for links (no trailing slash).
        code_digits: Registration code length.
        code_expire_minutes: Registration code lifetime.
        token_expire_hours: Verification link lifetime.
    """

    def __init__(
        self,
        *,
        verification_repo: EmailVerificationRepository,
        user_repo: UserRepository,
        secret_generator: SecretGeneratorProtocol,
        email_sender: EmailSenderProtocol,
        logger: LoggerProtocol,
        verification_url_base: str,
        code_digits: int = 6,
        code_expire_minutes: int = 10,
        token_expire_hours: int = 24,
    ) -> None:
        self._verification_repo = verification_repo
        self._user_repo = user_repo
        self._secret_generator = secret_generator
        self._email_sender = email_sender
        self._logger = logger
        self._verification_url_base = verification_url_base.rstrip("/")
        self._code_digits = code_digits
        self._code_expire_minutes = code_expire_minutes
        self._token_expire_hours = token_expire_hours

    # ------------------------------------------------------------------
    # Flow A: pre-registration code
    # ------------------------------------------------------------------

    async def send_registration_code(self, email: str) -> Result[str, DomainError]:
        """Issue and mail a fresh registration code.

        Any earlier code for the same email is deleted first. If the mail
        transport fails the record stays stored and simply expires.

        Args:
            email: Raw email address.

        Returns:
            Success(code) once the code is stored and sent (callers must not
            echo it back to the client).
            Failure(INVALID_CREDENTIALS_FORMAT) for a malformed address.
            Failure(EMAIL_ALREADY_USED) if a user owns the address.
            Failure(EMAIL_SERVICE_NOT_CONFIGURED) without a transport.
            Failure(EMAIL_SEND_FAILED) if delivery fails.
        """
        normalized = normalize_email(email)
        try:
            Email(normalized)
        except ValueError:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_CREDENTIALS_FORMAT,
                    message="Invalid email address",
                    field="email",
                )
            )

        found = await store_call(
            "find_user_by_email", self._user_repo.find_by_email(normalized), self._logger
        )
        if isinstance(found, Failure):
            return found
        if found.value is not None:
            return Failure(error=AuthErrors.EMAIL_ALREADY_USED)

        if not self._email_sender.is_configured():
            return Failure(error=VerificationErrors.EMAIL_SERVICE_NOT_CONFIGURED)

        deleted = await store_call(
            "delete_codes_by_email",
            self._verification_repo.delete_by_email(normalized),
            self._logger,
        )
        if isinstance(deleted, Failure):
            return deleted

        generated = self._secret_generator.numeric_code(self._code_digits)
        if isinstance(generated, Failure):
            return generated
        code = generated.value

        stored = await store_call(
            "create_registration_code",
            self._verification_repo.create(
                kind=VerificationKind.REGISTRATION_CODE,
                email=normalized,
                secret=code,
                user_id=None,
                expires_at=datetime.now(UTC)
                + timedelta(minutes=self._code_expire_minutes),
            ),
            self._logger,
        )
        if isinstance(stored, Failure):
            return stored

        subject, body = registration_code_email(code, self._code_expire_minutes)
        sent = await self._email_sender.send(normalized, subject, body)
        if isinstance(sent, Failure):
            self._logger.error(
                "verification_email_send_failed",
                flow=VerificationKind.REGISTRATION_CODE.value,
                record_id=str(stored.value.id),
                reason=sent.error.message,
            )
            return sent

        self._logger.info("registration_code_sent", record_id=str(stored.value.id))
        return Success(value=code)

    async def validate_registration_code(
        self, email: str, code: str
    ) -> Result[VerificationRecord, DomainError]:
        """Check that a registration code is currently redeemable.

        Does not consume the code; complete_registration_verification does
        that once the account exists.

        Returns:
            Success(record) with user_id None.
            Failure(CODE_REQUIRED) if email or code is blank.
            Failure(INVALID_TOKEN) if unknown or already linked.
            Failure(TOKEN_EXPIRED) if used or past expiry.
        """
        normalized = normalize_email(email)
        code = code.strip()
        if not normalized or not code:
            return Failure(error=VerificationErrors.CODE_REQUIRED)

        found = await store_call(
            "get_code_by_email",
            self._verification_repo.get_by_email_and_token(normalized, code),
            self._logger,
        )
        if isinstance(found, Failure):
            return found
        record = found.value

        if record is None:
            return Failure(error=VerificationErrors.INVALID_TOKEN)
        if not record.is_valid():
            return Failure(error=VerificationErrors.EXPIRED)
        if record.is_linked:
            return Failure(error=VerificationErrors.INVALID_TOKEN)

        return Success(value=record)

    async def complete_registration_verification(
        self, record: VerificationRecord, user_id: UUID
    ) -> Result[datetime, DomainError]:
        """Mark the new user verified, then link and consume the record.

        The user's verified state is authoritative: if linking fails
        afterwards it is not rolled back. The record is instead consumed by
        its secret (best-effort) and the link error is returned.

        Returns:
            Success(verified_at), or Failure(USER_NOT_FOUND), or the link
            failure (INVALID_TOKEN if the record was already consumed,
            STORE_FAILURE otherwise).
        """
        found = await store_call(
            "find_user_by_id", self._user_repo.find_by_id(user_id), self._logger
        )
        if isinstance(found, Failure):
            return found
        user = found.value
        if user is None:
            return Failure(error=VerificationErrors.USER_NOT_FOUND)

        verified_at = user.mark_email_verified()
        saved = await store_call("save_user", self._user_repo.save(user), self._logger)
        if isinstance(saved, Failure):
            return saved

        linked = await store_call(
            "link_record_to_user",
            self._verification_repo.link_token_to_user(record.id, user_id),
            self._logger,
        )
        if isinstance(linked, Success) and linked.value:
            return Success(value=verified_at)

        link_error: DomainError = (
            linked.error if isinstance(linked, Failure) else VerificationErrors.INVALID_TOKEN
        )
        self._logger.warning(
            "registration_verification_link_failed",
            record_id=str(record.id),
            user_id=str(user_id),
            reason=link_error.code.value,
        )
        fallback = await store_call(
            "mark_code_used",
            self._verification_repo.mark_used(
                record.secret,
                kind=VerificationKind.REGISTRATION_CODE,
                email=record.email,
            ),
            self._logger,
        )
        if isinstance(fallback, Failure):
            self._logger.warning(
                "registration_verification_fallback_failed",
                record_id=str(record.id),
            )
        return Failure(error=link_error)

    # ------------------------------------------------------------------
    # Flow B: post-registration link
    # ------------------------------------------------------------------

    async def send_verification_email(
        self, user_id: UUID, email: str
    ) -> Result[None, DomainError]:
        """Store a link token for the user and mail the link.

        Link form: <verification_url_base>/verify-email?token=<token>

        Returns:
            Success(None), Failure(EMAIL_SERVICE_NOT_CONFIGURED) or
            Failure(EMAIL_SEND_FAILED).
        """
        if not self._email_sender.is_configured():
            return Failure(error=VerificationErrors.EMAIL_SERVICE_NOT_CONFIGURED)

        normalized = normalize_email(email)
        token = self._secret_generator.random_token()
        stored = await store_call(
            "create_verification_link",
            self._verification_repo.create(
                kind=VerificationKind.EMAIL_LINK,
                email=normalized,
                secret=token,
                expires_at=datetime.now(UTC) + timedelta(hours=self._token_expire_hours),
                user_id=user_id,
            ),
            self._logger,
        )
        if isinstance(stored, Failure):
            return stored

        link = f"{self._verification_url_base}/verify-email?token={token}"
        subject, body = verification_link_email(link, self._token_expire_hours)
        sent = await self._email_sender.send(normalized, subject, body)
        if isinstance(sent, Failure):
            self._logger.error(
                "verification_email_send_failed",
                flow=VerificationKind.EMAIL_LINK.value,
                user_id=str(user_id),
                reason=sent.error.message,
            )
            return sent

        self._logger.info("verification_email_sent", user_id=str(user_id))
        return Success(value=None)

    async def verify_email(self, token: str) -> Result[None, DomainError]:
        """Redeem a link token.

        The token is consumed before the user is updated, so a concurrent
        second redemption fails instead of verifying twice. If the save then
        fails the link stays spent and the user stays unverified; that case is
        logged as email_verification_save_failed and the user has to resend.

        Returns:
            Success(None).
            Failure(INVALID_TOKEN) if unknown or unlinked.
            Failure(TOKEN_EXPIRED) if used or past expiry.
            Failure(USER_NOT_FOUND) if the linked user is gone.
        """
        token = token.strip()
        if not token:
            return Failure(error=VerificationErrors.INVALID_TOKEN)

        found = await store_call(
            "get_link_by_token", self._verification_repo.get_by_token(token), self._logger
        )
        if isinstance(found, Failure):
            return found
        record = found.value

        if record is None:
            return Failure(error=VerificationErrors.INVALID_TOKEN)
        if not record.is_valid():
            return Failure(error=VerificationErrors.EXPIRED)
        if record.user_id is None:
            return Failure(error=VerificationErrors.INVALID_TOKEN)

        user_found = await store_call(
            "find_user_by_id", self._user_repo.find_by_id(record.user_id), self._logger
        )
        if isinstance(user_found, Failure):
            return user_found
        user = user_found.value
        if user is None:
            return Failure(error=VerificationErrors.USER_NOT_FOUND)

        claimed = await store_call(
            "mark_link_used",
            self._verification_repo.mark_used(token, kind=VerificationKind.EMAIL_LINK),
            self._logger,
        )
        if isinstance(claimed, Failure):
            return claimed
        if not claimed.value:
            return Failure(error=VerificationErrors.EXPIRED)

        user.mark_email_verified()
        saved = await store_call("save_user", self._user_repo.save(user), self._logger)
        if isinstance(saved, Failure):
            self._logger.error(
                "email_verification_save_failed",
                user_id=str(user.id),
                record_id=str(record.id),
            )
            return saved

        self._logger.info("email_verified", user_id=str(user.id))
        return Success(value=None)

    async def resend_verification_email(self, user_id: UUID) -> Result[None, DomainError]:
        """Replace the user's pending links with a fresh one.

        A still-valid link being superseded is logged before it is deleted.

        Returns:
            Success(None), Failure(USER_NOT_FOUND),
            Failure(EMAIL_ALREADY_VERIFIED) (no mail is sent), or a send error.
        """
        found = await store_call(
            "find_user_by_id", self._user_repo.find_by_id(user_id), self._logger
        )
        if isinstance(found, Failure):
            return found
        user = found.value
        if user is None:
            return Failure(error=VerificationErrors.USER_NOT_FOUND)
        if user.email_verified:
            return Failure(error=VerificationErrors.EMAIL_ALREADY_VERIFIED)

        pending = await store_call(
            "get_latest_link_by_user",
            self._verification_repo.get_latest_by_user_id(user.id),
            self._logger,
        )
        if isinstance(pending, Failure):
            return pending
        if pending.value is not None and pending.value.is_valid():
            self._logger.info(
                "verification_link_replaced",
                user_id=str(user.id),
                record_id=str(pending.value.id),
            )

        deleted = await store_call(
            "delete_records_by_user",
            self._verification_repo.delete_by_user_id(user.id),
            self._logger,
        )
        if isinstance(deleted, Failure):
            return deleted

        return await self.send_verification_email(user.id, user.email)

    async def get_verification_status(self, user_id: UUID) -> Result[bool, DomainError]:
        """Whether the user's email is verified."""
        found = await store_call(
            "find_user_by_id", self._user_repo.find_by_id(user_id), self._logger
        )
        if isinstance(found, Failure):
            return found
        if found.value is None:
            return Failure(error=VerificationErrors.USER_NOT_FOUND)
        return Success(value=found.value.email_verified)

    async def clean_expired_tokens(self) -> Result[int, DomainError]:
        """Delete every expired or used record, across both flows.

        Housekeeping only: validity checks already ignore such records.
        Failure is logged and returned, never raised.

        Returns:
            Success(number deleted) or Failure(STORE_FAILURE).
        """
        deleted = await store_call(
            "delete_expired_or_used",
            self._verification_repo.delete_expired_or_used(),
            self._logger,
        )
        if isinstance(deleted, Failure):
            self._logger.error("verification_cleanup_failed", reason=deleted.error.message)
            return deleted
        self._logger.info("verification_cleanup_completed", deleted=deleted.value)
        return Success(value=deleted.value)
