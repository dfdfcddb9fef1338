"""Registration with a pre-registration email code.

The one flow that couples both services:
1. Validate the code (non-consuming)
2. Create the account and sign it in
3. Mark the account verified and consume the code

A failure in step 3 is logged and the registration still succeeds; the
returned user view is reloaded so it shows the verified state actually
stored.
"""

from dataclasses import replace

from review_identity.application.dtos import AuthResult, UserView
from review_identity.application.services.auth_service import AuthService
from review_identity.application.services.email_verification_service import (
    EmailVerificationService,
)
from review_identity.application.services.store_call import store_call
from review_identity.core.errors import DomainError
from review_identity.core.result import Failure, Result, Success
from review_identity.domain.protocols import LoggerProtocol, UserRepository


class RegistrationService:
    """Registers a user whose email was proven with a code.

    Args:
        auth_service: Creates the account and issues tokens.
        verification_service: Validates and consumes the code.
        user_repo: Reloads the user after a partial completion.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        auth_service: AuthService,
        verification_service: EmailVerificationService,
        user_repo: UserRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._auth_service = auth_service
        self._verification_service = verification_service
        self._user_repo = user_repo
        self._logger = logger

    async def register_with_code(
        self,
        email: str,
        code: str,
        password: str,
        display_name: str,
    ) -> Result[AuthResult, DomainError]:
        """Validate the code, register, then complete verification.

        Returns:
            Success(AuthResult), or the code validation / registration
            failure. Completion failures never fail the registration.
        """
        validated = await self._verification_service.validate_registration_code(
            email, code
        )
        if isinstance(validated, Failure):
            return validated
        record = validated.value

        registered = await self._auth_service.register(email, password, display_name)
        if isinstance(registered, Failure):
            return registered
        auth = registered.value

        completed = await self._verification_service.complete_registration_verification(
            record, auth.user.id
        )
        if isinstance(completed, Failure):
            self._logger.warning(
                "registration_completion_failed",
                user_id=str(auth.user.id),
                reason=completed.error.code.value,
            )
            return await self._with_actual_status(auth)

        user = replace(auth.user, email_verified=True, email_verified_at=completed.value)
        return Success(value=replace(auth, user=user))

    async def _with_actual_status(self, auth: AuthResult) -> Result[AuthResult, DomainError]:
        """Reload the user after a partial completion.

        A link failure leaves the user verified; other failures leave it
        unverified. The registration succeeds either way.
        """
        found = await store_call(
            "find_user_by_id", self._user_repo.find_by_id(auth.user.id), self._logger
        )
        if isinstance(found, Failure) or found.value is None:
            return Success(value=auth)
        return Success(value=replace(auth, user=UserView.from_user(found.value)))
