"""Application service factories.

`build_*` functions wire a service around an explicit session (jobs,
seeders, tests). `get_*` functions are the request-scoped FastAPI
dependencies; within one request they share a single session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.application.services import (
    AuthService,
    EmailVerificationService,
    RegistrationService,
)
from review_identity.core.config import get_settings
from review_identity.core.container.infrastructure import (
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_refresh_token_service,
    get_secret_generator,
    get_token_service,
)
from review_identity.infrastructure.persistence.repositories import (
    EmailVerificationRepository,
    RefreshTokenRepository,
    UserRepository,
)


def build_auth_service(session: AsyncSession) -> AuthService:
    """AuthService bound to a session."""
    settings = get_settings()
    return AuthService(
        user_repo=UserRepository(session=session),
        refresh_token_repo=RefreshTokenRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        refresh_token_service=get_refresh_token_service(),
        logger=get_logger(),
        password_min_length=settings.password_min_length,
        display_name_max_length=settings.display_name_max_length,
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


def build_email_verification_service(session: AsyncSession) -> EmailVerificationService:
    """EmailVerificationService bound to a session."""
    settings = get_settings()
    return EmailVerificationService(
        verification_repo=EmailVerificationRepository(session=session),
        user_repo=UserRepository(session=session),
        secret_generator=get_secret_generator(),
        email_sender=get_email_service(),
        logger=get_logger(),
        verification_url_base=settings.verification_url_base,
        code_digits=settings.registration_code_digits,
        code_expire_minutes=settings.registration_code_expire_minutes,
        token_expire_hours=settings.verification_token_expire_hours,
    )


def build_registration_service(session: AsyncSession) -> RegistrationService:
    """RegistrationService bound to a session."""
    return RegistrationService(
        auth_service=build_auth_service(session),
        verification_service=build_email_verification_service(session),
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
) -> AuthService:
    """Get AuthService (request-scoped)."""
    return build_auth_service(session)


async def get_email_verification_service(
    session: AsyncSession = Depends(get_db_session),
) -> EmailVerificationService:
    """Get EmailVerificationService (request-scoped)."""
    return build_email_verification_service(session)


async def get_registration_service(
    session: AsyncSession = Depends(get_db_session),
) -> RegistrationService:
    """Get RegistrationService (request-scoped)."""
    return build_registration_service(session)
