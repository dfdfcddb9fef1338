# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console)
- Database (PostgreSQL via asyncpg; SQLite in tests)
- Password hashing (bcrypt)
- Access tokens (JWT)
- Refresh tokens and verification secrets
- Email (SMTP or stub)

This module is the composition root: it is the only place that reads
Settings, and it passes plain values into component constructors.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.core.config import get_settings
from review_identity.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from review_identity.domain.protocols import (
        EmailSenderProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        RefreshTokenServiceProtocol,
        SecretGeneratorProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from review_identity.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped)."""
    from review_identity.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped)."""
    from review_identity.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_refresh_token_service() -> "RefreshTokenServiceProtocol":
    """Get refresh token generator singleton (app-scoped)."""
    from review_identity.infrastructure.security import RefreshTokenService

    return RefreshTokenService(expiration_days=get_settings().refresh_token_expire_days)


@lru_cache()
def get_secret_generator() -> "SecretGeneratorProtocol":
    """Get verification secret generator singleton (app-scoped)."""
    from review_identity.infrastructure.security import SecretGenerator

    return SecretGenerator()


@lru_cache()
def get_email_service() -> "EmailSenderProtocol":
    """Get email service singleton (app-scoped).

    Production always uses SMTP; if its credentials are missing the sender
    reports itself unconfigured and verification flows fail fast with
    EMAIL_SERVICE_NOT_CONFIGURED. Other environments fall back to the
    in-memory stub when SMTP credentials are absent.
    """
    from review_identity.infrastructure.email import (
        SMTPEmailService,
        StubEmailService,
    )

    settings = get_settings()
    if settings.is_production or settings.smtp_configured:
        return SMTPEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            from_email=settings.smtp_from_email,
            from_name=settings.smtp_from_name,
            use_tls=settings.smtp_use_tls,
            timeout_seconds=settings.smtp_timeout_seconds,
            logger=get_logger(),
        )
    return StubEmailService(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.post("/login")
        async def login(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
