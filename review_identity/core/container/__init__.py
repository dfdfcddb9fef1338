"""Container module - centralized dependency injection.

Organized by concern:
- infrastructure: Core services (db, logging, security, email)
- services: Application service factories

Usage:
    from review_identity.core.container import get_auth_service, get_logger
"""

from review_identity.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_refresh_token_service,
    get_secret_generator,
    get_token_service,
)
from review_identity.core.container.services import (
    build_auth_service,
    build_email_verification_service,
    build_registration_service,
    get_auth_service,
    get_email_verification_service,
    get_registration_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_refresh_token_service",
    "get_secret_generator",
    "get_token_service",
    # Services
    "build_auth_service",
    "build_email_verification_service",
    "build_registration_service",
    "get_auth_service",
    "get_email_verification_service",
    "get_registration_service",
]
