"""Database seeding package.

Idempotent seeders that run automatically after `alembic upgrade`
(see alembic/env.py). Safe to run on every migration.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from review_identity.core.config import get_settings
from review_identity.core.container import get_password_service
from review_identity.infrastructure.persistence.seeders.admin_seeder import (
    SeedOutcome,
    seed_admin_user,
)

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    Args:
        session: Async database session (committed by the caller).
    """
    logger.info("seeding_started")

    settings = get_settings()
    outcome = await seed_admin_user(
        session,
        email=settings.admin_email,
        password=settings.admin_password,
        display_name=settings.admin_display_name,
        password_service=get_password_service(),
    )

    logger.info("seeding_completed", admin=outcome.value)


__all__ = ["SeedOutcome", "run_all_seeders", "seed_admin_user"]
