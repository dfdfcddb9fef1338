"""Bootstrap admin seeder.

Creates the configured admin account, or repairs an existing one whose
role, password or display name has drifted. Idempotent: safe to run after
every migration. Does nothing unless both email and password are set.

Reference:
    - alembic/env.py (run after `alembic upgrade`)
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from review_identity.core.result import Failure
from review_identity.domain.entities.user import User
from review_identity.domain.enums import UserRole
from review_identity.domain.protocols import PasswordHashingProtocol
from review_identity.domain.value_objects import normalize_email
from review_identity.infrastructure.persistence.repositories import UserRepository

logger = structlog.get_logger(__name__)


class SeedOutcome(str, Enum):
    """What the admin seeder did."""

    SKIPPED = "skipped"
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


async def seed_admin_user(
    session: AsyncSession,
    *,
    email: str | None,
    password: str | None,
    display_name: str,
    password_service: PasswordHashingProtocol,
) -> SeedOutcome:
    """Ensure the bootstrap admin exists with the configured credentials.

    The seeded admin is created verified (the address comes from
    deployment configuration, not from a sign-up).

    Args:
        session: Async database session.
        email: Admin email (seeding skipped when empty).
        password: Admin password (seeding skipped when empty).
        display_name: Name given to a new admin, or to one with a blank name.
        password_service: Hashes and checks the admin password.

    Returns:
        SeedOutcome describing the change made.

    Raises:
        RuntimeError: If the admin row cannot be created.
    """
    if not email or not password:
        logger.info("admin_seed_skipped", reason="admin credentials not configured")
        return SeedOutcome.SKIPPED

    repo = UserRepository(session=session)
    normalized = normalize_email(email)
    existing = await repo.find_by_email(normalized)
    now = datetime.now(UTC)

    if existing is None:
        admin = User(
            id=uuid7(),
            email=normalized,
            password_hash=password_service.hash_password(password),
            display_name=display_name,
            role=UserRole.ADMIN,
            email_verified=True,
            email_verified_at=now,
            created_at=now,
            updated_at=now,
        )
        created = await repo.create(admin)
        if isinstance(created, Failure):
            raise RuntimeError(f"create admin: {created.error.message}")
        logger.info("admin_seeded", user_id=str(admin.id))
        return SeedOutcome.CREATED

    changed = False
    if existing.role != UserRole.ADMIN:
        existing.role = UserRole.ADMIN
        changed = True
    if not password_service.verify_password(password, existing.password_hash):
        existing.password_hash = password_service.hash_password(password)
        changed = True
    if not existing.display_name.strip():
        existing.display_name = display_name
        changed = True

    if not changed:
        return SeedOutcome.UNCHANGED

    existing.updated_at = now
    await repo.save(existing)
    logger.info("admin_repaired", user_id=str(existing.id))
    return SeedOutcome.UPDATED
