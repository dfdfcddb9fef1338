"""Periodic cleanup of spent secrets.

Deletes expired or used verification records (both flows) and expired or
revoked refresh tokens. Meant to be triggered by an external scheduler
(cron, Kubernetes CronJob):

    python -m review_identity.infrastructure.jobs.verification_cleanup

Failures are logged and reported in the summary; nothing is raised, since
validity checks never depend on this sweep.
"""

import asyncio
from dataclasses import dataclass

from review_identity.core.container import (
    build_email_verification_service,
    get_database,
    get_logger,
)
from review_identity.core.result import Success
from review_identity.domain.errors import store_failure
from review_identity.infrastructure.persistence.database import Database
from review_identity.infrastructure.persistence.repositories import (
    RefreshTokenRepository,
)


@dataclass(frozen=True)
class CleanupSummary:
    """Rows removed by one sweep (None where that step failed)."""

    verification_records: int | None
    refresh_tokens: int | None


async def run_verification_cleanup(database: Database | None = None) -> CleanupSummary:
    """Run one sweep.

    Args:
        database: Database to sweep (defaults to the application database).

    Returns:
        CleanupSummary with per-table counts.
    """
    db = database or get_database()
    logger = get_logger()

    async with db.get_session() as session:
        service = build_email_verification_service(session)
        result = await service.clean_expired_tokens()
        records = result.value if isinstance(result, Success) else None

    tokens: int | None = None
    try:
        async with db.get_session() as session:
            tokens = await RefreshTokenRepository(session=session).delete_expired_or_revoked()
    except Exception as e:
        error = store_failure("delete_expired_or_revoked", e)
        logger.error("refresh_token_cleanup_failed", reason=error.message)

    logger.info(
        "cleanup_completed",
        verification_records=records,
        refresh_tokens=tokens,
    )
    return CleanupSummary(verification_records=records, refresh_tokens=tokens)


async def _main() -> None:
    db = get_database()
    try:
        await run_verification_cleanup(db)
    finally:
        await db.close()


if __name__ == "__main__":
    asyncio.run(_main())
