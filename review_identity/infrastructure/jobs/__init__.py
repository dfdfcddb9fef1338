"""Scheduled maintenance jobs."""

from review_identity.infrastructure.jobs.verification_cleanup import (
    CleanupSummary,
    run_verification_cleanup,
)

__all__ = ["CleanupSummary", "run_verification_cleanup"]
