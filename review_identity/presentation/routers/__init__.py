"""Non-versioned routers (system endpoints)."""

from review_identity.presentation.routers.system import system_router

__all__ = ["system_router"]
