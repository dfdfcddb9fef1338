"""Request dependencies (authentication, role guard)."""

from review_identity.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
    require_roles,
)

__all__ = ["get_current_user", "require_roles"]
