"""Bearer authentication dependencies.

Usage:
    @router.get("/protected")
    async def protected_route(
        current_user: User = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.id)}

    @router.get("/admin-only", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    async def admin_route(): ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from review_identity.application.services import AuthService
from review_identity.core.container import get_auth_service
from review_identity.core.result import Failure
from review_identity.domain.entities.user import User
from review_identity.domain.enums import UserRole
from review_identity.domain.errors import AuthErrors

# auto_error=False so a missing header is reported through our 401, not a 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Resolve the bearer access token to its user.

    Raises:
        HTTPException 401: If the token is missing, invalid, expired, or its
            subject no longer exists.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    result = await auth_service.authenticate(credentials.credentials)
    if isinstance(result, Failure):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=result.error.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.value


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[User]]:
    """Build a dependency that admits only users holding one of `roles`.

    Raises:
        HTTPException 403: If the authenticated user's role is not listed.
    """
    allowed = frozenset(roles)

    async def role_checker(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if current_user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=AuthErrors.PERMISSION_DENIED.message,
            )
        return current_user

    return role_checker
