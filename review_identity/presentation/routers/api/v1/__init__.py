"""API v1 routers.

Resources:
    /auth - Registration, sessions and email verification
"""

from fastapi import APIRouter

from review_identity.presentation.routers.api.v1.auth import router as auth_router

v1_router = APIRouter()
v1_router.include_router(auth_router)

__all__ = ["v1_router"]
