"""System router for non-versioned application endpoints.

Lightweight and side-effect free, for load balancers and monitoring.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from review_identity.core.container import get_database
from review_identity.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health(db: Database = Depends(get_database)) -> JSONResponse:
    """Health check endpoint.

    Returns:
        200 {"status": "healthy"} when the database answers, otherwise
        503 {"status": "unhealthy"}.
    """
    if await db.check_connection():
        return JSONResponse(content={"status": "healthy"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy"},
    )
