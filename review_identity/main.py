"""
Main FastAPI application entry point.

Run with:
    uvicorn review_identity.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from review_identity.core.config import get_settings
from review_identity.core.container import get_database, get_logger
from review_identity.presentation.routers import system_router
from review_identity.presentation.routers.api.v1 import v1_router
from review_identity.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: log the environment (settings were validated on import)
    - Shutdown: dispose the database engine
    """
    settings = get_settings()
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the application. Settings are loaded (and validated) here."""
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        description="Identity service for the review site",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # RFC 7807 error responses
    register_exception_handlers(application)

    application.include_router(system_router)
    application.include_router(v1_router, prefix=settings.api_v1_prefix)
    return application


app = create_app()
