"""Async engine and session ownership.

One Database per process (see core.container.get_database). Repositories
only ever see the AsyncSession handed to them.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # One shared connection, so an in-memory database outlives a session
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
    }
    if database_url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        }
    return options


class Database:
    """Engine plus session factory.

    Args:
        database_url: SQLAlchemy async URL (postgresql+asyncpg://... or
            sqlite+aiosqlite://...).
        echo: Log every SQL statement.
        pool_size: Pooled connections (ignored for SQLite).
        max_overflow: Connections allowed above pool_size (ignored for SQLite).
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            hide_parameters=True,
            **_engine_options(database_url, pool_size, max_overflow),
        )
        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on clean exit and rolls back on error.

        Repositories commit their own writes; the final commit here only
        covers anything left pending.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create every table directly (tests only; deployments use Alembic)."""
        from review_identity.infrastructure.persistence import models  # noqa: F401
        from review_identity.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        from review_identity.infrastructure.persistence import models  # noqa: F401
        from review_identity.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """True if a trivial query succeeds (health check)."""
        try:
            async with self.async_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True
