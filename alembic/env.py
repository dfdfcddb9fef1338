"""Alembic environment configuration for async SQLAlchemy.

The database URL comes from Settings, not from alembic.ini. Idempotent
seeders run after `alembic upgrade` (or when forced with `-x seed=true`).
"""

import asyncio
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_engine_from_config,
    async_sessionmaker,
)

from alembic import context
from review_identity.core.config import get_settings
from review_identity.infrastructure.persistence import BaseModel

# Alembic Config object
config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", get_settings().database_url)

# Register every table on the metadata for autogenerate
from review_identity.infrastructure.persistence.models import (  # noqa: E402, F401
    EmailVerification,
    RefreshToken,
    User,
)

target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (emit SQL, no Engine)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def _should_run_seeders() -> bool:
    """Seed during online `alembic upgrade`, or when forced via -x seed=true."""
    xargs = context.get_x_argument(as_dictionary=True)
    forced = (xargs.get("seed") or "").strip().lower() in {"1", "true", "yes", "y"}

    if "--sql" in sys.argv:
        return forced

    cmd_opts = getattr(config, "cmd_opts", None)
    is_upgrade = getattr(cmd_opts, "cmd", None) == "upgrade"
    if not is_upgrade:
        argv_lower = " ".join(sys.argv).lower()
        is_upgrade = " upgrade" in argv_lower or argv_lower.endswith("upgrade")

    return is_upgrade or forced


async def _run_seeders(engine: AsyncEngine) -> None:
    from review_identity.infrastructure.persistence.seeders import run_all_seeders

    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    """Run migrations on an async engine, then the seeders."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    if _should_run_seeders():
        await _run_seeders(connectable)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
