"""Alembic env for the distributor schema.

The database URL comes from DATABASE_URL (distributor_mgmt.core.config), never
from alembic.ini. Online migrations run over the async engine.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

import distributor_mgmt.domain  # noqa: F401  registers every table on Base.metadata
from distributor_mgmt.core.config import settings
from distributor_mgmt.db.base import Base

if context.config.config_file_name:
    fileConfig(context.config.config_file_name)

# batch mode lets ALTER-style operations work on SQLite
COMMON_OPTIONS = {
    "target_metadata": Base.metadata,
    "compare_type": True,
    "render_as_batch": True,
}


def _migrate() -> None:
    with context.begin_transaction():
        context.run_migrations()


def _migrate_with(connection: Connection) -> None:
    context.configure(connection=connection, **COMMON_OPTIONS)
    _migrate()


def run_offline() -> None:
    """Emit SQL to stdout instead of executing it."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMMON_OPTIONS,
    )
    _migrate()


async def run_online() -> None:
    engine = create_async_engine(settings.database_url)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_with)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
