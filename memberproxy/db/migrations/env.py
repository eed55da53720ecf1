"""Alembic environment for the audit log schema.

The database is the one the service's audit store would use: the
``storage.audit.postgres.dsn`` setting, else the DATABASE_URL family of
environment variables (see ``resolve_dsn``). Migrations run over asyncpg.
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from memberproxy.config import get_settings
from memberproxy.db.pool import resolve_dsn

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def audit_database_url() -> str:
    dsn = resolve_dsn(get_settings().storage.audit.postgres.dsn)
    scheme, _, rest = dsn.partition("://")
    if scheme in ("postgres", "postgresql"):
        scheme = "postgresql+asyncpg"
    return f"{scheme}://{rest}"


def _upgrade_on(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=None)
    with context.begin_transaction():
        context.run_migrations()


async def _upgrade() -> None:
    engine = create_async_engine(audit_database_url(), poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_upgrade_on)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    # alembic upgrade --sql: render the DDL for query_history without connecting
    context.configure(url=audit_database_url(), literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_upgrade())
