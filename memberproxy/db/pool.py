"""PostgreSQL connection pool management."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import asyncpg

from memberproxy.config.models import PostgresConfig
from memberproxy.db.errors import StoreUnavailableError
from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)


def resolve_dsn(dsn: str | None = None) -> str:
    """Pick the DSN: explicit value, then MEMBERPROXY_DATABASE_URL or
    DATABASE_URL, then one assembled from the POSTGRES_* variables.
    """
    dsn = dsn or os.environ.get("MEMBERPROXY_DATABASE_URL") or os.environ.get("DATABASE_URL")
    if dsn:
        return dsn

    host = os.environ.get("POSTGRES_HOST", "localhost")
    port = os.environ.get("POSTGRES_PORT", "5432")
    user = os.environ.get("POSTGRES_USER", "member")
    password = os.environ.get("POSTGRES_PASSWORD", "member")
    database = os.environ.get("POSTGRES_DB", "member")
    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


class PostgresPool:
    """Lazily connected asyncpg pool shared by the PostgreSQL stores.

    Usage:
        pool = PostgresPool.from_config(settings.storage.audit.postgres)
        await pool.connect()
        try:
            async with pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
        finally:
            await pool.close()
    """

    def __init__(
        self,
        dsn: str | None = None,
        min_size: int = 2,
        max_size: int = 10,
        max_inactive_connection_lifetime: float = 300.0,
        command_timeout: float = 30.0,
    ) -> None:
        """Initialize pool configuration.

        Args:
            dsn: Database connection string. Falls back to environment variables.
            min_size: Minimum number of connections to keep open.
            max_size: Maximum number of connections in the pool.
            max_inactive_connection_lifetime: Close connections idle longer than this (seconds).
            command_timeout: Default timeout for queries (seconds).
        """
        self._dsn = resolve_dsn(dsn)
        self._min_size = min_size
        self._max_size = max_size
        self._max_inactive_connection_lifetime = max_inactive_connection_lifetime
        self._command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    @classmethod
    def from_config(cls, config: PostgresConfig) -> "PostgresPool":
        return cls(
            dsn=config.dsn,
            min_size=config.min_pool_size,
            max_size=config.max_pool_size,
            max_inactive_connection_lifetime=config.max_inactive_connection_lifetime,
            command_timeout=config.command_timeout,
        )

    async def connect(self) -> None:
        """Create the underlying pool if it does not exist yet."""
        if self._pool is not None:
            return

        try:
            self._pool = await asyncpg.create_pool(
                dsn=self._dsn,
                min_size=self._min_size,
                max_size=self._max_size,
                max_inactive_connection_lifetime=self._max_inactive_connection_lifetime,
                command_timeout=self._command_timeout,
            )
        except (OSError, asyncpg.PostgresError) as e:
            logger.error("postgres_pool_connection_failed", error=str(e))
            raise StoreUnavailableError(
                f"Failed to connect to PostgreSQL: {e}", cause=e
            ) from e

        logger.info(
            "postgres_pool_connected",
            min_size=self._min_size,
            max_size=self._max_size,
        )

    async def close(self) -> None:
        """Close the pool gracefully."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("postgres_pool_closed")

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """Acquire a connection, connecting the pool on first use."""
        if self._pool is None:
            await self.connect()

        try:
            async with self._pool.acquire() as connection:
                yield connection
        except (OSError, asyncpg.PostgresError, asyncpg.InterfaceError) as e:
            logger.error("postgres_connection_error", error=str(e))
            raise StoreUnavailableError(f"PostgreSQL error: {e}", cause=e) from e

    async def health_check(self) -> bool:
        """Return True if the pool answers a trivial query."""
        try:
            async with self.acquire() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except StoreUnavailableError as e:
            logger.warning("postgres_health_check_failed", error=str(e))
            return False
