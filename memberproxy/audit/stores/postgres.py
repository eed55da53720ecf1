"""PostgreSQL implementation of AuditStore.

Uses asyncpg for async database access. Each append is a single
``INSERT ... RETURNING`` statement, so concurrent appends are serialized
by the database rather than by the caller.
"""

from typing import Any

from memberproxy.audit.models import AuditEntry, Operation
from memberproxy.audit.store import AuditStore
from memberproxy.db.errors import StoreError, StoreUnavailableError
from memberproxy.db.pool import PostgresPool
from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, operation, success, timestamp, details"


class PostgresAuditStore(AuditStore):
    """PostgreSQL AuditStore backed by the ``query_history`` table."""

    def __init__(self, pool: PostgresPool) -> None:
        """Initialize with connection pool.

        Args:
            pool: PostgreSQL connection pool
        """
        self._pool = pool

    async def append(self, entry: AuditEntry) -> int:
        try:
            async with self._pool.acquire() as conn:
                entry_id = await conn.fetchval(
                    """
                    INSERT INTO query_history (operation, success, timestamp, details)
                    VALUES ($1, $2, $3, $4)
                    RETURNING id
                    """,
                    entry.operation.value,
                    entry.success,
                    entry.timestamp,
                    entry.details,
                )
        except StoreError:
            raise
        except Exception as e:
            logger.error(
                "postgres_audit_append_error",
                operation=entry.operation.value,
                error=str(e),
            )
            raise StoreUnavailableError(f"Failed to append audit entry: {e}", cause=e) from e

        logger.debug("audit_entry_saved", entry_id=entry_id)
        return entry_id

    async def get(self, entry_id: int) -> AuditEntry | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {_COLUMNS} FROM query_history WHERE id = $1",
                    entry_id,
                )
        except StoreError:
            raise
        except Exception as e:
            logger.error("postgres_audit_get_error", entry_id=entry_id, error=str(e))
            raise StoreUnavailableError(f"Failed to get audit entry: {e}", cause=e) from e

        return self._row_to_entry(row) if row else None

    async def list_entries(
        self,
        *,
        operation: Operation | None = None,
        success: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditEntry]:
        query = f"SELECT {_COLUMNS} FROM query_history WHERE TRUE"
        params: list[Any] = []

        if operation is not None:
            params.append(operation.value)
            query += f" AND operation = ${len(params)}"

        if success is not None:
            params.append(success)
            query += f" AND success = ${len(params)}"

        params.append(limit)
        query += f" ORDER BY timestamp DESC, id DESC LIMIT ${len(params)}"
        params.append(offset)
        query += f" OFFSET ${len(params)}"

        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except StoreError:
            raise
        except Exception as e:
            logger.error("postgres_audit_list_error", error=str(e))
            raise StoreUnavailableError(f"Failed to list audit entries: {e}", cause=e) from e

        return [self._row_to_entry(row) for row in rows]

    async def health_check(self) -> bool:
        return await self._pool.health_check()

    async def close(self) -> None:
        await self._pool.close()

    @staticmethod
    def _row_to_entry(row: Any) -> AuditEntry:
        return AuditEntry(
            id=row["id"],
            operation=Operation(row["operation"]),
            success=row["success"],
            timestamp=row["timestamp"],
            details=row["details"] or "",
        )
