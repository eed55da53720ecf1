"""In-memory implementation of AuditStore."""

from itertools import count

from memberproxy.audit.models import AuditEntry, Operation
from memberproxy.audit.store import AuditStore


class InMemoryAuditStore(AuditStore):
    """In-memory AuditStore for testing and development.

    Ids come from a monotonic counter. Appends never suspend, so
    concurrent coroutines on one event loop cannot interleave inside one.
    Entries are lost when the process exits.
    """

    def __init__(self) -> None:
        self._entries: dict[int, AuditEntry] = {}
        self._ids = count(1)

    async def append(self, entry: AuditEntry) -> int:
        entry_id = next(self._ids)
        self._entries[entry_id] = entry.with_id(entry_id)
        return entry_id

    async def get(self, entry_id: int) -> AuditEntry | None:
        return self._entries.get(entry_id)

    async def list_entries(
        self,
        *,
        operation: Operation | None = None,
        success: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditEntry]:
        results = []
        for entry in self._entries.values():
            if operation is not None and entry.operation != operation:
                continue
            if success is not None and entry.success != success:
                continue
            results.append(entry)
        # Newest first; id breaks timestamp ties
        results.sort(key=lambda e: (e.timestamp, e.id), reverse=True)
        return results[offset:offset + limit]

    def __len__(self) -> int:
        return len(self._entries)
