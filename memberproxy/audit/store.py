"""AuditStore abstract interface."""

from abc import ABC, abstractmethod

from memberproxy.audit.models import AuditEntry, Operation


class AuditStore(ABC):
    """Append-only storage for audit entries.

    Implementations must be safe for concurrent appends from independent
    requests and must raise ``StoreError`` instead of dropping an entry.
    There is deliberately no update or delete operation.
    """

    @abstractmethod
    async def append(self, entry: AuditEntry) -> int:
        """Persist an entry and return its assigned id.

        Returns only once the entry is durable.

        Raises:
            StoreUnavailableError: If the backing storage cannot be written
        """
        pass

    @abstractmethod
    async def get(self, entry_id: int) -> AuditEntry | None:
        """Get an entry by id."""
        pass

    @abstractmethod
    async def list_entries(
        self,
        *,
        operation: Operation | None = None,
        success: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[AuditEntry]:
        """List entries, newest first, with optional filters."""
        pass

    async def health_check(self) -> bool:
        """Return True if the backing storage is reachable."""
        return True

    async def close(self) -> None:
        """Release any held resources."""
        return None
