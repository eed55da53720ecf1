"""Proxy coordinator: forwards member operations and audits every attempt.

Each entry point makes exactly one Authority call and, once that call has
concluded, appends exactly one AuditEntry before anything reaches the
caller. Successful calls return the Authority's raw response. Failed calls
re-raise the Authority's original exception.

If the audit append itself fails, the coordinator either degrades (logs,
counts and carries on) or, when constructed with ``strict=True``, raises
``AuditUnavailableError`` after a successful Authority call. The same
policy applies to all four operations.
"""

import asyncio
import contextlib
import time
from collections.abc import Awaitable, Callable
from typing import Any

from memberproxy.audit.models import AuditEntry, Operation, utc_now
from memberproxy.audit.store import AuditStore
from memberproxy.authority.client import AuthorityResponse, MemberAuthorityClient
from memberproxy.db.errors import StoreError
from memberproxy.observability.logging import get_logger
from memberproxy.observability.metrics import (
    AUDIT_APPEND_FAILURES,
    AUTHORITY_LATENCY,
    PROXY_REQUESTS,
)

logger = get_logger(__name__)

CANCELLED_DETAILS = "Request cancelled"


class AuditUnavailableError(Exception):
    """Raised in strict mode when an audit entry could not be persisted."""

    def __init__(self, message: str, cause: StoreError | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class MemberProxy:
    """Forwards member CRUD calls to the Authority and records audit entries.

    Args:
        authority: Client for the Member Authority
        audit_store: Where audit entries are appended
        strict: Fail successful calls whose audit entry could not be written
    """

    def __init__(
        self,
        authority: MemberAuthorityClient,
        audit_store: AuditStore,
        *,
        strict: bool = False,
    ) -> None:
        self._authority = authority
        self._audit_store = audit_store
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    async def create_member(self, payload: Any) -> AuthorityResponse:
        return await self._forward(
            Operation.INSERT,
            lambda: self._authority.create_member(payload),
            "Created member successfully",
        )

    async def get_member(self, member_id: int) -> AuthorityResponse:
        return await self._forward(
            Operation.SELECT,
            lambda: self._authority.get_member(member_id),
            f"Retrieved member with id: {member_id}",
        )

    async def update_member(self, member_id: int, payload: Any) -> AuthorityResponse:
        return await self._forward(
            Operation.UPDATE,
            lambda: self._authority.update_member(member_id, payload),
            f"Updated member with id: {member_id}",
        )

    async def delete_member(self, member_id: int) -> AuthorityResponse:
        return await self._forward(
            Operation.DELETE,
            lambda: self._authority.delete_member(member_id),
            f"Deleted member with id: {member_id}",
        )

    async def _forward(
        self,
        operation: Operation,
        call: Callable[[], Awaitable[AuthorityResponse]],
        success_details: str,
    ) -> AuthorityResponse:
        start = time.perf_counter()
        try:
            response = await call()
        except asyncio.CancelledError:
            AUTHORITY_LATENCY.labels(operation=operation.value).observe(
                time.perf_counter() - start
            )
            PROXY_REQUESTS.labels(operation=operation.value, outcome="cancelled").inc()
            await self._record_to_completion(
                operation, success=False, details=CANCELLED_DETAILS
            )
            raise
        except Exception as e:
            AUTHORITY_LATENCY.labels(operation=operation.value).observe(
                time.perf_counter() - start
            )
            PROXY_REQUESTS.labels(operation=operation.value, outcome="failure").inc()
            details = getattr(e, "message", None) or str(e) or type(e).__name__
            logger.info(
                "member_proxy_forward_failed",
                operation=operation.value,
                error=details,
                error_type=type(e).__name__,
            )
            await self._record_to_completion(operation, success=False, details=details)
            raise

        AUTHORITY_LATENCY.labels(operation=operation.value).observe(
            time.perf_counter() - start
        )
        PROXY_REQUESTS.labels(operation=operation.value, outcome="success").inc()
        stored = await self._record_to_completion(
            operation, success=True, details=success_details
        )
        if not stored and self._strict:
            raise AuditUnavailableError(
                f"Audit log unavailable; {operation.value} completed upstream but was not recorded"
            )
        return response

    async def _record_to_completion(
        self, operation: Operation, *, success: bool, details: str
    ) -> bool:
        """Run ``_record`` so that cancelling the caller cannot abort the append.

        A cancellation that arrives mid-append is re-raised once the entry
        has been written.
        """
        append = asyncio.ensure_future(
            self._record(operation, success=success, details=details)
        )
        try:
            return await asyncio.shield(append)
        except asyncio.CancelledError:
            while not append.done():
                with contextlib.suppress(asyncio.CancelledError):
                    await asyncio.wait({append})
            raise

    async def _record(self, operation: Operation, *, success: bool, details: str) -> bool:
        """Append one audit entry. Returns False if the store failed."""
        entry = AuditEntry(
            operation=operation,
            success=success,
            timestamp=utc_now(),
            details=details,
        )
        try:
            entry_id = await self._audit_store.append(entry)
        except StoreError as e:
            AUDIT_APPEND_FAILURES.labels(operation=operation.value).inc()
            logger.error(
                "audit_append_failed",
                operation=operation.value,
                success=success,
                details=details,
                error=e.message,
                strict=self._strict,
            )
            return False

        logger.debug(
            "audit_entry_appended",
            entry_id=entry_id,
            operation=operation.value,
            success=success,
        )
        return True
