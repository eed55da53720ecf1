"""Read-only access to the audit log."""

from typing import Annotated

from fastapi import APIRouter, Query

from memberproxy.api.dependencies import AuditStoreDep
from memberproxy.api.exceptions import AuditEntryNotFoundError
from memberproxy.api.models.audit import AuditEntryListResponse
from memberproxy.audit.models import AuditEntry, Operation

router = APIRouter(prefix="/audit")


@router.get("/entries", response_model=AuditEntryListResponse)
async def list_audit_entries(
    audit_store: AuditStoreDep,
    operation: Operation | None = None,
    success: bool | None = None,
    limit: Annotated[int, Query(ge=1, le=1000)] = 100,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> AuditEntryListResponse:
    """List audit entries, newest first."""
    entries = await audit_store.list_entries(
        operation=operation,
        success=success,
        limit=limit,
        offset=offset,
    )
    return AuditEntryListResponse(entries=entries, limit=limit, offset=offset)


@router.get("/entries/{entry_id}", response_model=AuditEntry)
async def get_audit_entry(entry_id: int, audit_store: AuditStoreDep) -> AuditEntry:
    """Get one audit entry."""
    entry = await audit_store.get(entry_id)
    if entry is None:
        raise AuditEntryNotFoundError(f"Audit entry {entry_id} not found")
    return entry
