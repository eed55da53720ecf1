"""Response models for the audit log endpoints."""

from pydantic import BaseModel, Field

from memberproxy.audit.models import AuditEntry


class AuditEntryListResponse(BaseModel):
    """A page of audit entries, newest first."""

    entries: list[AuditEntry] = Field(default_factory=list)
    limit: int
    offset: int
