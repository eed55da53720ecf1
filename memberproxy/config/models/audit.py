"""Audit policy configuration."""

from pydantic import BaseModel, Field


class AuditConfig(BaseModel):
    """How the proxy reacts when an audit entry cannot be written."""

    strict: bool = Field(
        default=False,
        description=(
            "Fail the request with 503 when the audit append fails after a "
            "successful Authority call. When false the failure is logged and "
            "counted and the Authority's result is returned."
        ),
    )
