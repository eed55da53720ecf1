"""Response model for GET /health."""

from typing import Literal

from pydantic import BaseModel

HealthStatus = Literal["healthy", "degraded", "unhealthy"]


class AuditStoreHealth(BaseModel):
    """Result of probing the configured audit store."""

    backend: str
    reachable: bool
    latency_ms: float


class AuthorityInfo(BaseModel):
    """Where requests are forwarded. Reported from configuration, not probed."""

    base_url: str
    timeout_seconds: float


class HealthResponse(BaseModel):
    """Overall status.

    ``degraded`` means the audit store is unreachable but requests are still
    served; ``unhealthy`` means strict auditing makes them fail.
    """

    status: HealthStatus
    version: str
    audit_strict: bool
    audit_store: AuditStoreHealth
    member_authority: AuthorityInfo
