"""Health check and metrics endpoints."""

import time

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from memberproxy import __version__
from memberproxy.api.dependencies import AuditStoreDep, SettingsDep
from memberproxy.api.models.health import (
    AuditStoreHealth,
    AuthorityInfo,
    HealthResponse,
    HealthStatus,
)
from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()
metrics_router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep, audit_store: AuditStoreDep) -> HealthResponse:
    """Probe the audit store and report the configured Authority."""
    start = time.perf_counter()
    reachable = await audit_store.health_check()
    latency_ms = (time.perf_counter() - start) * 1000

    status: HealthStatus = "healthy"
    if not reachable:
        status = "unhealthy" if settings.audit.strict else "degraded"

    logger.debug("health_check_completed", status=status, audit_latency_ms=latency_ms)
    return HealthResponse(
        status=status,
        version=__version__,
        audit_strict=settings.audit.strict,
        audit_store=AuditStoreHealth(
            backend=settings.storage.audit.backend,
            reachable=reachable,
            latency_ms=latency_ms,
        ),
        member_authority=AuthorityInfo(
            base_url=settings.authority.base_url,
            timeout_seconds=settings.authority.timeout_seconds,
        ),
    )


@metrics_router.get("/metrics")
async def get_metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
