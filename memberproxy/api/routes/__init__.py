"""API route registration."""

from fastapi import FastAPI

from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, *, metrics_enabled: bool = True) -> None:
    """Register all routers with the FastAPI application.

    Args:
        app: FastAPI application instance
        metrics_enabled: Whether to expose GET /metrics
    """
    from memberproxy.api.routes.audit import router as audit_router
    from memberproxy.api.routes.health import metrics_router
    from memberproxy.api.routes.health import router as health_router
    from memberproxy.api.routes.members import router as members_router

    app.include_router(members_router, tags=["Members"])
    app.include_router(audit_router, tags=["Audit"])
    app.include_router(health_router, tags=["Health"])
    if metrics_enabled:
        app.include_router(metrics_router, tags=["Health"])

    logger.info("routes_registered", metrics_enabled=metrics_enabled)
