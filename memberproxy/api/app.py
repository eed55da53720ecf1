"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from memberproxy import __version__
from memberproxy.api.dependencies import close_dependencies, init_dependencies
from memberproxy.api.exceptions import MemberProxyAPIError
from memberproxy.api.middleware.context import RequestContextMiddleware
from memberproxy.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from memberproxy.api.routes import register_routes
from memberproxy.authority.errors import (
    AuthorityError,
    AuthorityFailure,
    AuthorityTimeoutError,
)
from memberproxy.config import Settings, get_settings
from memberproxy.db.errors import StoreError
from memberproxy.observability.logging import get_logger, setup_logging
from memberproxy.proxy.coordinator import AuditUnavailableError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the shared Authority client and database pool on shutdown."""
    yield
    await close_dependencies(app)
    logger.info("app_shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from config files when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    app = FastAPI(
        title="Member Proxy",
        description="Forwards member operations to the Member Authority and audits every attempt",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    init_dependencies(app, settings)
    _register_exception_handlers(app)
    register_routes(app, metrics_enabled=settings.observability.metrics.enabled)

    if settings.observability.tracing.enabled:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("opentelemetry_instrumentation_enabled")

    logger.info(
        "app_created",
        debug=settings.debug,
        authority_base_url=settings.authority.base_url,
        audit_backend=settings.storage.audit.backend,
        audit_strict=settings.audit.strict,
    )

    return app


def _error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    *,
    details: list[ErrorDetail] | None = None,
    upstream_status: int | None = None,
) -> JSONResponse:
    body = ErrorBody(
        code=code,
        message=message,
        details=details,
        upstream_status=upstream_status,
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(MemberProxyAPIError)
    async def api_error_handler(request: Request, exc: MemberProxyAPIError) -> JSONResponse:
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(AuthorityFailure)
    async def authority_failure_handler(
        request: Request, exc: AuthorityFailure
    ) -> JSONResponse:
        """Surface the Authority's failure to the caller unchanged in meaning."""
        logger.warning(
            "authority_failure",
            error_type=type(exc).__name__,
            message=exc.message,
            path=request.url.path,
        )
        if isinstance(exc, AuthorityError):
            return _error_response(
                exc.status_code,
                ErrorCode.AUTHORITY_ERROR,
                exc.message,
                upstream_status=exc.status_code,
            )
        if isinstance(exc, AuthorityTimeoutError):
            return _error_response(504, ErrorCode.AUTHORITY_TIMEOUT, exc.message)
        return _error_response(502, ErrorCode.AUTHORITY_UNREACHABLE, exc.message)

    @app.exception_handler(AuditUnavailableError)
    async def audit_unavailable_handler(
        request: Request, exc: AuditUnavailableError
    ) -> JSONResponse:
        logger.error("audit_unavailable", message=exc.message, path=request.url.path)
        return _error_response(503, ErrorCode.AUDIT_UNAVAILABLE, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("store_error", message=exc.message, path=request.url.path)
        return _error_response(503, ErrorCode.AUDIT_UNAVAILABLE, "Audit log unavailable")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("validation_error", errors=exc.errors(), path=request.url.path)
        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        return _error_response(
            400,
            ErrorCode.INVALID_REQUEST,
            "Request validation failed",
            details=details,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(500, ErrorCode.INTERNAL_ERROR, "An unexpected error occurred")

    logger.debug("exception_handlers_registered")
