"""Dependency injection for API routes.

``create_app`` builds the Authority client, audit store and proxy once from
the settings it was given and keeps them on ``app.state``. The providers
below only read them back, so every request sees the same configuration.
Tests replace them through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, FastAPI, Request

from memberproxy.audit.store import AuditStore
from memberproxy.audit.stores.inmemory import InMemoryAuditStore
from memberproxy.audit.stores.postgres import PostgresAuditStore
from memberproxy.authority.client import MemberAuthorityClient
from memberproxy.config import Settings
from memberproxy.db.pool import PostgresPool
from memberproxy.observability.logging import get_logger
from memberproxy.proxy.coordinator import MemberProxy

logger = get_logger(__name__)


def build_audit_store(settings: Settings) -> AuditStore:
    """Create the audit store selected by ``storage.audit.backend``.

    The PostgreSQL pool connects lazily, so an unreachable database shows
    up as append failures rather than a startup crash.
    """
    config = settings.storage.audit
    if config.backend == "postgres":
        store: AuditStore = PostgresAuditStore(PostgresPool.from_config(config.postgres))
    else:
        store = InMemoryAuditStore()
    logger.info("audit_store_initialized", store_type=config.backend)
    return store


def init_dependencies(app: FastAPI, settings: Settings) -> None:
    """Build the shared components from ``settings`` and attach them to the app."""
    authority = MemberAuthorityClient.from_config(settings.authority)
    audit_store = build_audit_store(settings)

    app.state.settings = settings
    app.state.authority_client = authority
    app.state.audit_store = audit_store
    app.state.member_proxy = MemberProxy(
        authority=authority,
        audit_store=audit_store,
        strict=settings.audit.strict,
    )
    logger.info(
        "member_proxy_initialized",
        base_url=settings.authority.base_url,
        timeout_seconds=settings.authority.timeout_seconds,
        strict=settings.audit.strict,
    )


async def close_dependencies(app: FastAPI) -> None:
    """Close the Authority client and the audit store's connections."""
    await app.state.authority_client.close()
    await app.state.audit_store.close()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_audit_store(request: Request) -> AuditStore:
    return request.app.state.audit_store


def get_member_proxy(request: Request) -> MemberProxy:
    return request.app.state.member_proxy


SettingsDep = Annotated[Settings, Depends(get_settings)]
AuditStoreDep = Annotated[AuditStore, Depends(get_audit_store)]
MemberProxyDep = Annotated[MemberProxy, Depends(get_member_proxy)]
