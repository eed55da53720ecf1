"""Fixtures for API tests: an app wired to the fake Authority and in-memory audit store."""

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from memberproxy.api.app import create_app
from memberproxy.api.dependencies import (
    get_audit_store,
    get_member_proxy,
    get_settings,
)
from memberproxy.audit.store import AuditStore
from memberproxy.audit.stores.inmemory import InMemoryAuditStore
from memberproxy.authority.client import MemberAuthorityClient
from memberproxy.config.settings import Settings, set_toml_config
from memberproxy.proxy.coordinator import MemberProxy
from tests.factories import FakeMemberAuthority


@pytest.fixture
def settings() -> Settings:
    set_toml_config({})
    return Settings(
        authority={"base_url": "http://authority.test", "timeout_seconds": 2.0},
        observability={"logging": {"format": "console", "level": "WARNING"}},
    )


@pytest.fixture
def api_authority() -> FakeMemberAuthority:
    return FakeMemberAuthority()


@pytest.fixture
def api_audit_store() -> AuditStore:
    return InMemoryAuditStore()


@pytest.fixture
def strict() -> bool:
    return False


@pytest.fixture
def app(
    settings: Settings,
    api_authority: FakeMemberAuthority,
    api_audit_store: AuditStore,
    strict: bool,
) -> FastAPI:
    """Create test FastAPI app with overridden dependencies."""
    app = create_app(settings)

    authority_client = MemberAuthorityClient.from_config(
        settings.authority,
        transport=httpx.MockTransport(api_authority),
    )
    proxy = MemberProxy(
        authority=authority_client,
        audit_store=api_audit_store,
        strict=strict,
    )

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_audit_store] = lambda: api_audit_store
    app.dependency_overrides[get_member_proxy] = lambda: proxy

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)
