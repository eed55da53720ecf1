"""Shared test fixtures for the memberproxy test suite."""

from collections.abc import AsyncIterator, Callable, Generator
from pathlib import Path

import httpx
import pytest

from memberproxy.audit.stores.inmemory import InMemoryAuditStore
from memberproxy.authority.client import MemberAuthorityClient
from memberproxy.proxy.coordinator import MemberProxy
from tests.factories import FakeMemberAuthority

AUTHORITY_URL = "http://authority.test"


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from memberproxy.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def authority() -> FakeMemberAuthority:
    return FakeMemberAuthority()


@pytest.fixture
async def authority_client(
    authority: FakeMemberAuthority,
) -> AsyncIterator[MemberAuthorityClient]:
    client = MemberAuthorityClient(
        base_url=AUTHORITY_URL,
        timeout=2.0,
        transport=httpx.MockTransport(authority),
    )
    yield client
    await client.close()


@pytest.fixture
def audit_store() -> InMemoryAuditStore:
    return InMemoryAuditStore()


@pytest.fixture
def member_proxy(
    authority_client: MemberAuthorityClient, audit_store: InMemoryAuditStore
) -> MemberProxy:
    return MemberProxy(authority=authority_client, audit_store=audit_store)
