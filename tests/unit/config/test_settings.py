"""Unit tests for Settings resolution."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from memberproxy.config import get_settings, reload_settings
from memberproxy.config.models import AuthorityConfig, AuditStoreConfig
from memberproxy.config.settings import Settings, set_toml_config


@pytest.fixture(autouse=True)
def reset_toml() -> None:
    set_toml_config({})


class TestDefaults:
    """Model defaults with no files or environment."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.app_name == "memberproxy"
        assert settings.authority.base_url == "http://localhost:8888"
        assert settings.authority.timeout_seconds == 10.0
        assert settings.storage.audit.backend == "inmemory"
        assert settings.audit.strict is False
        assert settings.observability.metrics.enabled is True

    def test_base_url_trailing_slash_stripped(self) -> None:
        assert AuthorityConfig(base_url="http://info:8888/").base_url == "http://info:8888"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AuthorityConfig(timeout_seconds=0)

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AuditStoreConfig(backend="redis")

    def test_cors_origins_from_string(self) -> None:
        settings = Settings(api={"cors_origins": "http://a.test, http://b.test"})
        assert settings.api.cors_origins == ["http://a.test", "http://b.test"]


class TestSourcePriority:
    """TOML < environment < constructor arguments."""

    def test_toml_values(self) -> None:
        set_toml_config({"authority": {"base_url": "http://toml:1"}, "audit": {"strict": True}})

        settings = Settings()

        assert settings.authority.base_url == "http://toml:1"
        assert settings.audit.strict is True

    def test_env_overrides_toml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        set_toml_config({"authority": {"base_url": "http://toml:1"}})
        monkeypatch.setenv("MEMBERPROXY_AUTHORITY__BASE_URL", "http://env:2")

        assert Settings().authority.base_url == "http://env:2"

    def test_init_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEMBERPROXY_DEBUG", "true")
        assert Settings(debug=False).debug is False


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_loads_from_config_dir(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({
            "default.toml": '[authority]\nbase_url = "http://info-service:8888"\n',
            "development.toml": "debug = true\n",
        })
        monkeypatch.setenv("MEMBERPROXY_CONFIG_DIR", str(test_config_dir))
        monkeypatch.delenv("MEMBERPROXY_ENV", raising=False)

        settings = get_settings()

        assert settings.authority.base_url == "http://info-service:8888"
        assert settings.debug is True

    def test_cached(self, test_config_dir: Path, mock_toml_files, monkeypatch) -> None:
        mock_toml_files({"default.toml": ""})
        monkeypatch.setenv("MEMBERPROXY_CONFIG_DIR", str(test_config_dir))

        assert get_settings() is get_settings()

    def test_reload_picks_up_changes(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        mock_toml_files({"default.toml": "[audit]\nstrict = false\n"})
        monkeypatch.setenv("MEMBERPROXY_CONFIG_DIR", str(test_config_dir))
        monkeypatch.delenv("MEMBERPROXY_ENV", raising=False)
        assert get_settings().audit.strict is False

        mock_toml_files({"default.toml": "[audit]\nstrict = true\n"})

        assert reload_settings().audit.strict is True

    def test_missing_default_falls_back(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MEMBERPROXY_CONFIG_DIR", str(test_config_dir))

        assert get_settings().authority.base_url == "http://localhost:8888"
