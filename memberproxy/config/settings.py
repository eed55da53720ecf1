"""Root settings model for the member proxy."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from memberproxy.config.models import (
    APIConfig,
    AuditConfig,
    AuthorityConfig,
    ObservabilityConfig,
    StorageConfig,
)

# TOML values picked up by TomlConfigSettingsSource
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration consulted by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the loaded TOML files."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object.

    Sources, lowest to highest priority:
    1. Model defaults
    2. config/default.toml
    3. config/{MEMBERPROXY_ENV}.toml
    4. MEMBERPROXY_* environment variables (``__`` separates nested keys)
    5. Constructor arguments
    """

    model_config = SettingsConfigDict(
        env_prefix="MEMBERPROXY_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="memberproxy", description="Application name for logging")
    debug: bool = Field(default=False, description="Enable debug mode")

    api: APIConfig = Field(default_factory=APIConfig, description="HTTP server configuration")
    authority: AuthorityConfig = Field(
        default_factory=AuthorityConfig,
        description="Member Authority connection",
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig,
        description="Storage backend configuration",
    )
    audit: AuditConfig = Field(
        default_factory=AuditConfig,
        description="Audit failure policy",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
