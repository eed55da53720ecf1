"""Configuration loading for the member proxy.

Usage:
    from memberproxy.config import get_settings

    settings = get_settings()
    base_url = settings.authority.base_url
"""

from functools import lru_cache

from memberproxy.config.loader import load_config
from memberproxy.config.settings import Settings, set_toml_config
from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Falls back to model defaults plus environment variables when no
    ``default.toml`` can be found. Call ``reload_settings()`` to pick up
    changed files.
    """
    try:
        set_toml_config(load_config())
    except FileNotFoundError as e:
        logger.warning("config_file_not_found", error=str(e))
        set_toml_config({})

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and load configuration again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
