"""Layered TOML configuration.

``default.toml`` is required; ``{MEMBERPROXY_ENV}.toml`` from the same
directory is laid over it when present.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "MEMBERPROXY_CONFIG_DIR"
ENVIRONMENT_ENV = "MEMBERPROXY_ENV"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` laid over it, table by table."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Read the default layer and the environment layer into one dict.

    Args:
        config_dir: Directory holding the TOML files. Defaults to
            MEMBERPROXY_CONFIG_DIR, then ``./config``.
        environment: Name of the overlay file. Defaults to MEMBERPROXY_ENV,
            then ``development``.

    Raises:
        FileNotFoundError: If ``default.toml`` is missing
        tomllib.TOMLDecodeError: If a layer is not valid TOML
    """
    directory = config_dir or Path(os.environ.get(CONFIG_DIR_ENV, "config"))
    environment = environment or os.environ.get(ENVIRONMENT_ENV, "development")

    default_path = directory / "default.toml"
    if not default_path.is_file():
        raise FileNotFoundError(
            f"{default_path} not found; run from the project root or set {CONFIG_DIR_ENV}"
        )

    config: dict[str, Any] = {}
    for path in (default_path, directory / f"{environment}.toml"):
        if path.is_file():
            config = deep_merge(config, tomllib.loads(path.read_text()))
    return config
