"""Nested configuration sections."""

from memberproxy.config.models.api import APIConfig
from memberproxy.config.models.audit import AuditConfig
from memberproxy.config.models.authority import AuthorityConfig
from memberproxy.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
    TracingConfig,
)
from memberproxy.config.models.storage import (
    AuditStoreConfig,
    PostgresConfig,
    StorageConfig,
)

__all__ = [
    "APIConfig",
    "AuditConfig",
    "AuditStoreConfig",
    "AuthorityConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "PostgresConfig",
    "StorageConfig",
    "TracingConfig",
]
