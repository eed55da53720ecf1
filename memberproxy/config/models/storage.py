"""Storage backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

AuditBackendType = Literal["inmemory", "postgres"]


class PostgresConfig(BaseModel):
    """PostgreSQL connection pool configuration."""

    dsn: str | None = Field(
        default=None,
        description="Connection string; falls back to DATABASE_URL",
    )
    min_pool_size: int = Field(
        default=2,
        gt=0,
        description="Minimum connections to keep open",
    )
    max_pool_size: int = Field(
        default=10,
        gt=0,
        description="Maximum connections in pool",
    )
    max_inactive_connection_lifetime: float = Field(
        default=300.0,
        gt=0,
        description="Close connections idle longer than this (seconds)",
    )
    command_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Default timeout for queries (seconds)",
    )


class AuditStoreConfig(BaseModel):
    """Audit log backend selection."""

    backend: AuditBackendType = Field(
        default="inmemory",
        description="Backend type",
    )
    postgres: PostgresConfig = Field(
        default_factory=PostgresConfig,
        description="PostgreSQL settings, used when backend is postgres",
    )


class StorageConfig(BaseModel):
    """All storage backends."""

    audit: AuditStoreConfig = Field(
        default_factory=AuditStoreConfig,
        description="Audit log store",
    )
