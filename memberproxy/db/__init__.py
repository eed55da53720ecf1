"""Database connectivity and store errors."""

from memberproxy.db.errors import StoreError, StoreUnavailableError
from memberproxy.db.pool import PostgresPool

__all__ = [
    "PostgresPool",
    "StoreError",
    "StoreUnavailableError",
]
