"""Audit store backends."""

from memberproxy.audit.store import AuditStore
from memberproxy.audit.stores.inmemory import InMemoryAuditStore
from memberproxy.audit.stores.postgres import PostgresAuditStore

__all__ = [
    "AuditStore",
    "InMemoryAuditStore",
    "PostgresAuditStore",
]
