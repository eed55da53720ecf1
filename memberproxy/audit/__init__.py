"""Append-only audit log of proxied member operations."""

from memberproxy.audit.models import AuditEntry, Operation
from memberproxy.audit.store import AuditStore

__all__ = ["AuditEntry", "AuditStore", "Operation"]
