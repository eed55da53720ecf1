"""Test doubles for the Member Authority and the audit store."""

from tests.factories.authority import FakeMemberAuthority
from tests.factories.stores import SlowAuditStore, UnavailableAuditStore

__all__ = [
    "FakeMemberAuthority",
    "SlowAuditStore",
    "UnavailableAuditStore",
]
