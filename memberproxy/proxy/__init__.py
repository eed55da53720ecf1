"""Member proxy coordinator."""

from memberproxy.proxy.coordinator import AuditUnavailableError, MemberProxy

__all__ = ["AuditUnavailableError", "MemberProxy"]
