"""API exception hierarchy.

All API exceptions inherit from MemberProxyAPIError, whose status_code and
error_code drive the global exception handler. Failures from the Authority
and the audit store keep their own types and are mapped in ``app.py``.
"""

from memberproxy.api.models.errors import ErrorCode


class MemberProxyAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AuditEntryNotFoundError(MemberProxyAPIError):
    """Raised when an audit entry id doesn't exist."""

    status_code = 404
    error_code = ErrorCode.AUDIT_ENTRY_NOT_FOUND
