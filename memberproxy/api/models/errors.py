"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes returned by the proxy."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, bad path or query values)."""

    AUTHORITY_ERROR = "AUTHORITY_ERROR"
    """The Member Authority answered with an error status."""

    AUTHORITY_UNREACHABLE = "AUTHORITY_UNREACHABLE"
    """The Member Authority could not be reached."""

    AUTHORITY_TIMEOUT = "AUTHORITY_TIMEOUT"
    """The Member Authority did not answer in time."""

    AUDIT_UNAVAILABLE = "AUDIT_UNAVAILABLE"
    """The audit log could not be written or read."""

    AUDIT_ENTRY_NOT_FOUND = "AUDIT_ENTRY_NOT_FOUND"
    """The requested audit entry does not exist."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    details: list[ErrorDetail] | None = None
    """Additional error details for validation failures."""

    upstream_status: int | None = None
    """Status code returned by the Member Authority, if it answered."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "AUTHORITY_ERROR",
                "message": "Member not found with id: 42",
                "upstream_status": 404
            }
        }
    """

    error: ErrorBody
