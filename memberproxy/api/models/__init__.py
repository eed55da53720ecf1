"""API request and response models."""

from memberproxy.api.models.audit import AuditEntryListResponse
from memberproxy.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from memberproxy.api.models.health import AuditStoreHealth, AuthorityInfo, HealthResponse

__all__ = [
    "AuditEntryListResponse",
    "AuditStoreHealth",
    "AuthorityInfo",
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
]
