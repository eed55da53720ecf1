"""Audit domain models."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Operation(str, Enum):
    """Kind of member operation an audit entry describes."""

    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class AuditEntry(BaseModel):
    """Immutable record of one proxied operation attempt.

    ``id`` is None until a store assigns one on append. The timestamp
    marks when the Authority call concluded, not when it started.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(default=None, description="Store-assigned identifier")
    operation: Operation = Field(..., description="Operation kind")
    success: bool = Field(..., description="Whether the Authority call succeeded")
    timestamp: datetime = Field(
        default_factory=utc_now, description="When the attempt concluded"
    )
    details: str = Field(default="", description="Summary or failure message")

    def with_id(self, entry_id: int) -> "AuditEntry":
        """Return a copy carrying the store-assigned identifier."""
        return self.model_copy(update={"id": entry_id})
