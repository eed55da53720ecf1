"""Tests for audit domain models."""

import pytest
from pydantic import ValidationError

from memberproxy.audit.models import AuditEntry, Operation


class TestAuditEntry:
    def test_defaults(self) -> None:
        entry = AuditEntry(operation=Operation.INSERT, success=True)

        assert entry.id is None
        assert entry.details == ""
        assert entry.timestamp.tzinfo is not None

    def test_operation_from_string(self) -> None:
        entry = AuditEntry(operation="DELETE", success=False)
        assert entry.operation is Operation.DELETE

    def test_rejects_free_form_operation(self) -> None:
        with pytest.raises(ValidationError):
            AuditEntry(operation="TRUNCATE", success=True)

    def test_frozen(self) -> None:
        entry = AuditEntry(operation=Operation.SELECT, success=True)
        with pytest.raises(ValidationError):
            entry.details = "changed"

    def test_with_id_returns_copy(self) -> None:
        entry = AuditEntry(operation=Operation.UPDATE, success=True, details="x")

        stored = entry.with_id(12)

        assert stored.id == 12
        assert entry.id is None
        assert stored.details == "x"
        assert stored.timestamp == entry.timestamp
