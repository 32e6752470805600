"""Tests for the SQL-backed ownership ledger."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from tablemint.infrastructure.database.schema import ownership
from tablemint.infrastructure.registry import Registry


class TestSqlOwnershipLedger:
    def test_record_and_exists(self, registry: Registry) -> None:
        ledger = registry.ledger
        assert ledger.exists(0) is False
        ledger.record(0, "alice")
        assert ledger.exists(0) is True
        assert ledger.exists(1) is False

    def test_owner_of(self, registry: Registry) -> None:
        registry.ledger.record(3, "bob")
        assert registry.ledger.owner_of(3) == "bob"
        assert registry.ledger.owner_of(4) is None

    def test_records_issue_timestamp(self, registry: Registry) -> None:
        registry.ledger.record(0, "alice")
        with registry.engine.connect() as conn:
            row = conn.execute(select(ownership).where(ownership.c.id == 0)).one()
        assert row.owner == "alice"
        assert "T" in row.issued_at

    def test_duplicate_record_fails(self, registry: Registry) -> None:
        registry.ledger.record(0, "alice")
        with pytest.raises(IntegrityError):
            registry.ledger.record(0, "mallory")
        assert registry.ledger.owner_of(0) == "alice"
