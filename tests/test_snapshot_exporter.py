"""Mini README: Tests for the JSON export document and file writer."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from smartspend.export import SnapshotExporter
from smartspend.finance import Ledger


def _populated_ledger() -> Ledger:
    ledger = Ledger(clock=lambda: datetime(2024, 6, 1, 8, 0, 0))
    ledger.initialize(20)
    ledger.add_transaction("salary", 100, "income")
    ledger.add_transaction("coffee", "4.50", "expense")
    ledger.add_saving("bonus", 25)
    return ledger


def test_build_snapshot_contains_totals_and_records() -> None:
    exporter = SnapshotExporter(clock=lambda: datetime(2024, 6, 2, 18, 45, 0))

    snapshot = exporter.build_snapshot(_populated_ledger())

    assert snapshot["dailyAllowance"] == 20.0
    assert snapshot["totalIncome"] == 100.0
    assert snapshot["totalExpenses"] == 4.5
    assert snapshot["balance"] == 95.5
    assert snapshot["totalSavings"] == 25.0
    assert snapshot["exportDate"] == "2024-06-02 18:45:00"
    assert [entry["description"] for entry in snapshot["transactions"]] == ["coffee", "salary"]
    assert snapshot["transactions"][0] == {
        "id": "txn_0002",
        "description": "coffee",
        "amount": 4.5,
        "type": "expense",
        "createdAt": "2024-06-01T08:00:00",
    }
    assert snapshot["savings"] == [
        {"id": "sav_0001", "description": "bonus", "amount": 25.0, "createdAt": "2024-06-01"}
    ]


def test_export_writes_json_file(tmp_path: Path) -> None:
    exporter = SnapshotExporter()
    output_directory = tmp_path / "exports"

    path = exporter.export(_populated_ledger(), output_directory)

    assert path.parent == output_directory
    assert path.name.startswith("smartspend-data-")
    assert path.suffix == ".json"
    written = json.loads(path.read_text(encoding="utf-8"))
    assert written["totalSavings"] == 25.0
    assert len(written["transactions"]) == 2
