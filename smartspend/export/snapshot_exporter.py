"""Mini README: Export the ledger to a JSON snapshot document.

Structure:
    * SnapshotExporter - builds the export document and writes it to disk.

The export is one-way: it captures the allowance, the running totals and
every record at the moment of export. Nothing reads these files back.
"""

from __future__ import annotations

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict

from ..finance import Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

EXPORT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SnapshotExporter:
    """Serialise a ledger into the SmartSpend export format."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def build_snapshot(self, ledger: Ledger) -> Dict[str, object]:
        """Return the export document using only the ledger's read operations."""

        return {
            "dailyAllowance": float(ledger.daily_allowance),
            "totalIncome": float(ledger.total_income()),
            "totalExpenses": float(ledger.total_expenses()),
            "balance": float(ledger.balance()),
            "totalSavings": float(ledger.total_savings()),
            "transactions": [transaction.as_dict() for transaction in ledger.list_transactions()],
            "savings": [record.as_dict() for record in ledger.list_savings()],
            "exportDate": self._clock().strftime(EXPORT_DATE_FORMAT),
        }

    @staticmethod
    def default_filename() -> str:
        return f"smartspend-data-{int(time.time() * 1000)}.json"

    def export(self, ledger: Ledger, output_directory: Path) -> Path:
        """Write the snapshot to ``output_directory`` and return the file path."""

        snapshot = self.build_snapshot(ledger)
        output_directory.mkdir(parents=True, exist_ok=True)
        destination = output_directory / self.default_filename()
        LOGGER.info(
            "Exporting %s transactions and %s savings to %s",
            len(snapshot["transactions"]),
            len(snapshot["savings"]),
            destination,
        )
        with destination.open("w", encoding="utf-8") as export_file:
            json.dump(snapshot, export_file, indent=2)
        return destination
