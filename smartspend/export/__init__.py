"""Mini README: Export helpers for SmartSpend.

Exposes the snapshot exporter that turns the ledger into the JSON document
offered for download by the interface layer.
"""

from .snapshot_exporter import SnapshotExporter

__all__ = ["SnapshotExporter"]
