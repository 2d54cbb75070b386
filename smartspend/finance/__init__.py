"""Mini README: Budget ledger for SmartSpend.

This package holds the in-memory ledger that records income, expenses and
savings deposits against a daily allowance and derives totals and the
savings projection from them. Display layers read from it and write to it;
it never reaches out to storage or the network itself.
"""

from ..errors import InvalidInputError, LedgerError, LedgerInactiveError, NotFoundError
from .ledger import (
    DEFAULT_PROJECTION_DAYS,
    Ledger,
    ProjectionResult,
    SavingsRecord,
    Transaction,
    TransactionType,
)

__all__ = [
    "DEFAULT_PROJECTION_DAYS",
    "InvalidInputError",
    "Ledger",
    "LedgerError",
    "LedgerInactiveError",
    "NotFoundError",
    "ProjectionResult",
    "SavingsRecord",
    "Transaction",
    "TransactionType",
]
