"""Mini README: Exception hierarchy raised by the SmartSpend ledger.

Structure:
    * LedgerError - common base so callers can catch every ledger failure.
    * InvalidInputError - rejected amounts, allowances, types or horizons.
    * NotFoundError - lookups of identifiers the ledger does not hold.
    * LedgerInactiveError - mutations attempted before ``initialize``.

Each error also derives from the closest builtin so existing ``ValueError``
or ``KeyError`` handlers keep working.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for ledger failures."""


class InvalidInputError(LedgerError, ValueError):
    """Raised when a submitted value is absent, malformed or not positive."""


class NotFoundError(LedgerError, KeyError):
    """Raised when a record lookup references an unknown identifier."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""


class LedgerInactiveError(LedgerError, RuntimeError):
    """Raised when a mutation is attempted while the ledger is uninitialised."""
