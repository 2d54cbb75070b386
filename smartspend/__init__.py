"""Mini README: Core package initializer for SmartSpend.

SmartSpend tracks a daily allowance against logged income, expenses and
savings deposits, and projects how much could be saved over the coming
month. The in-memory ledger lives in ``smartspend.finance``; the HTTP and
CLI layers only drive it.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
