"""Mini README: Amount parsing and display helpers for SmartSpend.

Keeping these helpers free of web framework imports lets the ledger, the
exporter and the CLI share one definition of what a valid amount looks like
and how it is rendered.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ..errors import InvalidInputError

_CENTS = Decimal("0.01")

# Largest single amount accepted; keeps totals and JSON floats finite.
MAX_AMOUNT = Decimal("1000000000000")


def parse_amount(value: object, field_name: str = "amount") -> Decimal:
    """Coerce user input into a bounded, finite Decimal or raise ``InvalidInputError``."""

    if value is None or isinstance(value, bool):
        raise InvalidInputError(f"A valid {field_name} is required.")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidInputError(f"A valid {field_name} is required.")
    try:
        # str() first so floats keep their shortest repr instead of binary noise.
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as error:
        raise InvalidInputError(f"Unable to read {field_name} '{value}' as a number.") from error
    if not amount.is_finite():
        raise InvalidInputError(f"The {field_name} must be a finite number.")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidInputError(f"The {field_name} must not exceed {MAX_AMOUNT:,}.")
    return amount


def quantize_cents(amount: Decimal) -> Decimal:
    """Round an amount half-up to whole cents."""

    return Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with two decimals, e.g. ``$12.50`` or ``-$3.00``."""

    rounded = quantize_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"
