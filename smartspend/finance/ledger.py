"""Mini README: In-memory daily-allowance ledger for SmartSpend.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable income/expense record with a creation timestamp.
    * SavingsRecord - immutable savings deposit stamped with its creation date.
    * ProjectionResult - figures produced by the 30-day savings projection.
    * Ledger - owns the records and the allowance, validates writes and
      computes totals and projections on demand.

Transactions are kept newest-first because that is how they are shown;
savings deposits are kept oldest-first. Neither ordering affects the
arithmetic. Amounts are always positive Decimals and the sign of a
transaction comes from its type.

The ledger starts uninitialised. ``initialize`` activates it with a daily
allowance and ``reset`` returns it to the uninitialised state. Adds, deletes
and clears are only accepted while active. Every write validates its input
before touching state, so a rejected call leaves the ledger unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from ..errors import InvalidInputError, LedgerInactiveError, NotFoundError
from ..logging_utils import get_logger
from ..utils.formatting import parse_amount, quantize_cents

LOGGER = get_logger(__name__)

DEFAULT_DESCRIPTION = "Untitled"
DEFAULT_PROJECTION_DAYS = 30
MAX_PROJECTION_DAYS = 3650
_ZERO = Decimal("0")


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: Union[str, "TransactionType"]) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise InvalidInputError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense event."""

    transaction_id: str
    description: str
    amount: Decimal
    transaction_type: TransactionType
    created_at: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.transaction_id,
            "description": self.description,
            "amount": float(self.amount),
            "type": self.transaction_type.value,
            "createdAt": self.created_at.isoformat(timespec="seconds"),
        }


@dataclass(frozen=True, slots=True)
class SavingsRecord:
    """A single savings deposit."""

    saving_id: str
    description: str
    amount: Decimal
    created_on: date

    def as_dict(self) -> Dict[str, object]:
        return {
            "id": self.saving_id,
            "description": self.description,
            "amount": float(self.amount),
            "createdAt": self.created_on.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class ProjectionResult:
    """Outcome of extrapolating the average expense over the coming days."""

    daily_allowance: Decimal
    avg_spending: Decimal
    daily_surplus: Decimal
    days_left: int
    projected_savings: Decimal
    potential_total: Decimal

    def as_dict(self) -> Dict[str, object]:
        return {
            "dailyAllowance": float(self.daily_allowance),
            "avgSpending": float(self.avg_spending),
            "dailySurplus": float(self.daily_surplus),
            "daysLeft": self.days_left,
            "projectedSavings": float(self.projected_savings),
            "potentialTotal": float(self.potential_total),
        }


def _normalise_description(description: Optional[str]) -> str:
    cleaned = (description or "").strip()
    return cleaned or DEFAULT_DESCRIPTION


def _positive_amount(value: object, field_name: str = "amount") -> Decimal:
    """Parse ``value`` and insist it is strictly positive."""

    amount = parse_amount(value, field_name)
    if amount <= 0:
        raise InvalidInputError(f"The {field_name} must be greater than zero, got {amount}.")
    return amount


class Ledger:
    """Own the allowance, transactions and savings for a single session."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._transactions: List[Transaction] = []
        self._savings: List[SavingsRecord] = []
        self._daily_allowance: Decimal = _ZERO
        self._active = False
        self._transaction_sequence = 0
        self._saving_sequence = 0
        LOGGER.debug("Ledger created in uninitialised state")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def daily_allowance(self) -> Decimal:
        return self._daily_allowance

    def initialize(self, allowance: object) -> None:
        """Start a fresh session with the given daily allowance."""

        try:
            validated = _positive_amount(allowance, "daily allowance")
        except InvalidInputError:
            LOGGER.warning("Rejected daily allowance %r", allowance)
            raise
        self._transactions.clear()
        self._savings.clear()
        self._daily_allowance = validated
        self._active = True
        LOGGER.info("Ledger initialised with daily allowance %s", validated)

    def reset(self) -> None:
        """Drop every record and zero the allowance."""

        self._transactions.clear()
        self._savings.clear()
        self._daily_allowance = _ZERO
        self._active = False
        LOGGER.info("Ledger reset to uninitialised state")

    def _require_active(self, action: str) -> None:
        if not self._active:
            LOGGER.warning("Refused to %s on an uninitialised ledger", action)
            raise LedgerInactiveError(
                f"Cannot {action} before a daily allowance has been set."
            )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def _next_transaction_id(self) -> str:
        self._transaction_sequence += 1
        return f"txn_{self._transaction_sequence:04d}"

    def _next_saving_id(self) -> str:
        self._saving_sequence += 1
        return f"sav_{self._saving_sequence:04d}"

    def add_transaction(
        self,
        description: Optional[str],
        amount: object,
        transaction_type: Union[str, TransactionType],
    ) -> Transaction:
        """Validate and prepend a new income or expense transaction."""

        self._require_active("add a transaction")
        try:
            validated_amount = _positive_amount(amount)
            validated_type = TransactionType.from_str(transaction_type)
        except InvalidInputError:
            LOGGER.warning("Rejected transaction amount=%r type=%r", amount, transaction_type)
            raise
        transaction = Transaction(
            transaction_id=self._next_transaction_id(),
            description=_normalise_description(description),
            amount=validated_amount,
            transaction_type=validated_type,
            created_at=self._clock(),
        )
        self._transactions.insert(0, transaction)
        LOGGER.info(
            "Recorded %s %s of %s",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
        )
        return transaction

    def add_saving(self, description: Optional[str], amount: object) -> SavingsRecord:
        """Validate and append a savings deposit."""

        self._require_active("add a saving")
        try:
            validated_amount = _positive_amount(amount)
        except InvalidInputError:
            LOGGER.warning("Rejected saving amount=%r", amount)
            raise
        record = SavingsRecord(
            saving_id=self._next_saving_id(),
            description=_normalise_description(description),
            amount=validated_amount,
            created_on=self._clock().date(),
        )
        self._savings.append(record)
        LOGGER.info("Recorded saving %s of %s", record.saving_id, record.amount)
        return record

    def delete_transaction(self, transaction_id: str) -> bool:
        """Remove a transaction by id, returning whether anything was removed."""

        self._require_active("delete a transaction")
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                del self._transactions[index]
                LOGGER.info("Deleted transaction %s", transaction_id)
                return True
        LOGGER.debug("No transaction %s to delete", transaction_id)
        return False

    def delete_saving(self, saving_id: str) -> bool:
        """Remove a savings deposit by id, returning whether anything was removed."""

        self._require_active("delete a saving")
        for index, record in enumerate(self._savings):
            if record.saving_id == saving_id:
                del self._savings[index]
                LOGGER.info("Deleted saving %s", saving_id)
                return True
        LOGGER.debug("No saving %s to delete", saving_id)
        return False

    def clear_transactions(self) -> None:
        self._require_active("clear transactions")
        LOGGER.info("Clearing %s transactions", len(self._transactions))
        self._transactions.clear()

    def clear_savings(self) -> None:
        self._require_active("clear savings")
        LOGGER.info("Clearing %s savings", len(self._savings))
        self._savings.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_transactions(self) -> List[Transaction]:
        """Return transactions newest-first."""

        return list(self._transactions)

    def list_savings(self) -> List[SavingsRecord]:
        """Return savings deposits oldest-first."""

        return list(self._savings)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising ``NotFoundError`` when missing."""

        for transaction in self._transactions:
            if transaction.transaction_id == transaction_id:
                return transaction
        raise NotFoundError(f"Transaction {transaction_id} not found")

    def get_saving(self, saving_id: str) -> SavingsRecord:
        """Retrieve a savings deposit, raising ``NotFoundError`` when missing."""

        for record in self._savings:
            if record.saving_id == saving_id:
                return record
        raise NotFoundError(f"Saving {saving_id} not found")

    def total_income(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.transaction_type is TransactionType.INCOME),
            _ZERO,
        )

    def total_expenses(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.transaction_type is TransactionType.EXPENSE),
            _ZERO,
        )

    def expense_count(self) -> int:
        return sum(1 for t in self._transactions if t.transaction_type is TransactionType.EXPENSE)

    def total_savings(self) -> Decimal:
        return sum((record.amount for record in self._savings), _ZERO)

    def balance(self) -> Decimal:
        """Income minus expenses; negative when overspent."""

        return self.total_income() - self.total_expenses()

    def summary(self) -> Dict[str, object]:
        """Dashboard figures for display layers."""

        return {
            "active": self._active,
            "dailyAllowance": float(self._daily_allowance),
            "totalIncome": float(self.total_income()),
            "totalExpenses": float(self.total_expenses()),
            "balance": float(self.balance()),
            "totalSavings": float(self.total_savings()),
            "transactionCount": len(self._transactions),
            "savingsCount": len(self._savings),
        }

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------
    def project(self, days_left: int = DEFAULT_PROJECTION_DAYS) -> ProjectionResult:
        """Extrapolate the average expense to estimate savings over ``days_left``.

        The average expense per recorded expense stands in for daily spending.
        Without any expense history the whole allowance is assumed saved. A
        negative projection is floored at zero rather than carried as debt.
        Reported figures are rounded to cents after the arithmetic.
        """

        if (
            isinstance(days_left, bool)
            or not isinstance(days_left, int)
            or not 0 <= days_left <= MAX_PROJECTION_DAYS
        ):
            raise InvalidInputError(
                f"Days left must be an integer between 0 and {MAX_PROJECTION_DAYS}, got {days_left!r}."
            )

        count = self.expense_count()
        avg_spending = _ZERO
        if count > 0:
            avg_spending = self.total_expenses() / count
        daily_surplus = self._daily_allowance - avg_spending
        projected = daily_surplus * days_left
        if projected < 0:
            projected = _ZERO
        result = ProjectionResult(
            daily_allowance=self._daily_allowance,
            avg_spending=quantize_cents(avg_spending),
            daily_surplus=quantize_cents(daily_surplus),
            days_left=days_left,
            projected_savings=quantize_cents(projected),
            potential_total=quantize_cents(self.total_savings() + projected),
        )
        LOGGER.debug(
            "Projection over %s days -> avg %s projected %s total %s",
            days_left,
            avg_spending,
            projected,
            result.potential_total,
        )
        return result
