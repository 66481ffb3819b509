"""
Transaction Model
=================

Domain model representing a financial transaction of a company.

Only the status (and the modification timestamp) may change once a
transaction exists; every other field is fixed at construction.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from numbers import Real
from typing import Any, Dict, Optional

from company_ledger.domain.errors import BusinessRuleError, ValidationError
from company_ledger.domain.models.base_entity import BaseEntity
from company_ledger.utils.datetime_utils import ensure_aware, now

MAX_AMOUNT = 1_000_000_000
MAX_DESCRIPTION_LENGTH = 500
MAX_REFERENCE_LENGTH = 100
HIGH_VALUE_THRESHOLD = 10_000
RECENT_DAYS = 30
EARLIEST_TRANSACTION_DATE = datetime(1900, 1, 1)


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"
    INVESTMENT = "INVESTMENT"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


_IMMUTABLE_FIELDS = frozenset({
    "id",
    "company_id",
    "amount",
    "type",
    "description",
    "transaction_date",
    "reference",
    "created_at",
})


@dataclass(eq=False)
class Transaction(BaseEntity):
    """
    Transaction domain model.

    References its company by id; whether that company exists and is
    active is checked by the create-transaction use case, not here.
    """
    id: str
    company_id: str
    amount: float
    type: TransactionType
    description: str
    transaction_date: datetime
    status: TransactionStatus = TransactionStatus.PENDING
    reference: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self._validate()
        self.created_at = ensure_aware(self.created_at)
        self.updated_at = ensure_aware(self.updated_at)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            if name in _IMMUTABLE_FIELDS:
                raise BusinessRuleError(f"Transaction {name} cannot be changed after creation")
            if name == "status":
                raise BusinessRuleError(
                    "Transaction status can only change through complete(), cancel() or fail()"
                )
        super().__setattr__(name, value)

    def _transition(self, status: TransactionStatus) -> None:
        object.__setattr__(self, "status", status)
        self._touch()

    def _validate(self) -> None:
        if not isinstance(self.company_id, str) or not self.company_id.strip():
            raise ValidationError("Company ID is required")

        if not isinstance(self.amount, Real) or isinstance(self.amount, bool):
            raise ValidationError("Transaction amount must be a number")
        if not self.amount > 0:  # also rejects NaN
            raise ValidationError("Transaction amount must be positive")
        if self.amount > MAX_AMOUNT:
            raise ValidationError("Transaction amount cannot exceed 1 billion")

        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("Transaction description is required")
        if len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Transaction description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
            )

        if not isinstance(self.transaction_date, datetime):
            raise ValidationError("Transaction date is required")
        self.transaction_date = ensure_aware(self.transaction_date)
        if self.transaction_date > now():
            raise ValidationError("Transaction date cannot be in the future")
        if self.transaction_date < ensure_aware(EARLIEST_TRANSACTION_DATE):
            raise ValidationError("Transaction date cannot be before 1900")

        try:
            self.type = TransactionType(self.type)
        except ValueError:
            raise ValidationError("Invalid transaction type") from None

        try:
            self.status = TransactionStatus(self.status)
        except ValueError:
            raise ValidationError("Invalid transaction status") from None

        if self.reference is not None:
            if not isinstance(self.reference, str):
                raise ValidationError("Transaction reference must be a string")
            if len(self.reference) > MAX_REFERENCE_LENGTH:
                raise ValidationError(
                    f"Transaction reference cannot exceed {MAX_REFERENCE_LENGTH} characters"
                )

    # State transitions

    def complete(self) -> None:
        """PENDING -> COMPLETED."""
        if self.status == TransactionStatus.COMPLETED:
            raise BusinessRuleError("Transaction is already completed")
        if self.status == TransactionStatus.CANCELLED:
            raise BusinessRuleError("Cannot complete a cancelled transaction")
        if self.status == TransactionStatus.FAILED:
            raise BusinessRuleError("Cannot complete a failed transaction")
        self._transition(TransactionStatus.COMPLETED)

    def cancel(self) -> None:
        """PENDING -> CANCELLED."""
        if self.status == TransactionStatus.COMPLETED:
            raise BusinessRuleError("Cannot cancel a completed transaction")
        if self.status == TransactionStatus.CANCELLED:
            raise BusinessRuleError("Transaction is already cancelled")
        if self.status == TransactionStatus.FAILED:
            raise BusinessRuleError("Cannot cancel a failed transaction")
        self._transition(TransactionStatus.CANCELLED)

    def fail(self) -> None:
        """PENDING -> FAILED."""
        if self.status == TransactionStatus.COMPLETED:
            raise BusinessRuleError("Cannot fail a completed transaction")
        if self.status == TransactionStatus.CANCELLED:
            raise BusinessRuleError("Cannot fail a cancelled transaction")
        if self.status == TransactionStatus.FAILED:
            raise BusinessRuleError("Transaction has already failed")
        self._transition(TransactionStatus.FAILED)

    # Derived predicates

    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def is_high_value(self) -> bool:
        return self.amount >= HIGH_VALUE_THRESHOLD

    def is_recent(self) -> bool:
        """Occurred within the last 30 days."""
        return self.transaction_date >= now() - timedelta(days=RECENT_DAYS)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize all fields; enum values become plain strings."""
        return {
            "id": self.id,
            "company_id": self.company_id,
            "amount": self.amount,
            "type": self.type.value,
            "description": self.description,
            "transaction_date": self.transaction_date,
            "status": self.status.value,
            "reference": self.reference,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
