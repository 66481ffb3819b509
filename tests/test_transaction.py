"""Tests for the Transaction entity and its status transitions."""

from datetime import datetime, timedelta, timezone

import pytest

from company_ledger.domain.errors import BusinessRuleError, ValidationError
from company_ledger.domain.models import Transaction, TransactionStatus, TransactionType
from company_ledger.utils.datetime_utils import now


def build_transaction(**overrides):
    fields = {
        "id": "t-1",
        "company_id": "c-1",
        "amount": 250.0,
        "type": TransactionType.EXPENSE,
        "description": "Office supplies",
        "transaction_date": now() - timedelta(days=2),
    }
    fields.update(overrides)
    return Transaction(**fields)


class TestTransactionConstruction:
    """Tests for validation on construction."""

    def test_create_transaction(self):
        tx = build_transaction(reference="REF-1")
        data = tx.to_dict()

        assert data["company_id"] == "c-1"
        assert data["amount"] == 250.0
        assert data["type"] == "EXPENSE"
        assert data["status"] == "PENDING"
        assert data["reference"] == "REF-1"

    def test_company_id_required(self):
        with pytest.raises(ValidationError, match="Company ID is required"):
            build_transaction(company_id="")

    @pytest.mark.parametrize("amount", [0, -10, 1_000_000_001, float("nan"), float("inf")])
    def test_amount_out_of_range(self, amount):
        with pytest.raises(ValidationError, match="amount"):
            build_transaction(amount=amount)

    def test_amount_upper_bound_inclusive(self):
        assert build_transaction(amount=1_000_000_000).amount == 1_000_000_000

    @pytest.mark.parametrize("amount", ["100", True, None])
    def test_amount_must_be_number(self, amount):
        with pytest.raises(ValidationError, match="must be a number"):
            build_transaction(amount=amount)

    def test_description_rules(self):
        with pytest.raises(ValidationError, match="description is required"):
            build_transaction(description="  ")
        with pytest.raises(ValidationError, match="cannot exceed 500"):
            build_transaction(description="x" * 501)

    def test_future_date_rejected(self):
        with pytest.raises(ValidationError, match="cannot be in the future"):
            build_transaction(transaction_date=now() + timedelta(days=1))

    def test_date_before_1900_rejected(self):
        with pytest.raises(ValidationError, match="before 1900"):
            build_transaction(transaction_date=datetime(1899, 12, 31, tzinfo=timezone.utc))

    def test_date_required(self):
        with pytest.raises(ValidationError, match="Transaction date is required"):
            build_transaction(transaction_date="2024-01-01")

    def test_invalid_type_and_status(self):
        with pytest.raises(ValidationError, match="Invalid transaction type"):
            build_transaction(type="GIFT")
        with pytest.raises(ValidationError, match="Invalid transaction status"):
            build_transaction(status="DONE")

    def test_reference_length(self):
        with pytest.raises(ValidationError, match="cannot exceed 100"):
            build_transaction(reference="r" * 101)

    def test_fields_fixed_after_creation(self):
        tx = build_transaction()
        with pytest.raises(BusinessRuleError, match="amount cannot be changed"):
            tx.amount = 1.0
        assert tx.amount == 250.0

    def test_status_not_directly_assignable(self):
        tx = build_transaction()
        tx.cancel()
        with pytest.raises(BusinessRuleError, match=r"complete\(\), cancel\(\) or fail\(\)"):
            tx.status = TransactionStatus.COMPLETED
        with pytest.raises(BusinessRuleError):
            tx.status = "BOGUS"
        assert tx.status is TransactionStatus.CANCELLED


class TestTransactionStatus:
    """Tests for the PENDING -> COMPLETED / CANCELLED / FAILED state machine."""

    def test_complete(self):
        tx = build_transaction()
        tx.complete()
        assert tx.status is TransactionStatus.COMPLETED

    def test_complete_twice_fails(self):
        tx = build_transaction()
        tx.complete()
        with pytest.raises(BusinessRuleError, match="already completed"):
            tx.complete()

    def test_cancel_then_complete_fails(self):
        tx = build_transaction()
        tx.cancel()
        with pytest.raises(BusinessRuleError, match="Cannot complete a cancelled transaction"):
            tx.complete()
        assert tx.status is TransactionStatus.CANCELLED

    def test_completed_cannot_be_cancelled_or_failed(self):
        tx = build_transaction(status=TransactionStatus.COMPLETED)
        with pytest.raises(BusinessRuleError, match="Cannot cancel a completed transaction"):
            tx.cancel()
        with pytest.raises(BusinessRuleError, match="Cannot fail a completed transaction"):
            tx.fail()

    def test_failed_is_terminal(self):
        tx = build_transaction()
        tx.fail()
        assert tx.status is TransactionStatus.FAILED
        with pytest.raises(BusinessRuleError):
            tx.complete()
        with pytest.raises(BusinessRuleError):
            tx.cancel()
        with pytest.raises(BusinessRuleError, match="already failed"):
            tx.fail()

    def test_transition_touches_updated_at(self):
        tx = build_transaction()
        before = tx.updated_at
        tx.cancel()
        assert tx.updated_at >= before


class TestTransactionPredicates:
    """Tests for derived predicates."""

    def test_income_and_expense(self):
        assert build_transaction(type="INCOME").is_income()
        assert build_transaction(type="EXPENSE").is_expense()
        assert not build_transaction(type="TRANSFER").is_income()

    def test_high_value(self):
        assert build_transaction(amount=10_000).is_high_value()
        assert not build_transaction(amount=9_999.99).is_high_value()

    def test_recent(self):
        assert build_transaction(transaction_date=now() - timedelta(days=29)).is_recent()
        assert not build_transaction(transaction_date=now() - timedelta(days=31)).is_recent()
