"""Tests for the application use cases, driven through the services."""

from datetime import timedelta

import pytest

from company_ledger.domain.errors import (
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from company_ledger.domain.models import CompanyType, TransactionStatus
from company_ledger.domain.result import Err, Ok
from company_ledger.utils.datetime_utils import now, previous_calendar_month_range, to_iso


def create_acme(company_service, **overrides):
    fields = {
        "name": "Acme",
        "industry": "Manufacturing",
        "founded_year": 2010,
        "employee_count": 30,
        "is_active": True,
        "type": CompanyType.PYME,
    }
    fields.update(overrides)
    return company_service.create_company(**fields)


class TestCreateCompany:
    """Tests for CreateCompanyUseCase."""

    def test_create_and_get(self, company_service):
        """Created company can be read back with the same name and type."""
        created = create_acme(company_service)
        assert isinstance(created, Ok)

        fetched = company_service.get_company(created.value.id)
        assert isinstance(fetched, Ok)
        assert fetched.value.name == "Acme"
        assert fetched.value.type is CompanyType.PYME

    def test_generates_unique_ids(self, company_service):
        first = create_acme(company_service, name="First").unwrap()
        second = create_acme(company_service, name="Second").unwrap()
        assert first.id != second.id

    def test_duplicate_name_ignoring_case(self, company_service, company_repository):
        create_acme(company_service)
        result = create_acme(company_service, name="ACME")

        assert isinstance(result, Err)
        assert isinstance(result.error, ConflictError)
        assert str(result.error) == 'Company with name "ACME" already exists'
        assert len(company_repository.find_all()) == 1

    def test_invalid_data(self, company_service, company_repository):
        result = create_acme(company_service, employee_count=-1)

        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert company_repository.find_all() == []

    def test_classification_bounds_not_enforced(self, company_service):
        """PYME/CORPORATE employee bounds belong to the registration validator only."""
        result = create_acme(company_service, type=CompanyType.CORPORATE, employee_count=3)
        assert isinstance(result, Ok)


class TestGetCompany:
    """Tests for GetCompanyUseCase."""

    def test_unknown_id(self, company_service):
        result = company_service.get_company("missing")
        assert isinstance(result, Err)
        assert isinstance(result.error, NotFoundError)
        assert str(result.error) == 'Company with id "missing" not found'

    def test_unwrap_raises_error(self, company_service):
        with pytest.raises(NotFoundError):
            company_service.get_company("missing").unwrap()


class TestCreateTransaction:
    """Tests for CreateTransactionUseCase."""

    def test_create_transaction(self, transaction_service, make_company):
        company = make_company()
        result = transaction_service.create_transaction(
            company_id=company.id,
            amount=1500.5,
            type="INCOME",
            description="Subscription",
            transaction_date=to_iso(now() - timedelta(days=1)),
            reference="REF-1",
        )

        assert isinstance(result, Ok)
        assert result.value.company_id == company.id
        assert result.value.status is TransactionStatus.PENDING

    def test_unknown_company(self, transaction_service):
        result = transaction_service.create_transaction(
            company_id="nope",
            amount=10,
            type="INCOME",
            description="x",
            transaction_date=to_iso(now()),
        )
        assert isinstance(result, Err)
        assert isinstance(result.error, NotFoundError)

    def test_inactive_company(self, transaction_service, make_company, transaction_repository):
        company = make_company(name="Dormant", employee_count=0, is_active=False)
        result = transaction_service.create_transaction(
            company_id=company.id,
            amount=10,
            type="EXPENSE",
            description="Rent",
            transaction_date=to_iso(now() - timedelta(hours=1)),
        )

        assert isinstance(result, Err)
        assert isinstance(result.error, BusinessRuleError)
        assert "inactive" in str(result.error)
        assert transaction_repository.find_all() == []

    def test_inactive_checked_before_amount(self, transaction_service, make_company):
        company = make_company(employee_count=0, is_active=False)
        result = transaction_service.create_transaction(
            company_id=company.id,
            amount=0,
            type="EXPENSE",
            description="Rent",
            transaction_date=to_iso(now() - timedelta(hours=1)),
        )
        assert isinstance(result.error, BusinessRuleError)

    @pytest.mark.parametrize("amount", [0, 1_000_000_001])
    def test_amount_bounds(self, transaction_service, make_company, amount):
        company = make_company()
        result = transaction_service.create_transaction(
            company_id=company.id,
            amount=amount,
            type="INCOME",
            description="Sale",
            transaction_date=to_iso(now() - timedelta(hours=1)),
        )
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)

    def test_unparseable_date(self, transaction_service, make_company):
        company = make_company()
        result = transaction_service.create_transaction(
            company_id=company.id,
            amount=10,
            type="INCOME",
            description="Sale",
            transaction_date="yesterday",
        )
        assert isinstance(result.error, ValidationError)
        assert str(result.error) == "Invalid transaction date"


class TestLastMonthQueries:
    """Tests for the two "last month" company queries."""

    def test_created_last_month_is_rolling_30_days(
        self, company_service, make_company
    ):
        recent = make_company(name="Recent", created_at=now() - timedelta(days=5))
        make_company(name="Old", created_at=now() - timedelta(days=40))

        result = company_service.find_companies_created_last_month().unwrap()

        assert [c.id for c in result.companies] == [recent.id]
        assert result.total_count == 1
        assert result.end_date - result.start_date == timedelta(days=30)

    def test_with_transactions_last_month(
        self, company_service, make_company, make_transaction, last_month_date
    ):
        first = make_company(name="First")
        second = make_company(name="Second")
        quiet = make_company(name="Quiet")
        make_transaction(first.id, transaction_date=last_month_date)
        make_transaction(second.id, transaction_date=last_month_date + timedelta(days=1))
        make_transaction(first.id, transaction_date=last_month_date + timedelta(days=2))
        make_transaction(quiet.id, transaction_date=last_month_date - timedelta(days=40))

        result = company_service.find_companies_with_transactions_last_month().unwrap()

        assert [c.id for c in result.companies] == [first.id, second.id]
        start, end = previous_calendar_month_range()
        assert (result.start_date, result.end_date) == (start, end)

    def test_with_transactions_skips_unknown_companies(
        self, company_service, make_company, make_transaction, last_month_date
    ):
        known = make_company()
        make_transaction("deleted-company", transaction_date=last_month_date)
        make_transaction(known.id, transaction_date=last_month_date)

        result = company_service.find_companies_with_transactions_last_month().unwrap()

        assert [c.id for c in result.companies] == [known.id]

    def test_empty(self, company_service):
        result = company_service.find_companies_with_transactions_last_month().unwrap()
        assert result.companies == []
        assert result.total_count == 0
