"""Shared pytest fixtures for company_ledger tests."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from company_ledger.application.services import CompanyService, TransactionService
from company_ledger.core.config import reset_settings
from company_ledger.di.container import reset_container
from company_ledger.domain.models import Company, CompanyType, Transaction, TransactionType
from company_ledger.infrastructure.memory import (
    InMemoryCompanyRepository,
    InMemoryStore,
    InMemoryTransactionRepository,
)
from company_ledger.main import create_application
from company_ledger.utils.datetime_utils import now, previous_calendar_month_range

TEST_API_KEY = "test-api-key"


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Fresh settings and container for every test, always on the memory backend."""
    monkeypatch.setenv("API_KEY", TEST_API_KEY)
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    reset_settings()
    reset_container()
    yield
    reset_container()
    reset_settings()


@pytest.fixture
def store():
    """An open in-memory store."""
    store = InMemoryStore()
    store.open()
    yield store
    store.close()


@pytest.fixture
def company_repository(store):
    return InMemoryCompanyRepository(store)


@pytest.fixture
def transaction_repository(store):
    return InMemoryTransactionRepository(store)


@pytest.fixture
def company_service(company_repository, transaction_repository):
    return CompanyService(company_repository, transaction_repository)


@pytest.fixture
def transaction_service(transaction_repository, company_repository):
    return TransactionService(transaction_repository, company_repository)


@pytest.fixture
def make_company(company_repository):
    """Create and store a company; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "id": f"company-{counter['n']}",
            "name": f"Company {counter['n']}",
            "industry": "Technology",
            "founded_year": 2015,
            "employee_count": 10,
            "is_active": True,
            "type": CompanyType.PYME,
        }
        fields.update(overrides)
        return company_repository.save(Company(**fields))

    return _make


@pytest.fixture
def make_transaction(transaction_repository):
    """Create and store a transaction; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make(company_id, **overrides):
        counter["n"] += 1
        fields = {
            "id": f"tx-{counter['n']}",
            "company_id": company_id,
            "amount": 100.0,
            "type": TransactionType.INCOME,
            "description": "Invoice payment",
            "transaction_date": now() - timedelta(days=1),
        }
        fields.update(overrides)
        return transaction_repository.save(Transaction(**fields))

    return _make


@pytest.fixture
def last_month_date():
    """A datetime inside the previous calendar month."""
    start, _ = previous_calendar_month_range()
    return start + timedelta(days=1)


@pytest.fixture
def client():
    """FastAPI test client with startup/shutdown events run."""
    with TestClient(create_application()) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"X-API-Key": TEST_API_KEY}
