"""Tests for the MongoDB repositories against a mocked collection."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from company_ledger.domain.errors import ConflictError
from company_ledger.domain.models import Company, CompanyType, Transaction
from company_ledger.infrastructure.db import MongoCompanyRepository, MongoTransactionRepository
from company_ledger.utils.datetime_utils import now


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def client(collection):
    manager = MagicMock()
    manager.get_collection.return_value = collection
    return manager


def acme():
    return Company(
        id="c-1",
        name="Acme",
        industry="Retail",
        founded_year=2001,
        employee_count=7,
        is_active=True,
        type=CompanyType.PYME,
    )


class TestMongoCompanyRepository:
    """Tests for document mapping and duplicate handling."""

    def test_unique_indexes_created(self, client, collection):
        MongoCompanyRepository(client, "companies")
        client.get_collection.assert_called_once_with("companies")
        assert all(c.kwargs.get("unique") for c in collection.create_index.call_args_list)

    def test_save_stores_normalized_name(self, client, collection):
        MongoCompanyRepository(client).save(acme())

        _, document = collection.replace_one.call_args.args
        assert document["name_normalized"] == "acme"
        assert document["type"] == "PYME"
        assert collection.replace_one.call_args.kwargs["upsert"] is True

    def test_duplicate_key_becomes_conflict(self, client, collection):
        collection.replace_one.side_effect = DuplicateKeyError("dup")
        with pytest.raises(ConflictError, match='"Acme" already exists'):
            MongoCompanyRepository(client).save(acme())

    def test_document_round_trip(self, client, collection):
        repository = MongoCompanyRepository(client)
        company = acme()
        collection.find_one.return_value = repository._to_document(company)

        found = repository.find_by_name("ACME")

        collection.find_one.assert_called_once_with({"name_normalized": "acme"})
        assert found == company
        assert found.to_dict() == company.to_dict()

    def test_find_by_id_missing(self, client, collection):
        collection.find_one.return_value = None
        assert MongoCompanyRepository(client).find_by_id("x") is None


class TestMongoTransactionRepository:
    """Tests for last-month company id aggregation."""

    def test_distinct_company_ids(self, client, collection):
        repository = MongoTransactionRepository(client)
        docs = [
            repository._to_document(Transaction(
                id=f"t-{i}",
                company_id=company_id,
                amount=10,
                type="INCOME",
                description="Sale",
                transaction_date=now() - timedelta(days=1),
            ))
            for i, company_id in enumerate(["c-2", "c-1", "c-2"])
        ]
        collection.find.return_value.sort.return_value = docs

        assert repository.find_companies_with_transactions_in_last_month() == ["c-2", "c-1"]
