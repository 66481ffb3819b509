"""
MongoDB Transaction Repository
==============================

Concrete implementation of TransactionRepository using MongoDB.
"""
from datetime import datetime
from typing import List, Optional

from pymongo import ASCENDING

from company_ledger.domain.constants.transaction_fields import TransactionFields
from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.infrastructure.db.mongo_connection import MongoClientManager
from company_ledger.utils.datetime_utils import now, previous_calendar_month_range


class MongoTransactionRepository(TransactionRepository):
    """MongoDB implementation of TransactionRepository."""

    def __init__(self, client: MongoClientManager, collection_name: str = "transactions"):
        self._collection = client.get_collection(collection_name)
        self._collection.create_index([(TransactionFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(TransactionFields.COMPANY_ID, ASCENDING)])
        self._collection.create_index([(TransactionFields.TRANSACTION_DATE, ASCENDING)])

    def _to_entity(self, doc: dict) -> Transaction:
        """Convert MongoDB document to Transaction entity."""
        return Transaction(
            id=doc[TransactionFields.ID],
            company_id=doc[TransactionFields.COMPANY_ID],
            amount=doc[TransactionFields.AMOUNT],
            type=doc[TransactionFields.TYPE],
            description=doc[TransactionFields.DESCRIPTION],
            transaction_date=doc[TransactionFields.TRANSACTION_DATE],
            status=doc[TransactionFields.STATUS],
            reference=doc.get(TransactionFields.REFERENCE),
            created_at=doc.get(TransactionFields.CREATED_AT, now()),
            updated_at=doc.get(TransactionFields.UPDATED_AT, now()),
        )

    def _to_document(self, transaction: Transaction) -> dict:
        """Convert Transaction entity to MongoDB document."""
        return {
            TransactionFields.ID: transaction.id,
            TransactionFields.COMPANY_ID: transaction.company_id,
            TransactionFields.AMOUNT: transaction.amount,
            TransactionFields.TYPE: transaction.type.value,
            TransactionFields.DESCRIPTION: transaction.description,
            TransactionFields.TRANSACTION_DATE: transaction.transaction_date,
            TransactionFields.STATUS: transaction.status.value,
            TransactionFields.REFERENCE: transaction.reference,
            TransactionFields.CREATED_AT: transaction.created_at,
            TransactionFields.UPDATED_AT: transaction.updated_at,
        }

    def _find_many(self, query: dict) -> List[Transaction]:
        docs = self._collection.find(query).sort(TransactionFields.CREATED_AT, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    @staticmethod
    def _date_range(start_date: datetime, end_date: datetime) -> dict:
        return {TransactionFields.TRANSACTION_DATE: {"$gte": start_date, "$lte": end_date}}

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        doc = self._collection.find_one({TransactionFields.ID: transaction_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self) -> List[Transaction]:
        return self._find_many({})

    def save(self, transaction: Transaction) -> Transaction:
        self._collection.replace_one(
            {TransactionFields.ID: transaction.id},
            self._to_document(transaction),
            upsert=True,
        )
        return transaction

    def delete(self, transaction_id: str) -> bool:
        result = self._collection.delete_one({TransactionFields.ID: transaction_id})
        return result.deleted_count > 0

    def find_by_company_id(self, company_id: str) -> List[Transaction]:
        return self._find_many({TransactionFields.COMPANY_ID: company_id})

    def find_by_company_id_and_date_range(
        self,
        company_id: str,
        start_date: datetime,
        end_date: datetime,
    ) -> List[Transaction]:
        query = self._date_range(start_date, end_date)
        query[TransactionFields.COMPANY_ID] = company_id
        return self._find_many(query)

    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> List[Transaction]:
        return self._find_many(self._date_range(start_date, end_date))

    def find_by_status(self, status: TransactionStatus) -> List[Transaction]:
        return self._find_many({TransactionFields.STATUS: TransactionStatus(status).value})

    def find_by_type(self, transaction_type: TransactionType) -> List[Transaction]:
        return self._find_many({TransactionFields.TYPE: TransactionType(transaction_type).value})

    def find_high_value_transactions(self, min_amount: float) -> List[Transaction]:
        return self._find_many({TransactionFields.AMOUNT: {"$gte": min_amount}})

    def find_transactions_in_last_month(self) -> List[Transaction]:
        start, end = previous_calendar_month_range()
        return self.find_by_date_range(start, end)

    def find_companies_with_transactions_in_last_month(self) -> List[str]:
        start, end = previous_calendar_month_range()
        docs = self._collection.find(
            self._date_range(start, end),
            {TransactionFields.COMPANY_ID: 1},
        ).sort(TransactionFields.CREATED_AT, ASCENDING)
        company_ids = {doc[TransactionFields.COMPANY_ID]: None for doc in docs}
        return list(company_ids)
