"""
In-Memory Transaction Repository
================================

Concrete implementation of TransactionRepository backed by InMemoryStore.
"""
from datetime import datetime
from typing import Callable, Dict, List, Optional

from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.infrastructure.memory.in_memory_store import InMemoryStore
from company_ledger.utils.datetime_utils import previous_calendar_month_range


class InMemoryTransactionRepository(TransactionRepository):
    """Map-backed implementation of TransactionRepository."""

    TABLE_NAME = "transactions"

    def __init__(self, store: InMemoryStore):
        self._store = store

    @property
    def _transactions(self) -> Dict[str, Transaction]:
        return self._store.table(self.TABLE_NAME)

    def _filter(self, predicate: Callable[[Transaction], bool]) -> List[Transaction]:
        return [tx for tx in self._transactions.values() if predicate(tx)]

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        return self._transactions.get(transaction_id)

    def find_all(self) -> List[Transaction]:
        return list(self._transactions.values())

    def save(self, transaction: Transaction) -> Transaction:
        self._transactions[transaction.id] = transaction
        return transaction

    def delete(self, transaction_id: str) -> bool:
        return self._transactions.pop(transaction_id, None) is not None

    def find_by_company_id(self, company_id: str) -> List[Transaction]:
        return self._filter(lambda tx: tx.company_id == company_id)

    def find_by_company_id_and_date_range(
        self,
        company_id: str,
        start_date: datetime,
        end_date: datetime,
    ) -> List[Transaction]:
        return self._filter(
            lambda tx: tx.company_id == company_id
            and start_date <= tx.transaction_date <= end_date
        )

    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> List[Transaction]:
        return self._filter(lambda tx: start_date <= tx.transaction_date <= end_date)

    def find_by_status(self, status: TransactionStatus) -> List[Transaction]:
        return self._filter(lambda tx: tx.status == status)

    def find_by_type(self, transaction_type: TransactionType) -> List[Transaction]:
        return self._filter(lambda tx: tx.type == transaction_type)

    def find_high_value_transactions(self, min_amount: float) -> List[Transaction]:
        return self._filter(lambda tx: tx.amount >= min_amount)

    def find_transactions_in_last_month(self) -> List[Transaction]:
        start, end = previous_calendar_month_range()
        return self.find_by_date_range(start, end)

    def find_companies_with_transactions_in_last_month(self) -> List[str]:
        # dict keeps first-seen order
        company_ids = {tx.company_id: None for tx in self.find_transactions_in_last_month()}
        return list(company_ids)
