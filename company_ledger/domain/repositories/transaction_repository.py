"""
Transaction Repository Interface
================================

Abstract interface for transaction data access operations.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)


class TransactionRepository(ABC):
    """Abstract repository interface for transaction operations."""

    @abstractmethod
    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Find a transaction by its ID."""
        pass

    @abstractmethod
    def find_all(self) -> List[Transaction]:
        pass

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """Insert or replace a transaction by id."""
        pass

    @abstractmethod
    def delete(self, transaction_id: str) -> bool:
        pass

    @abstractmethod
    def find_by_company_id(self, company_id: str) -> List[Transaction]:
        """Find all transactions referencing a company."""
        pass

    @abstractmethod
    def find_by_company_id_and_date_range(
        self,
        company_id: str,
        start_date: datetime,
        end_date: datetime,
    ) -> List[Transaction]:
        """Find a company's transactions dated within [start_date, end_date]."""
        pass

    @abstractmethod
    def find_by_date_range(self, start_date: datetime, end_date: datetime) -> List[Transaction]:
        """Find transactions dated within [start_date, end_date]."""
        pass

    @abstractmethod
    def find_by_status(self, status: TransactionStatus) -> List[Transaction]:
        pass

    @abstractmethod
    def find_by_type(self, transaction_type: TransactionType) -> List[Transaction]:
        pass

    @abstractmethod
    def find_high_value_transactions(self, min_amount: float) -> List[Transaction]:
        """Find transactions with amount >= min_amount."""
        pass

    @abstractmethod
    def find_transactions_in_last_month(self) -> List[Transaction]:
        """Find transactions dated within the previous calendar month."""
        pass

    @abstractmethod
    def find_companies_with_transactions_in_last_month(self) -> List[str]:
        """
        Find ids of companies with transactions in the previous calendar month.

        Returns:
            Distinct company ids in first-seen order
        """
        pass
