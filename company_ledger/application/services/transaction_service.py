"""
Transaction Service
===================

Application service that coordinates transaction-related operations.
"""
from typing import Optional, Union

from company_ledger.application.use_cases.transaction import CreateTransactionUseCase
from company_ledger.domain.errors import DomainError
from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.domain.result import Result


class TransactionService:
    """Application service for transaction operations."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        company_repository: CompanyRepository,
    ):
        self._create_use_case = CreateTransactionUseCase(
            transaction_repository,
            company_repository,
        )

    def create_transaction(
        self,
        company_id: str,
        amount: float,
        type: Union[TransactionType, str],
        description: str,
        transaction_date: str,
        status: Union[TransactionStatus, str] = TransactionStatus.PENDING,
        reference: Optional[str] = None,
    ) -> Result[Transaction, DomainError]:
        """
        Record a transaction for an active company.

        Args:
            company_id: Company the transaction belongs to
            amount: Transaction amount
            type: Transaction type
            description: Transaction description
            transaction_date: ISO 8601 date string
            status: Initial status
            reference: Optional external reference

        Returns:
            Result of the create transaction use case
        """
        return self._create_use_case.execute(
            company_id=company_id,
            amount=amount,
            type=type,
            description=description,
            transaction_date=transaction_date,
            status=status,
            reference=reference,
        )
