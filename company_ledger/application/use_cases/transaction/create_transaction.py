"""
Create Transaction Use Case
===========================

Business use case for recording a transaction against an existing, active company.
"""
import logging
import uuid
from typing import Optional, Union

from company_ledger.domain.errors import (
    BusinessRuleError,
    DomainError,
    NotFoundError,
    ValidationError,
    company_not_found,
    inactive_company,
)
from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.domain.result import Err, Ok, Result
from company_ledger.utils.datetime_utils import parse_iso

logger = logging.getLogger(__name__)


class CreateTransactionUseCase:
    """
    Use case for creating a transaction.

    Checks run in a fixed order: company exists, company is active, then the
    transaction data itself. An invalid amount for an inactive company is
    therefore reported as the inactive-company error.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        company_repository: CompanyRepository,
    ):
        """
        Initialize use case with repositories.

        Args:
            transaction_repository: Repository for transaction persistence
            company_repository: Repository used to resolve the referenced company
        """
        self._transaction_repository = transaction_repository
        self._company_repository = company_repository

    def execute(
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
        Execute the create transaction use case.

        Args:
            company_id: Id of the company the transaction belongs to
            amount: Positive amount, at most 1 billion
            type: INCOME, EXPENSE, TRANSFER or INVESTMENT
            description: Non-empty description, at most 500 characters
            transaction_date: ISO 8601 date string
            status: Initial status
            reference: Optional external reference

        Returns:
            Ok(saved transaction), Err(NotFoundError) for an unknown company,
            Err(BusinessRuleError) for an inactive company,
            Err(ValidationError) for invalid transaction data
        """
        company = self._company_repository.find_by_id(company_id)
        if not company:
            return Err(NotFoundError(company_not_found(company_id)))

        if not company.is_active:
            logger.info("Rejected transaction for inactive company %s", company.id)
            return Err(BusinessRuleError(inactive_company(company.name)))

        parsed_date = parse_iso(transaction_date)
        if parsed_date is None:
            return Err(ValidationError("Invalid transaction date"))

        try:
            transaction = Transaction(
                id=str(uuid.uuid4()),
                company_id=company_id,
                amount=amount,
                type=type,
                description=description,
                transaction_date=parsed_date,
                status=status,
                reference=reference,
            )
        except ValidationError as e:
            return Err(e)

        saved = self._transaction_repository.save(transaction)
        logger.info("Transaction %s created for company %s", saved.id, company_id)
        return Ok(saved)
