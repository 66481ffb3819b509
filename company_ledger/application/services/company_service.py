"""
Company Service
===============

Application service that coordinates company-related operations.
This service orchestrates multiple use cases.
"""
from typing import Optional, Union

from company_ledger.application.use_cases.company import (
    CompanyListResult,
    CreateCompanyUseCase,
    FindCompaniesCreatedLastMonthUseCase,
    FindCompaniesWithTransactionsLastMonthUseCase,
    GetCompanyUseCase,
)
from company_ledger.domain.errors import DomainError
from company_ledger.domain.models.company import Company, CompanyType
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.domain.result import Result


class CompanyService:
    """
    Application service for company operations.

    This service coordinates multiple use cases and provides
    a high-level interface for company management.
    """

    def __init__(
        self,
        company_repository: CompanyRepository,
        transaction_repository: TransactionRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            company_repository: Repository for company persistence
            transaction_repository: Repository used by the transaction-based queries
        """
        self._create_use_case = CreateCompanyUseCase(company_repository)
        self._get_use_case = GetCompanyUseCase(company_repository)
        self._created_last_month_use_case = FindCompaniesCreatedLastMonthUseCase(company_repository)
        self._with_transactions_use_case = FindCompaniesWithTransactionsLastMonthUseCase(
            company_repository,
            transaction_repository,
        )

    def create_company(
        self,
        name: str,
        industry: str,
        founded_year: int,
        employee_count: int,
        is_active: bool,
        type: Union[CompanyType, str],
        description: Optional[str] = None,
    ) -> Result[Company, DomainError]:
        """Create a company with a unique name."""
        return self._create_use_case.execute(
            name=name,
            industry=industry,
            founded_year=founded_year,
            employee_count=employee_count,
            is_active=is_active,
            type=type,
            description=description,
        )

    def get_company(self, company_id: str) -> Result[Company, DomainError]:
        """Get a company by ID."""
        return self._get_use_case.execute(company_id)

    def find_companies_created_last_month(self) -> Result[CompanyListResult, DomainError]:
        """Companies created in the last 30 days."""
        return self._created_last_month_use_case.execute()

    def find_companies_with_transactions_last_month(self) -> Result[CompanyListResult, DomainError]:
        """Companies with transactions in the previous calendar month."""
        return self._with_transactions_use_case.execute()
