"""
Find Companies With Transactions Last Month Use Case
====================================================

Companies that have at least one transaction dated in the previous
calendar month.
"""
import logging
from typing import List

from company_ledger.application.use_cases.company.company_list_result import CompanyListResult
from company_ledger.domain.errors import DomainError
from company_ledger.domain.models.company import Company
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.domain.result import Ok, Result
from company_ledger.utils.datetime_utils import previous_calendar_month_range

logger = logging.getLogger(__name__)


class FindCompaniesWithTransactionsLastMonthUseCase:
    """Use case for listing companies active in last calendar month's transactions."""

    def __init__(
        self,
        company_repository: CompanyRepository,
        transaction_repository: TransactionRepository,
    ):
        self._company_repository = company_repository
        self._transaction_repository = transaction_repository

    def execute(self) -> Result[CompanyListResult, DomainError]:
        """
        Resolve each distinct company id found in last month's transactions.

        Ids that no longer resolve to a company are skipped.
        """
        start_date, end_date = previous_calendar_month_range()
        company_ids = self._transaction_repository.find_companies_with_transactions_in_last_month()

        companies: List[Company] = []
        for company_id in company_ids:
            company = self._company_repository.find_by_id(company_id)
            if company:
                companies.append(company)
            else:
                logger.debug("Skipping unknown company id %s", company_id)

        return Ok(CompanyListResult(
            companies=companies,
            start_date=start_date,
            end_date=end_date,
        ))
