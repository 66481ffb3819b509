"""
Find Companies Created Last Month Use Case
==========================================

Companies created in the rolling 30-day window ending now.
"""
from company_ledger.application.use_cases.company.company_list_result import CompanyListResult
from company_ledger.domain.errors import DomainError
from company_ledger.domain.repositories.company_repository import (
    CREATED_RECENTLY_DAYS,
    CompanyRepository,
)
from company_ledger.domain.result import Ok, Result
from company_ledger.utils.datetime_utils import rolling_window


class FindCompaniesCreatedLastMonthUseCase:
    """
    Use case for listing recently created companies.

    "Last month" here is a rolling 30 days, unlike the calendar month used
    by FindCompaniesWithTransactionsLastMonthUseCase.
    """

    def __init__(self, company_repository: CompanyRepository):
        self._repository = company_repository

    def execute(self) -> Result[CompanyListResult, DomainError]:
        start_date, end_date = rolling_window(CREATED_RECENTLY_DAYS)
        companies = self._repository.find_companies_created_in_last_month()
        return Ok(CompanyListResult(
            companies=companies,
            start_date=start_date,
            end_date=end_date,
        ))
