from .company_list_result import CompanyListResult
from .create_company import CreateCompanyUseCase
from .find_companies_created_last_month import FindCompaniesCreatedLastMonthUseCase
from .find_companies_with_transactions_last_month import (
    FindCompaniesWithTransactionsLastMonthUseCase,
)
from .get_company import GetCompanyUseCase

__all__ = [
    "CompanyListResult",
    "CreateCompanyUseCase",
    "FindCompaniesCreatedLastMonthUseCase",
    "FindCompaniesWithTransactionsLastMonthUseCase",
    "GetCompanyUseCase",
]
