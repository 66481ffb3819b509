"""
Get Company Use Case
====================

Use case for retrieving a single company by id.
"""
from company_ledger.domain.errors import DomainError, NotFoundError, company_not_found
from company_ledger.domain.models.company import Company
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.result import Err, Ok, Result


class GetCompanyUseCase:
    """Use case for getting a company."""

    def __init__(self, company_repository: CompanyRepository):
        self._repository = company_repository

    def execute(self, company_id: str) -> Result[Company, DomainError]:
        """
        Look up a company.

        Returns:
            Ok(company) or Err(NotFoundError) naming the id
        """
        company = self._repository.find_by_id(company_id)
        if not company:
            return Err(NotFoundError(company_not_found(company_id)))
        return Ok(company)
