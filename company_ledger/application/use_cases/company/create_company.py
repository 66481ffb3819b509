"""
Create Company Use Case
=======================

Business use case for registering a new company under a unique name.
"""
import logging
import uuid
from typing import Optional, Union

from company_ledger.domain.errors import (
    ConflictError,
    DomainError,
    ValidationError,
    duplicate_company_name,
)
from company_ledger.domain.models.company import Company, CompanyType
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class CreateCompanyUseCase:
    """
    Use case for creating a company.

    Names are unique ignoring case. The lookup and the save are two separate
    repository calls; only a storage backend with a uniqueness constraint
    prevents two concurrent creations with the same name.
    """

    def __init__(self, company_repository: CompanyRepository):
        """
        Initialize use case with repository.

        Args:
            company_repository: Repository for company persistence
        """
        self._repository = company_repository

    def execute(
        self,
        name: str,
        industry: str,
        founded_year: int,
        employee_count: int,
        is_active: bool,
        type: Union[CompanyType, str],
        description: Optional[str] = None,
    ) -> Result[Company, DomainError]:
        """
        Execute the create company use case.

        Args:
            name: Company name, unique ignoring case
            industry: Industry sector
            founded_year: Year the company was founded
            employee_count: Current number of employees
            is_active: Whether the company starts active
            type: PYME or CORPORATE
            description: Optional free-text description

        Returns:
            Ok(saved company), Err(ConflictError) for a duplicate name,
            Err(ValidationError) for invalid company data
        """
        if isinstance(name, str) and self._repository.find_by_name(name):
            logger.info("Rejected company creation: name '%s' already taken", name)
            return Err(ConflictError(duplicate_company_name(name)))

        try:
            company = Company(
                id=str(uuid.uuid4()),
                name=name,
                description=description,
                industry=industry,
                founded_year=founded_year,
                employee_count=employee_count,
                is_active=is_active,
                type=type,
            )
        except ValidationError as e:
            return Err(e)

        try:
            saved = self._repository.save(company)
        except ConflictError as e:
            return Err(e)

        logger.info("Company %s created (%s)", saved.id, saved.name)
        return Ok(saved)
