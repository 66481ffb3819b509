"""
Company Repository Interface
============================

Abstract interface for company data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from company_ledger.domain.models.company import Company, CompanyType

CREATED_RECENTLY_DAYS = 30


class CompanyRepository(ABC):
    """
    Abstract repository for company persistence operations.

    This interface defines the contract for company data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def find_by_id(self, company_id: str) -> Optional[Company]:
        """
        Find a company by its ID.

        Args:
            company_id: Unique company identifier

        Returns:
            Company entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Company]:
        """Return every stored company."""
        pass

    @abstractmethod
    def save(self, company: Company) -> Company:
        """
        Insert or replace a company by id.

        Args:
            company: Company entity to store

        Returns:
            Stored company entity

        Raises:
            ConflictError: If the storage layer rejects a duplicate name
        """
        pass

    @abstractmethod
    def delete(self, company_id: str) -> bool:
        """
        Delete a company.

        Returns:
            True if company was found and deleted, False otherwise
        """
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Company]:
        """Find a company by exact name, ignoring case."""
        pass

    @abstractmethod
    def find_by_industry(self, industry: str) -> List[Company]:
        """Find companies by industry, ignoring case."""
        pass

    @abstractmethod
    def find_active_companies(self) -> List[Company]:
        pass

    @abstractmethod
    def find_startups(self) -> List[Company]:
        pass

    @abstractmethod
    def find_enterprises(self) -> List[Company]:
        pass

    @abstractmethod
    def find_by_employee_count_range(self, minimum: int, maximum: int) -> List[Company]:
        """Find companies whose employee count lies in [minimum, maximum]."""
        pass

    @abstractmethod
    def find_by_founded_year_range(self, start_year: int, end_year: int) -> List[Company]:
        """Find companies founded in [start_year, end_year]."""
        pass

    @abstractmethod
    def find_by_type(self, company_type: CompanyType) -> List[Company]:
        pass

    @abstractmethod
    def find_companies_created_in_last_month(self) -> List[Company]:
        """
        Find companies created in the rolling window of the last 30 days.

        Returns:
            Companies whose created_at lies in [now - 30 days, now]
        """
        pass
