"""
In-Memory Company Repository
============================

Concrete implementation of CompanyRepository backed by InMemoryStore.
"""
from typing import Callable, Dict, List, Optional

from company_ledger.domain.models.company import Company, CompanyType
from company_ledger.domain.repositories.company_repository import (
    CREATED_RECENTLY_DAYS,
    CompanyRepository,
)
from company_ledger.infrastructure.memory.in_memory_store import InMemoryStore
from company_ledger.utils.datetime_utils import rolling_window


class InMemoryCompanyRepository(CompanyRepository):
    """
    Map-backed implementation of CompanyRepository.

    The duplicate-name check in CreateCompany is not atomic with save() here;
    two concurrent creations with the same name can both succeed.
    """

    TABLE_NAME = "companies"

    def __init__(self, store: InMemoryStore):
        self._store = store

    @property
    def _companies(self) -> Dict[str, Company]:
        return self._store.table(self.TABLE_NAME)

    def _filter(self, predicate: Callable[[Company], bool]) -> List[Company]:
        return [company for company in self._companies.values() if predicate(company)]

    def find_by_id(self, company_id: str) -> Optional[Company]:
        return self._companies.get(company_id)

    def find_all(self) -> List[Company]:
        return list(self._companies.values())

    def save(self, company: Company) -> Company:
        self._companies[company.id] = company
        return company

    def delete(self, company_id: str) -> bool:
        return self._companies.pop(company_id, None) is not None

    def find_by_name(self, name: str) -> Optional[Company]:
        wanted = name.lower()
        for company in self._companies.values():
            if company.name.lower() == wanted:
                return company
        return None

    def find_by_industry(self, industry: str) -> List[Company]:
        wanted = industry.lower()
        return self._filter(lambda company: company.industry.lower() == wanted)

    def find_active_companies(self) -> List[Company]:
        return self._filter(lambda company: company.is_active)

    def find_startups(self) -> List[Company]:
        return self._filter(lambda company: company.is_startup())

    def find_enterprises(self) -> List[Company]:
        return self._filter(lambda company: company.is_enterprise())

    def find_by_employee_count_range(self, minimum: int, maximum: int) -> List[Company]:
        return self._filter(lambda company: minimum <= company.employee_count <= maximum)

    def find_by_founded_year_range(self, start_year: int, end_year: int) -> List[Company]:
        return self._filter(lambda company: start_year <= company.founded_year <= end_year)

    def find_by_type(self, company_type: CompanyType) -> List[Company]:
        return self._filter(lambda company: company.type == company_type)

    def find_companies_created_in_last_month(self) -> List[Company]:
        start, end = rolling_window(CREATED_RECENTLY_DAYS)
        return self._filter(lambda company: start <= company.created_at <= end)
