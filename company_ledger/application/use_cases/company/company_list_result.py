"""Shared result shape of the "last month" company queries."""
from dataclasses import dataclass
from datetime import datetime
from typing import List

from company_ledger.domain.models.company import Company


@dataclass(frozen=True)
class CompanyListResult:
    """Companies matched by a time-window query, with the window used."""
    companies: List[Company]
    start_date: datetime
    end_date: datetime

    @property
    def total_count(self) -> int:
        return len(self.companies)
