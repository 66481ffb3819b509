"""
Company DTO
===========

Pydantic models for company API requests and responses.
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from company_ledger.application.dto.common_dto import CamelModel
from company_ledger.application.use_cases.company import CompanyListResult
from company_ledger.domain.models.company import Company, CompanyType
from company_ledger.utils.datetime_utils import to_iso


class CompanyCreateRequest(CamelModel):
    """DTO for creating a company. Business rules are checked by the domain."""
    name: str = Field(..., description="Company name, unique ignoring case")
    description: Optional[str] = Field(None, description="Company description")
    industry: str = Field(..., description="Industry sector")
    founded_year: int = Field(..., description="Year the company was founded (1800 - current year)")
    employee_count: int = Field(..., description="Number of employees")
    is_active: bool = Field(..., description="Whether the company is currently active")
    type: CompanyType = Field(..., description="Type of company")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "TechCorp",
                "description": "Innovative technology company",
                "industry": "Technology",
                "foundedYear": 2020,
                "employeeCount": 25,
                "isActive": True,
                "type": "PYME",
            }
        }
    )


class CompanyResponse(CamelModel):
    """DTO for company data."""
    id: str
    name: str
    description: Optional[str] = None
    industry: str
    founded_year: int
    employee_count: int
    is_active: bool
    type: CompanyType
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            name=company.name,
            description=company.description,
            industry=company.industry,
            founded_year=company.founded_year,
            employee_count=company.employee_count,
            is_active=company.is_active,
            type=company.type,
            created_at=to_iso(company.created_at),
            updated_at=to_iso(company.updated_at),
        )


class DateWindow(CamelModel):
    """Time window a query was evaluated against."""
    start_date: str
    end_date: str


class CompanyListResponse(CamelModel):
    """DTO for the "last month" company queries."""
    companies: List[CompanyResponse]
    total_count: int
    last_month: DateWindow

    @classmethod
    def from_result(cls, result: CompanyListResult) -> "CompanyListResponse":
        return cls(
            companies=[CompanyResponse.from_entity(c) for c in result.companies],
            total_count=result.total_count,
            last_month=DateWindow(
                start_date=to_iso(result.start_date),
                end_date=to_iso(result.end_date),
            ),
        )
