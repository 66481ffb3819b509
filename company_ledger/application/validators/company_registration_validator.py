"""
Company Registration Validator
==============================

Request-level validation for the company registration handler.

Unlike the Company entity, which stops at the first violation, this
validator collects every problem so the caller can show them all at once.
It is also the only place that enforces the employee-count bounds of the
PYME and CORPORATE classifications; CreateCompanyUseCase does not.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from company_ledger.domain.models.company import (
    MAX_NAME_LENGTH,
    MIN_FOUNDED_YEAR,
    CompanyType,
)
from company_ledger.utils.datetime_utils import now

PYME_MAX_EMPLOYEES = 250
CORPORATE_MIN_EMPLOYEES = 1000


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CompanyRegistrationValidator:
    """Collects all validation errors of a registration payload (camelCase keys)."""

    @staticmethod
    def validate(data: Mapping[str, Any]) -> ValidationResult:
        result = ValidationResult()
        errors = result.errors

        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("Company name is required")
        elif len(name) > MAX_NAME_LENGTH:
            errors.append(f"Company name must be less than {MAX_NAME_LENGTH} characters")

        industry = data.get("industry")
        if not isinstance(industry, str) or not industry.strip():
            errors.append("Industry is required")

        current_year = now().year
        founded_year = data.get("foundedYear")
        if not _is_int(founded_year) or not MIN_FOUNDED_YEAR <= founded_year <= current_year:
            errors.append(f"Founded year must be between {MIN_FOUNDED_YEAR} and {current_year}")

        employee_count = data.get("employeeCount")
        if not _is_int(employee_count):
            errors.append("Employee count must be a whole number")
        elif employee_count < 0:
            errors.append("Employee count cannot be negative")

        company_type = data.get("type")
        allowed_types = [t.value for t in CompanyType]
        if company_type not in allowed_types:
            allowed = ", ".join(allowed_types)
            errors.append(f"Invalid company type. Must be one of: {allowed}")

        # Classification bounds
        if _is_int(employee_count):
            if company_type == CompanyType.PYME.value and employee_count > PYME_MAX_EMPLOYEES:
                errors.append(
                    f"PYME companies cannot have more than {PYME_MAX_EMPLOYEES} employees"
                )
            if company_type == CompanyType.CORPORATE.value and employee_count < CORPORATE_MIN_EMPLOYEES:
                errors.append(
                    f"Corporate companies must have at least {CORPORATE_MIN_EMPLOYEES} employees"
                )

        return result
