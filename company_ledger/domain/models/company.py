"""
Company Model
=============

Domain model representing a company in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from company_ledger.domain.errors import BusinessRuleError, ValidationError
from company_ledger.domain.models.base_entity import BaseEntity
from company_ledger.utils.datetime_utils import ensure_aware, now

MAX_NAME_LENGTH = 100
MIN_FOUNDED_YEAR = 1800
STARTUP_MAX_AGE_YEARS = 5
STARTUP_MAX_EMPLOYEES = 50
ENTERPRISE_MIN_EMPLOYEES = 1000

_GUARDED_FIELDS = frozenset({"employee_count", "is_active"})


class CompanyType(str, Enum):
    """Company size classification."""
    PYME = "PYME"
    CORPORATE = "CORPORATE"


@dataclass(eq=False)
class Company(BaseEntity):
    """
    Company domain model.

    Validated on construction: an invalid company can never exist.
    Employee count and active flag change only through the business methods.
    """
    id: str
    name: str
    industry: str
    founded_year: int
    employee_count: int
    is_active: bool
    type: CompanyType
    description: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self._validate()
        self.created_at = ensure_aware(self.created_at)
        self.updated_at = ensure_aware(self.updated_at)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _GUARDED_FIELDS and getattr(self, "_sealed", False):
            raise BusinessRuleError(
                f"Company {name} can only change through its business methods"
            )
        super().__setattr__(name, value)

    def _update(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)
        self._touch()

    def _validate(self) -> None:
        """Apply validation rules in order; the first violation wins."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Company name is required")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Company name cannot exceed {MAX_NAME_LENGTH} characters")

        if (
            not _is_int(self.founded_year)
            or not MIN_FOUNDED_YEAR <= self.founded_year <= now().year
        ):
            raise ValidationError("Invalid founded year")

        if not _is_int(self.employee_count) or self.employee_count < 0:
            raise ValidationError("Employee count cannot be negative")

        if not isinstance(self.industry, str) or not self.industry.strip():
            raise ValidationError("Industry is required")

        if not self.type:
            raise ValidationError("Company type is required")
        try:
            self.type = CompanyType(self.type)
        except ValueError:
            raise ValidationError("Invalid company type") from None

    # Business methods

    def hire_employees(self, count: int) -> None:
        """Add count employees."""
        if not _is_int(count) or count <= 0:
            raise ValidationError("Employee count must be positive")
        self._update("employee_count", self.employee_count + count)

    def layoff_employees(self, count: int) -> None:
        """Remove count employees; cannot go below zero."""
        if not _is_int(count) or count <= 0:
            raise ValidationError("Layoff count must be positive")
        if count > self.employee_count:
            raise BusinessRuleError("Cannot layoff more employees than currently employed")
        self._update("employee_count", self.employee_count - count)

    def deactivate(self) -> None:
        """Deactivate the company. Only allowed once nobody is employed."""
        if self.employee_count > 0:
            raise BusinessRuleError("Cannot deactivate company with active employees")
        self._update("is_active", False)

    def activate(self) -> None:
        """Activate the company."""
        self._update("is_active", True)

    def is_startup(self) -> bool:
        """Young (founded within 5 years) and small (at most 50 employees)."""
        return (
            now().year - self.founded_year <= STARTUP_MAX_AGE_YEARS
            and self.employee_count <= STARTUP_MAX_EMPLOYEES
        )

    def is_enterprise(self) -> bool:
        return self.employee_count > ENTERPRISE_MIN_EMPLOYEES

    def to_dict(self) -> Dict[str, Any]:
        """Serialize all fields; enum values become plain strings."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "industry": self.industry,
            "founded_year": self.founded_year,
            "employee_count": self.employee_count,
            "is_active": self.is_active,
            "type": self.type.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
