"""Tests for CompanyRegistrationValidator."""

import pytest

from company_ledger.application.validators import CompanyRegistrationValidator
from company_ledger.utils.datetime_utils import now


def payload(**overrides):
    data = {
        "name": "Acme",
        "industry": "Retail",
        "foundedYear": 2012,
        "employeeCount": 40,
        "type": "PYME",
    }
    data.update(overrides)
    return data


class TestCompanyRegistrationValidator:
    """Tests for collected registration errors."""

    def test_valid_payload(self):
        result = CompanyRegistrationValidator.validate(payload())
        assert result.is_valid
        assert result.errors == []

    def test_collects_every_error(self):
        result = CompanyRegistrationValidator.validate({})
        year = now().year

        assert not result.is_valid
        assert result.errors == [
            "Company name is required",
            "Industry is required",
            f"Founded year must be between 1800 and {year}",
            "Employee count must be a whole number",
            "Invalid company type. Must be one of: PYME, CORPORATE",
        ]

    def test_name_too_long(self):
        result = CompanyRegistrationValidator.validate(payload(name="n" * 101))
        assert result.errors == ["Company name must be less than 100 characters"]

    @pytest.mark.parametrize("year", [1799, now().year + 1])
    def test_founded_year_range(self, year):
        result = CompanyRegistrationValidator.validate(payload(foundedYear=year))
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Founded year must be between 1800")

    def test_pyme_employee_limit(self):
        assert CompanyRegistrationValidator.validate(payload(employeeCount=250)).is_valid
        result = CompanyRegistrationValidator.validate(payload(employeeCount=251))
        assert result.errors == ["PYME companies cannot have more than 250 employees"]

    def test_corporate_employee_minimum(self):
        ok = payload(type="CORPORATE", employeeCount=1000)
        assert CompanyRegistrationValidator.validate(ok).is_valid
        result = CompanyRegistrationValidator.validate(payload(type="CORPORATE", employeeCount=999))
        assert result.errors == ["Corporate companies must have at least 1000 employees"]

    def test_unhashable_type_value(self):
        result = CompanyRegistrationValidator.validate(payload(type=["PYME"]))
        assert result.errors == ["Invalid company type. Must be one of: PYME, CORPORATE"]

    @pytest.mark.parametrize("count", [10.5, "12", True])
    def test_employee_count_must_be_whole_number(self, count):
        result = CompanyRegistrationValidator.validate(payload(employeeCount=count))
        assert result.errors == ["Employee count must be a whole number"]

    def test_negative_employee_count(self):
        result = CompanyRegistrationValidator.validate(payload(employeeCount=-1))
        assert result.errors == ["Employee count cannot be negative"]
