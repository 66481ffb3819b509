from .company_registration_validator import CompanyRegistrationValidator, ValidationResult

__all__ = ["CompanyRegistrationValidator", "ValidationResult"]
