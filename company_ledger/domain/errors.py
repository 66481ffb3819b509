"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Malformed entity data (field-level validation failure)."""


class BusinessRuleError(DomainError):
    """Valid data that violates a business rule or state transition."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class NotFoundError(DomainError):
    """Referenced domain entity does not exist."""


def company_not_found(company_id: str) -> str:
    """Return message for missing company."""
    return f'Company with id "{company_id}" not found'


def duplicate_company_name(name: str) -> str:
    """Return message for duplicate company name."""
    return f'Company with name "{name}" already exists'


def inactive_company(name: str) -> str:
    """Return message when a transaction targets an inactive company."""
    return f'Cannot create transaction for inactive company "{name}"'
