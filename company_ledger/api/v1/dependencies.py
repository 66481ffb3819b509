"""
Dependency Container
====================

FastAPI dependency functions backed by the DI container.
"""
from company_ledger.application.services.company_service import CompanyService
from company_ledger.application.services.transaction_service import TransactionService
from company_ledger.di.container import get_container


def get_company_service() -> CompanyService:
    """
    Get company service instance.

    Returns:
        CompanyService instance
    """
    return get_container().get(CompanyService)


def get_transaction_service() -> TransactionService:
    """
    Get transaction service instance.

    Returns:
        TransactionService instance
    """
    return get_container().get(TransactionService)
