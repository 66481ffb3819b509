from .company_service import CompanyService
from .transaction_service import TransactionService

__all__ = ["CompanyService", "TransactionService"]
