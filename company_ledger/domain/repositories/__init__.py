from .company_repository import CompanyRepository
from .transaction_repository import TransactionRepository

__all__ = ["CompanyRepository", "TransactionRepository"]
