from .company import Company, CompanyType
from .transaction import Transaction, TransactionStatus, TransactionType

__all__ = [
    "Company",
    "CompanyType",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
]
