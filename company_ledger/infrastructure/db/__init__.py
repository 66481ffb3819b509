from .mongo_connection import MongoClientManager
from .mongo_company_repository import MongoCompanyRepository
from .mongo_transaction_repository import MongoTransactionRepository

__all__ = ["MongoClientManager", "MongoCompanyRepository", "MongoTransactionRepository"]
