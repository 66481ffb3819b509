from .in_memory_store import InMemoryStore
from .memory_company_repository import InMemoryCompanyRepository
from .memory_transaction_repository import InMemoryTransactionRepository

__all__ = ["InMemoryStore", "InMemoryCompanyRepository", "InMemoryTransactionRepository"]
