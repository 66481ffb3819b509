from functools import cache
from typing import TYPE_CHECKING

from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository
from company_ledger.infrastructure.db.mongo_connection import MongoClientManager
from company_ledger.infrastructure.db.mongo_company_repository import MongoCompanyRepository
from company_ledger.infrastructure.db.mongo_transaction_repository import MongoTransactionRepository
from company_ledger.infrastructure.memory.memory_company_repository import InMemoryCompanyRepository
from company_ledger.infrastructure.memory.memory_transaction_repository import (
    InMemoryTransactionRepository,
)
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations.
        Gets storage from the database provider and creates repository instances.
        """
        storage = container.get(DatabaseProvider.STORAGE_KEY)

        # Domain interfaces -> Infrastructure implementations
        if isinstance(storage, MongoClientManager):
            settings = container.settings
            # Mongo repositories touch the collection (index creation) on
            # construction, so they are built on first lookup, after startup.
            container.register_factory(
                CompanyRepository,
                cache(lambda: MongoCompanyRepository(storage, settings.companies_collection)),
            )
            container.register_factory(
                TransactionRepository,
                cache(lambda: MongoTransactionRepository(storage, settings.transactions_collection)),
            )
        else:
            container.register_singleton(CompanyRepository, InMemoryCompanyRepository(storage))
            container.register_singleton(TransactionRepository, InMemoryTransactionRepository(storage))

