from typing import TYPE_CHECKING

from company_ledger.infrastructure.db.mongo_connection import MongoClientManager
from company_ledger.infrastructure.memory.in_memory_store import InMemoryStore

if TYPE_CHECKING:
    from ..container import DIContainer

MEMORY_BACKEND = "memory"
MONGO_BACKEND = "mongo"


class DatabaseProvider:
    """Centralized storage provider - single source of truth for the storage backend"""

    STORAGE_KEY = "storage"

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the storage backend selected by STORAGE_BACKEND.
        Both backends expose open()/close() for the application lifecycle.
        """
        backend = container.settings.storage_backend

        if backend == MEMORY_BACKEND:
            storage = InMemoryStore()
        elif backend == MONGO_BACKEND:
            storage = MongoClientManager(container.settings)
        else:
            raise ValueError(
                f"Unknown STORAGE_BACKEND '{backend}' (expected '{MEMORY_BACKEND}' or '{MONGO_BACKEND}')"
            )

        container.register_singleton(DatabaseProvider.STORAGE_KEY, storage)
