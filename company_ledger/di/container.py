# Standard library imports
from typing import Optional

# Local application imports
from company_ledger.core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    CompanyProvider,
    TransactionProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Storage (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on storage
    3. Services (CompanyProvider, TransactionProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: storage → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        CompanyProvider.register(self)
        TransactionProvider.register(self)

    def open(self) -> None:
        """Open the storage backend (application startup)."""
        self.get(DatabaseProvider.STORAGE_KEY).open()

    def close(self) -> None:
        """Close the storage backend (application shutdown)."""
        self.get(DatabaseProvider.STORAGE_KEY).close()


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Forget the global container; the next get_container() builds a fresh one."""
    global _container
    _container = None
