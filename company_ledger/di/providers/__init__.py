"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .company_provider import CompanyProvider
from .transaction_provider import TransactionProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CompanyProvider",
    "TransactionProvider",
]
