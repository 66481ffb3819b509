from typing import TYPE_CHECKING

from company_ledger.application.services.transaction_service import TransactionService
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TransactionProvider:
    """Transaction service provider - registers transaction-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register transaction service."""
        container.register_factory(
            TransactionService,
            lambda: TransactionService(
                transaction_repository=container.get(TransactionRepository),
                company_repository=container.get(CompanyRepository),
            ),
        )
