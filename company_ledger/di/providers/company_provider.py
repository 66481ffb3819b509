from typing import TYPE_CHECKING

from company_ledger.application.services.company_service import CompanyService
from company_ledger.domain.repositories.company_repository import CompanyRepository
from company_ledger.domain.repositories.transaction_repository import TransactionRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CompanyProvider:
    """Company service provider - registers company-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register company service.
        Service is created with repositories from container on first use.
        """
        container.register_factory(
            CompanyService,
            lambda: CompanyService(
                company_repository=container.get(CompanyRepository),
                transaction_repository=container.get(TransactionRepository),
            ),
        )
