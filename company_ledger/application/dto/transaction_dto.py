"""
Transaction DTO
===============

Pydantic models for transaction API requests and responses.
"""
from typing import Optional

from pydantic import ConfigDict, Field

from company_ledger.application.dto.common_dto import CamelModel
from company_ledger.domain.models.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from company_ledger.utils.datetime_utils import to_iso


class TransactionCreateRequest(CamelModel):
    """DTO for creating a transaction."""
    company_id: str = Field(..., description="Company ID that this transaction belongs to")
    amount: float = Field(..., description="Transaction amount (0 < amount <= 1,000,000,000)")
    type: TransactionType = Field(..., description="Type of transaction")
    description: str = Field(..., description="Transaction description (max 500 characters)")
    transaction_date: str = Field(..., description="ISO 8601 date when the transaction occurred")
    status: TransactionStatus = Field(
        TransactionStatus.PENDING,
        description="Current status of the transaction",
    )
    reference: Optional[str] = Field(None, description="Optional reference (max 100 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "companyId": "97e4a5f0-7c83-4007-b23a-bc783ef89c93",
                "amount": 1500.5,
                "type": "INCOME",
                "description": "Monthly subscription payment",
                "transactionDate": "2025-08-23T10:00:00.000Z",
                "status": "COMPLETED",
                "reference": "REF-2025-001",
            }
        }
    )


class TransactionResponse(CamelModel):
    """DTO for transaction data."""
    id: str
    company_id: str
    amount: float
    type: TransactionType
    description: str
    transaction_date: str
    status: TransactionStatus
    reference: Optional[str] = None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            company_id=transaction.company_id,
            amount=transaction.amount,
            type=transaction.type,
            description=transaction.description,
            transaction_date=to_iso(transaction.transaction_date),
            status=transaction.status,
            reference=transaction.reference,
            created_at=to_iso(transaction.created_at),
            updated_at=to_iso(transaction.updated_at),
        )
