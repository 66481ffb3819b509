from .common_dto import ApiResponse, ErrorResponse
from .company_dto import CompanyCreateRequest, CompanyListResponse, CompanyResponse
from .transaction_dto import TransactionCreateRequest, TransactionResponse

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "CompanyCreateRequest",
    "CompanyListResponse",
    "CompanyResponse",
    "TransactionCreateRequest",
    "TransactionResponse",
]
