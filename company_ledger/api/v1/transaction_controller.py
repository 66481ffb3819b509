"""
Transaction Controller
======================

FastAPI controller for transaction endpoints.
"""
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from company_ledger.api.v1.dependencies import get_transaction_service
from company_ledger.api.v1.error_handlers import error_response
from company_ledger.application.dto.common_dto import ApiResponse, ErrorResponse
from company_ledger.application.dto.transaction_dto import (
    TransactionCreateRequest,
    TransactionResponse,
)
from company_ledger.application.services.transaction_service import TransactionService
from company_ledger.domain.result import Err

router = APIRouter(tags=["transactions"])


@router.post(
    "",
    response_model=ApiResponse[TransactionResponse],
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
    summary="Record a transaction",
    description="""
    Record a transaction for an existing, active company.

    1. The company must exist (404 otherwise)
    2. The company must be active (400 otherwise)
    3. Amount, description, date and reference are validated by the domain
    """
)
async def create_transaction(
    request: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
) -> Union[ApiResponse[TransactionResponse], JSONResponse]:
    """Record a transaction."""
    result = service.create_transaction(
        company_id=request.company_id,
        amount=request.amount,
        type=request.type,
        description=request.description,
        transaction_date=request.transaction_date,
        status=request.status,
        reference=request.reference,
    )
    if isinstance(result, Err):
        return error_response(result.error)

    return ApiResponse[TransactionResponse](
        data=TransactionResponse.from_entity(result.value),
        message="Transaction created successfully",
    )
