"""
Company Controller
==================

FastAPI controller for company endpoints.
"""
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from company_ledger.api.v1.dependencies import get_company_service
from company_ledger.api.v1.error_handlers import error_response
from company_ledger.application.dto.common_dto import ApiResponse, ErrorResponse
from company_ledger.application.dto.company_dto import (
    CompanyCreateRequest,
    CompanyListResponse,
    CompanyResponse,
)
from company_ledger.application.services.company_service import CompanyService
from company_ledger.domain.result import Err

router = APIRouter(tags=["companies"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=ApiResponse[CompanyResponse],
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    summary="Create a company",
    description="""
    Create a new company.

    Company names are unique ignoring case; a duplicate name is rejected
    with 400.
    """
)
async def create_company(
    request: CompanyCreateRequest,
    service: CompanyService = Depends(get_company_service),
) -> Union[ApiResponse[CompanyResponse], JSONResponse]:
    """Create a company."""
    result = service.create_company(
        name=request.name,
        description=request.description,
        industry=request.industry,
        founded_year=request.founded_year,
        employee_count=request.employee_count,
        is_active=request.is_active,
        type=request.type,
    )
    if isinstance(result, Err):
        return error_response(result.error)

    return ApiResponse[CompanyResponse](
        data=CompanyResponse.from_entity(result.value),
        message="Company created successfully",
    )


@router.get(
    "/with-transactions/last-month",
    response_model=ApiResponse[CompanyListResponse],
    responses=_ERROR_RESPONSES,
    summary="Companies with transactions in the previous calendar month",
)
async def get_companies_with_transactions_last_month(
    service: CompanyService = Depends(get_company_service),
) -> Union[ApiResponse[CompanyListResponse], JSONResponse]:
    """List companies that have at least one transaction dated in the previous calendar month."""
    result = service.find_companies_with_transactions_last_month()
    if isinstance(result, Err):
        return error_response(result.error)

    return ApiResponse[CompanyListResponse](
        data=CompanyListResponse.from_result(result.value),
        message="Companies with transactions in last month retrieved successfully",
    )


@router.get(
    "/created/last-month",
    response_model=ApiResponse[CompanyListResponse],
    responses=_ERROR_RESPONSES,
    summary="Companies created in the last 30 days",
)
async def get_companies_created_last_month(
    service: CompanyService = Depends(get_company_service),
) -> Union[ApiResponse[CompanyListResponse], JSONResponse]:
    result = service.find_companies_created_last_month()
    if isinstance(result, Err):
        return error_response(result.error)

    return ApiResponse[CompanyListResponse](
        data=CompanyListResponse.from_result(result.value),
        message="Companies created in last month retrieved successfully",
    )


@router.get(
    "/{company_id}",
    response_model=ApiResponse[CompanyResponse],
    responses={**_ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Get a company by id",
)
async def get_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
) -> Union[ApiResponse[CompanyResponse], JSONResponse]:
    """Get a company by id."""
    result = service.get_company(company_id)
    if isinstance(result, Err):
        return error_response(result.error)

    return ApiResponse[CompanyResponse](
        data=CompanyResponse.from_entity(result.value),
        message="Company retrieved successfully",
    )
