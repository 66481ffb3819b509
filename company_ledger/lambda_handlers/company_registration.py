"""
Company Registration Lambda
===========================

API Gateway proxy handler that registers a company.

The payload is checked by CompanyRegistrationValidator first, which
collects every problem (including the PYME/CORPORATE employee bounds),
and is then handed to CompanyService.create_company.
"""
import json
import logging
import uuid
from typing import Any, Dict, Optional

from company_ledger.application.services.company_service import CompanyService
from company_ledger.application.validators import CompanyRegistrationValidator
from company_ledger.core.logging_config import configure_logging
from company_ledger.di.container import get_container
from company_ledger.domain.result import Err
from company_ledger.utils.datetime_utils import now_iso

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization,X-API-Key",
    "Access-Control-Allow-Methods": "OPTIONS,POST",
}


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(body),
    }


def _error(status_code: int, message: str, request_id: str, validation_errors=None) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
        "requestId": request_id,
        "timestamp": now_iso(),
    }
    if validation_errors:
        body["validationErrors"] = validation_errors
    return _response(status_code, body)


def _request_id(context: Any) -> str:
    return getattr(context, "aws_request_id", None) or str(uuid.uuid4())


def _parse_body(event: Dict[str, Any]) -> Optional[Any]:
    """Return the decoded JSON body; raises ValueError on malformed JSON."""
    body = event.get("body")
    if body is None or body == "":
        return None
    if isinstance(body, (dict, list)):
        return body
    return json.loads(body)


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Register a company from an API Gateway proxy event.

    Args:
        event: API Gateway proxy event; the company is the JSON body
        context: Lambda context (only aws_request_id is used)

    Returns:
        API Gateway proxy response
    """
    configure_logging()
    request_id = _request_id(context)
    logger.info("Company registration request %s", request_id)

    try:
        try:
            payload = _parse_body(event or {})
        except ValueError:
            return _error(400, "Invalid JSON in request body", request_id)

        if payload is None:
            return _error(400, "Request body is required", request_id)
        if not isinstance(payload, dict):
            return _error(400, "Invalid JSON in request body", request_id)

        validation = CompanyRegistrationValidator.validate(payload)
        if not validation.is_valid:
            logger.info("Registration %s rejected: %s", request_id, validation.errors)
            return _error(400, "Validation failed", request_id, validation.errors)

        container = get_container()
        container.open()
        service = container.get(CompanyService)

        result = service.create_company(
            name=payload["name"],
            industry=payload["industry"],
            founded_year=payload["foundedYear"],
            employee_count=payload["employeeCount"],
            is_active=payload.get("isActive", True),
            type=payload["type"],
            description=payload.get("description"),
        )
        if isinstance(result, Err):
            logger.info("Registration %s failed: %s", request_id, result.error)
            return _error(400, str(result.error), request_id)

        company = result.value
        return _response(201, {
            "success": True,
            "companyId": company.id,
            "message": "Company registered successfully",
            "requestId": request_id,
            "timestamp": now_iso(),
        })
    except Exception:
        logger.exception("Company registration %s failed unexpectedly", request_id)
        return _error(500, "Internal server error", request_id)


def cors_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Answer a CORS preflight request."""
    return {
        "statusCode": 200,
        "headers": dict(CORS_HEADERS),
        "body": "",
    }
