"""
API Key Security
================

Every API route requires the configured shared secret, supplied as
`Authorization: Bearer <key>`, an `X-API-Key` header or an `apiKey`
query parameter (checked in that order).
"""
import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from company_ledger.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
API_KEY_HEADER = "X-API-Key"
API_KEY_QUERY_PARAM = "apiKey"


def extract_api_key(request: Request) -> Optional[str]:
    """Return the API key carried by the request, if any."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith(BEARER_PREFIX):
        return auth_header[len(BEARER_PREFIX):]

    header_key = request.headers.get(API_KEY_HEADER)
    if header_key:
        return header_key

    query_key = request.query_params.get(API_KEY_QUERY_PARAM)
    if query_key:
        return query_key

    return None


def require_api_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Reject the request unless it carries the configured API key.

    Raises:
        HTTPException: 401 when the key is missing, unconfigured or wrong
    """
    api_key = extract_api_key(request)
    if not api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="API key is required")

    if not settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="API key not configured")

    if not hmac.compare_digest(api_key.encode(), settings.api_key.encode()):
        logger.warning("Rejected request to %s with invalid API key", request.url.path)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")
