"""FastAPI dependency injection functions.

This module contains shared dependencies for API endpoints:
- Autocomplete engine lookup
- Admin API key validation
- Query length limits
- Error sanitization
"""

import hmac
import logging
from typing import Annotated

from fastapi import Header, HTTPException
from fastapi import Request as FastAPIRequest

from ..config import settings
from ..engine import SearchSuggestions

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Returns a generic message for unexpected errors while preserving
    useful information for known error types.
    """
    error_str = str(error)

    safe_patterns = [
        "Query too long",
        "Invalid API key",
        "Incomplete query",
    ]

    for pattern in safe_patterns:
        if pattern.lower() in error_str.lower():
            return error_str

    logger.error(f"Request processing error: {error}", exc_info=True)

    return "An error occurred processing your request. Please try again."


# ============ ENGINE ============


def get_engine(request: FastAPIRequest) -> SearchSuggestions:
    """Return the process-wide autocomplete engine created at startup."""
    return request.app.state.suggestions


# ============ VALIDATION DEPENDENCIES ============


async def require_admin_key(
    x_api_key: Annotated[str | None, Header(alias="X-API-Key")] = None,
) -> None:
    """Require X-API-Key to match the configured admin key, when one is set."""
    if not settings.admin_api_key:
        return
    if not x_api_key or not hmac.compare_digest(x_api_key, settings.admin_api_key):
        logger.warning("Rejected domain update with invalid API key")
        raise HTTPException(status_code=401, detail="Invalid API key")


def check_query_length(query: str) -> None:
    """Reject queries longer than settings.max_query_length."""
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=413,
            detail=f"Query too long. Maximum length: {settings.max_query_length} characters",
        )
