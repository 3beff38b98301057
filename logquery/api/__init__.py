"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import (
    check_query_length,
    get_engine,
    require_admin_key,
    sanitize_error_message,
)

__all__ = [
    "check_query_length",
    "get_engine",
    "require_admin_key",
    "sanitize_error_message",
]
