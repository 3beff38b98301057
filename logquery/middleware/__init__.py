"""Security middleware for the FastAPI application.

This module provides ASGI middleware for:
- Security headers (X-Request-Id, HSTS, etc.)
"""

from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]
