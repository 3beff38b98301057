"""Request tracing and security headers middleware.

Pure ASGI middleware that tags every request with an id, logs the
outcome under that id, and adds security headers to the response.
"""

import logging
import re
import time
from uuid import uuid4

from ..config import settings

logger = logging.getLogger(__name__)

# Incoming request ids are echoed only if they look like an opaque token
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,128}")


def _incoming_request_id(scope) -> str | None:
    for name, value in scope.get("headers", []):
        if name == b"x-request-id":
            request_id = value.decode("latin-1")
            if _REQUEST_ID_PATTERN.fullmatch(request_id):
                return request_id
            return None
    return None


class SecurityHeadersMiddleware:
    """
    Trace requests and add security headers to all responses.

    The X-Request-Id sent by the host UI is reused so suggestion calls can
    be correlated with client-side logs; otherwise a new one is generated.

    Headers added:
        - X-Request-Id: Request identifier for tracing
        - X-Content-Type-Options: nosniff
        - X-Frame-Options: DENY
        - Strict-Transport-Security: (production environment only)
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = _incoming_request_id(scope) or str(uuid4())
        started = time.perf_counter()

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                headers.append((b"x-content-type-options", b"nosniff"))
                headers.append((b"x-frame-options", b"DENY"))

                if settings.environment == "production" and not settings.debug:
                    headers.append(
                        (b"strict-transport-security", b"max-age=31536000; includeSubDomains")
                    )

                latency_ms = int((time.perf_counter() - started) * 1000)
                logger.debug(
                    f"[{request_id}] {scope.get('method')} {scope.get('path')} "
                    f"-> {message['status']} ({latency_ms}ms)"
                )

                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, send_with_headers)
