# api/app/middleware/auth.py
"""
Request-level access logging.
Caller identity is checked in dependencies.py via Depends(); the webhook
signature is checked in the webhook route, which needs the raw body.
"""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        t0 = time.monotonic()
        response = await call_next(request)
        elapsed = (time.monotonic() - t0) * 1000
        level = logging.WARNING if response.status_code in (401, 403) else logging.INFO
        logger.log(
            level,
            "%s %s -> %d (%.0fms) auth=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            "bearer" if request.headers.get("authorization") else "none",
        )
        return response
