"""
CookHub Backend — Request Logging Middleware
==============================================

What:  One access log line per request on the `cookhub.access` logger.
How:   Measures wall time around the downstream handler and picks the log
       level from the status class (5xx ERROR, 4xx WARNING, else INFO).
       /health is not logged.

Example line:
    2030-01-01T12:00:00 [INFO] cookhub.access: GET /api/recipes 200 4.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from cookhub.middleware.request_id import request_id_var

logger = logging.getLogger("cookhub.access")

SKIP_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        rid = request_id_var.get("")
        logger.log(
            level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
