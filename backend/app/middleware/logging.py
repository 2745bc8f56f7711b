"""
Postboard Backend — Request Logging Middleware
================================================

What:  One access-log line per HTTP request.
How:   Measures the time spent downstream and logs method, path, status,
       duration, request id and caller (user name when the auth dependency
       resolved one, client IP otherwise).

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("postboard.access")

# Polled by load balancers; logging them drowns everything else
_QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        # Stays 500 when the downstream app raises instead of responding
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
        finally:
            self._log(request, status, (time.perf_counter() - start_time) * 1000)

        return response

    def _log(self, request: Request, status: int, duration_ms: float) -> None:
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        user = getattr(request.state, "user", None)
        caller = user.name if user is not None else client_ip
        rid = request_id_var.get("")

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] by %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            caller,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
