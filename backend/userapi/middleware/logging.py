"""
Users API Backend - Request Logging Middleware
===============================================

What:  One access-log line per HTTP request: method, path, status, duration,
       request id and client address. Also the last stop for errors a route
       did not expect.
Why:   uvicorn's own access log is silenced in setup_logging(); this one
       carries the request id. Converting unexpected errors here, inside
       CORSMiddleware, keeps the 500 envelope cross-origin readable; Starlette
       would otherwise answer them from ServerErrorMiddleware, outside CORS.

What we log vs what we DON'T log (privacy):
    Log:       method, path, status, duration, client address, request ID
    Don't log: request bodies (names and emails are personal data)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from userapi.middleware.request_id import request_id_var
from userapi.schemas.user import UNEXPECTED_ERROR_MESSAGE, APIResponse

logger = logging.getLogger("userapi.access")

# Probed every few seconds by orchestrators; logging them buries real traffic.
UNLOGGED_PATHS = frozenset({"/api/v1/health"})

READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def access_log_level(method: str, status: int) -> int:
    """
    5xx → ERROR, 4xx → WARNING, successful writes (POST/DELETE) → INFO,
    successful reads → DEBUG. Store mutations stay visible at the default
    level; list/get polling does not.
    """
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    if method in READ_METHODS:
        return logging.DEBUG
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request after the response is produced."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            logger.error("[%s] Unhandled error in %s %s", rid, method, path, exc_info=True)
            response = JSONResponse(
                status_code=500,
                content=APIResponse.error(UNEXPECTED_ERROR_MESSAGE).to_content(),
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            access_log_level(method, status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
