"""
Users API Backend - Request ID Middleware
==========================================

What:  Tags each request with a short correlation ID and echoes it back.
Why:   Lets a client quote the X-Request-ID from a failed call so the matching
       access-log and error-log lines can be found.
How:   Takes the client's X-Request-ID if present, otherwise generates one;
       stores it in a ContextVar and in request.state; sets the response header.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on the same event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID (client-provided or a fresh 8-char uuid prefix)."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
