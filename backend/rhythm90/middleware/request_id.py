"""
Rhythm90 Backend — Request ID Middleware
=========================================

What:  Assigns each incoming request a short correlation ID and echoes it in
       the X-Request-ID response header.
Why:   Every log line and structured error body for one request carries the
       same ID, so a support report can be matched to server logs.
How:   Reuses a client-supplied X-Request-ID when present; otherwise makes
       one. Stores it in a ContextVar for loggers and exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars is plenty for correlating one deployment's logs
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
