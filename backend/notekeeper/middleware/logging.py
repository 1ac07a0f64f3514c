"""
NoteKeeper Backend - Request Logging Middleware
=================================================

What:  Operational log of every HTTP request.
How:   On arrival, logs the method, path and parsed body (one line each,
       followed by a `---` separator). After the response, logs a single
       summary line with status and duration.
When:  Runs after JSONBodyMiddleware (so the body is already parsed) and
       immediately before routing.

Contract:
    Observes only. It never changes the request, never builds a response
    of its own and always hands control to the next interceptor.

Example output:
    Method: POST
    Path:   /api/notes
    Body:   {'content': 'test'}
    ---
    POST /api/notes 200 1.2ms [a1b2c3d4]
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path and body of each request, then its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        method = request.method
        path = request.url.path
        body = getattr(request.state, "body", {})
        rid = request_id_var.get("")

        logger.info("Method: %s", method)
        logger.info("Path:   %s", path)
        logger.info("Body:   %s", body)
        logger.info("---")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        # 5xx → ERROR, 4xx → WARNING, everything else → INFO
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s]",
            method,
            path,
            status,
            duration_ms,
            rid,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
