"""
Phonebook Backend — Request Logging Middleware
================================================

What:  One access-log line for every HTTP request.
How:   Measures the time around `call_next` and logs method, path, status,
       response size and duration. POST bodies are logged as compact JSON.
When:  Inside RequestIDMiddleware, so the request id is already set.

Log Format:
    POST /api/persons 200 52 - 3.4 ms {"name":"Ada Lovelace","number":"39-44-5323523"} [a1b2c3d4]
    GET /api/persons/99 404 0 - 1.2 ms  [e5f6a7b8]

Contact numbers end up in the log for POST requests. Run with
LOG_LEVEL=WARNING where that is not acceptable.
"""

import json
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from phonebook.middleware.request_id import request_id_var

logger = logging.getLogger("phonebook.access")


async def _body_for_log(request: Request) -> str:
    if request.method != "POST":
        return ""
    raw = await request.body()
    if not raw:
        return ""
    try:
        return json.dumps(json.loads(raw), separators=(",", ":"), ensure_ascii=False)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, size, duration and POST body per request.

    Level by status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
    /health is not logged.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        if path == "/health":
            return await call_next(request)

        # Starlette caches the body, so the route can still read it
        body = await _body_for_log(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        size = response.headers.get("content-length", "-")
        rid = request_id_var.get("")

        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %s - %.1f ms %s [%s]",
            method,
            path,
            status,
            size,
            duration_ms,
            body,
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
