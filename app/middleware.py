# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# - RequestLoggingMiddleware: one line per request in the compact "dev" format
#       GET /api/products 200 3.412 ms - 57
# - OriginPolicyMiddleware: rejects requests coming from any browser origin
#   other than the configured frontend
# =============================================================================

import logging
import time
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

request_logger = logging.getLogger("app.requests")
logger = logging.getLogger(__name__)


def format_dev_line(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    content_length: str | None,
) -> str:
    """Format a request the way the "dev" access log does."""
    return f"{method} {path} {status_code} {duration_ms:.3f} ms - {content_length or '-'}"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with status, duration and response size."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            request_logger.error(
                f"{request.method} {request.url.path} failed after {duration_ms:.3f} ms - {exc}"
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        request_logger.info(
            format_dev_line(
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                response.headers.get("content-length"),
            )
        )
        return response


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """
    Reject cross-origin requests from anything but the allowed origin.

    CORSMiddleware only withholds the CORS headers for unknown origins;
    this middleware turns them into an explicit 403. Requests without an
    Origin header (same-origin navigation, curl, server-to-server) pass
    unless require_origin is set.
    """

    def __init__(self, app, allowed_origin: str, require_origin: bool = False):
        super().__init__(app)
        self.allowed_origin = allowed_origin
        self.require_origin = require_origin

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")

        if origin is None:
            allowed = not self.require_origin
        else:
            allowed = origin.rstrip("/") == self.allowed_origin

        if not allowed:
            logger.warning(f"Blocked request from origin {origin}: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=403,
                content={
                    "detail": "Not allowed by CORS",
                    "code": "CORS_ORIGIN_DENIED",
                    "suggestion": "Call the API from the configured FRONTEND_URL",
                },
            )

        return await call_next(request)
