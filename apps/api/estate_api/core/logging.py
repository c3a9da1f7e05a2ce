"""Logging setup and request timing middleware."""
from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

request_logger = logging.getLogger("estate_api.requests")


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration for API calls. Bodies are never logged."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path
        if path.startswith("/api"):
            duration_ms = int((time.perf_counter() - start) * 1000)
            request_logger.info("%s %s %s in %dms", request.method, path, response.status_code, duration_ms)
        return response
