"""Request Logging Middleware — one log line per incoming request.

Invariants:
    - Logs method and path for EVERY request before the handler runs
    - Never short-circuits, never alters request or response

Design Decisions:
    - Middleware class registered in main.py, not code inside handlers:
      routes stay testable without the logging side effect
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log "<METHOD> <path>" for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        logger.info(
            "Se realizó una consulta a la ruta: %s %s",
            request.method, request.url.path,
            extra={
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query or None,
            },
        )
        return await call_next(request)
