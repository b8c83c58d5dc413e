"""Request/response logging middleware with timing and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from credit_ledger.core.config import settings
from credit_ledger.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _endpoint_label(request: Request) -> str:
    """Use the route template so path parameters don't explode label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        query = str(request.query_params) if request.query_params else None

        log = logger.bind(method=method, path=path)

        log.info("request_started", query=query)

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )

            if settings.metrics_enabled:
                record_http_request(
                    method, _endpoint_label(request), response.status_code, duration
                )

            return response

        except Exception as e:
            duration = time.perf_counter() - start_time

            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            raise
