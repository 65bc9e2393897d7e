"""Middleware HTTP: correlation_id por requisição e log de acesso."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.requests import Request
    from starlette.responses import Response

logger = logging.getLogger("api.access")

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Define correlation_id, devolve no header e registra uma linha de acesso."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = get_correlation_id()
            logger.info(
                "http_request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
                },
            )
            return response
        finally:
            reset_correlation_id(token)
