"""Tradução de erros tipados para respostas HTTP em texto puro."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from utils.errors import EndpointServiceError

logger = logging.getLogger(__name__)


async def handle_endpoint_service_error(
    request: Request,
    exc: EndpointServiceError,
) -> PlainTextResponse:
    """Responde com status e mensagem pública; o motivo interno só vai ao log."""
    logger.debug(
        "request_failed",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
            "reason": exc.reason,
        },
    )
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de EndpointServiceError (e subclasses) no app."""
    app.add_exception_handler(EndpointServiceError, handle_endpoint_service_error)
