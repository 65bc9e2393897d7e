"""Contexto de rastreamento por requisição: correlation_id e principal.

Os valores são propagados via ContextVar e injetados em logs pelo
CorrelationIdFilter. ContextVar é seguro para threads e tasks asyncio.

Uso:
    from app.observability import get_correlation_id, set_correlation_id

    # Em middleware/handler
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        # processar request
    finally:
        reset_correlation_id(token)

    # Após autenticar
    with bind_principal(principal.uid):
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_principal_id: ContextVar[str] = ContextVar("principal_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual.

    Returns:
        correlation_id ou string vazia se não definido.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def get_principal_id() -> str:
    """Retorna o uid do principal autenticado no contexto atual."""
    return _principal_id.get()


@contextmanager
def bind_principal(principal_id: str) -> Iterator[None]:
    """Associa o uid autenticado aos logs emitidos dentro do bloco."""
    token = _principal_id.set(principal_id)
    try:
        yield
    finally:
        _principal_id.reset(token)
