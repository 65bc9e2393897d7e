"""Filters de logging para injeção de contexto.

Filters são responsáveis por adicionar campos contextuais
aos logs sem que o chamador precise informá-los manualmente.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: notify_endpoints)
- principal: uid do usuário autenticado, quando conhecido
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e principal em cada record de log.

    Importante: nunca adicionar payloads brutos nos logs.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
        principal_getter: Função que retorna o uid do principal atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        principal_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")
        self._get_principal = principal_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id, service e principal ao record.

        Valores passados explicitamente via `extra` são preservados.

        Returns:
            True sempre (não filtra, apenas enriquece).
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        principal = getattr(record, "principal", None)
        record.principal = principal if principal else self._get_principal()
        record.service = self._service_name
        return True


class MaxLevelFilter(logging.Filter):
    """Deixa passar apenas records abaixo de `max_level` (exclusivo)."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._max_level
