"""Configuração centralizada de logging.

Funções para configurar logging com:
- Campos obrigatórios (correlation_id, service, principal, level, logger, message)
- Formato JSON (produção) ou texto (desenvolvimento)
- stdout para records abaixo de ERROR, stderr para ERROR e acima

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço (app/bootstrap/)
    configure_logging(level="INFO", service_name="notify_endpoints")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("endpoint_created", extra={"endpoint_id": "abc"})
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, MaxLevelFilter
from config.logging.formatters import create_json_formatter, create_text_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "notify_endpoints"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    principal_getter: Callable[[], str] | None = None,
    *,
    json_format: bool = True,
) -> None:
    """Configura logging do serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        principal_getter: Função opcional que retorna o uid autenticado
            do contexto atual.
        json_format: True para JSON estruturado, False para texto legível.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    formatter = create_json_formatter() if json_format else create_text_formatter()
    context_filter = CorrelationIdFilter(service_name, correlation_id_getter, principal_getter)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level_upper)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(MaxLevelFilter(logging.ERROR))
    stdout_handler.addFilter(context_filter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(max(logging.ERROR, logging.getLevelName(level_upper)))
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(context_filter)

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [stdout_handler, stderr_handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service, correlation_id e principal.
    """
    return logging.getLogger(name)
