"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="notify_endpoints")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("endpoint_listed", extra={"count": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- principal
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, MaxLevelFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "MaxLevelFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
]
