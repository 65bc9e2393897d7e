"""Formatters de logging estruturado.

Define formatters para logs com campos obrigatórios:
- correlation_id
- service
- principal
- timestamp (asctime)
- level
- logger (name)
- message

Dois formatos: JSON (produção) e texto legível (desenvolvimento).
"""

from __future__ import annotations

import logging
from datetime import datetime

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
        "principal",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_FORMAT = (
    "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
    " (correlation_id=%(correlation_id)s principal=%(principal)s)"
)


def _iso8601_with_offset(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds")


class Iso8601TextFormatter(logging.Formatter):
    """Formatter de texto com timestamp ISO8601 e offset de fuso."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        return _iso8601_with_offset(record)


class Iso8601JsonFormatter(JsonFormatter):
    """JsonFormatter com timestamp ISO8601 e offset de fuso."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        return _iso8601_with_offset(record)


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-02-02T10:30:00.000+00:00",
            "level": "INFO",
            "logger": "app.services.endpoint_service",
            "message": "endpoint_created",
            "correlation_id": "abc-123",
            "service": "notify_endpoints",
            "principal": "uid-42"
        }
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return Iso8601JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Cria formatter de texto legível para desenvolvimento."""
    return Iso8601TextFormatter()
