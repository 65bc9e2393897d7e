"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_endpoint_service

    # Na inicialização do serviço
    initialize_app()

    # Obter o serviço de endpoints
    service = get_endpoint_service()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id, get_principal_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_endpoint_settings,
    get_firebase_settings,
    get_firestore_settings,
)

if TYPE_CHECKING:
    from app.services import EndpointService

# Nome do serviço para logs
SERVICE_NAME = "notify_endpoints"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura logging (JSON ou texto, conforme LOG_FORMAT) com
    correlation_id e principal em cada registro.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        principal_getter=get_principal_id,
        json_format=settings.log_format == "json",
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    from app.bootstrap.dependencies_stores import resolve_endpoint_store_backend

    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"endpoints: {error}" for error in get_endpoint_settings().validate())
    errors.extend(f"firebase: {error}" for error in get_firebase_settings().validate())

    if resolve_endpoint_store_backend() == "firestore":
        errors.extend(f"firestore: {error}" for error in get_firestore_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_endpoint_service() -> EndpointService:
    """Obtém o serviço de endpoints (singleton)."""
    from app.bootstrap.dependencies import create_endpoint_service

    return create_endpoint_service()
