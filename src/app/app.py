"""Entrypoint do serviço de endpoints de notificação.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Cloud Run:
    O container deve expor a porta 8080 (padrão do Cloud Run).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import get_endpoint_service, initialize_app, validate_runtime_settings
from app.bootstrap.dependencies_stores import resolve_endpoint_store_backend
from app.observability.http_middleware import CORRELATION_HEADER, CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.services import EndpointService

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _attach_store_state(app: FastAPI) -> None:
    """Expõe backend e cliente Firestore para o readiness check."""
    backend = resolve_endpoint_store_backend()
    app.state.store_backend = backend
    app.state.firestore_client = None
    app.state.firestore_collection = get_firestore_settings().collection_endpoints
    if backend == "firestore":
        from app.bootstrap.clients import create_firestore_client

        app.state.firestore_client = create_firestore_client()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Monta o EndpointService (quando não injetado)

    Shutdown:
    - Apenas registra o encerramento; clientes do SDK não exigem close
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})

    if getattr(app.state, "endpoint_service", None) is None:
        validate_runtime_settings()
        _attach_store_state(app)
        app.state.endpoint_service = get_endpoint_service()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})


def create_app(service: EndpointService | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        service: EndpointService pronto (testes); None monta no startup

    Returns:
        Aplicação FastAPI configurada.
    """
    settings = get_base_settings()
    fastapi_app = FastAPI(
        title="Notify Endpoints",
        description="Registro de endpoints de notificação por usuário",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    fastapi_app.state.endpoint_service = service
    fastapi_app.state.store_backend = "memory" if service is not None else None

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )
    fastapi_app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    settings = get_base_settings()
    logger.info("Starting notify-endpoints", extra={"environment": settings.environment})
    uvicorn.run(
        "app.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
