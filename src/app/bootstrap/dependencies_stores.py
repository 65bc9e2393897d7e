"""Factories de stores baseadas em configuração de ambiente."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client
from app.infra.stores import FirestoreEndpointStore, MemoryEndpointStore
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from app.protocols.endpoint_store import EndpointStoreProtocol

logger = logging.getLogger(__name__)


def _default_backend_for_env(environment: str) -> str:
    return "firestore" if environment in ("staging", "production") else "memory"


def resolve_endpoint_store_backend() -> str:
    """Backend efetivo: ENDPOINT_STORE_BACKEND ou default do ambiente."""
    environment = get_base_settings().environment
    return os.getenv("ENDPOINT_STORE_BACKEND", _default_backend_for_env(environment)).lower()


def create_endpoint_store() -> EndpointStoreProtocol:
    """Cria store de endpoints baseado na configuração.

    Lê ENDPOINT_STORE_BACKEND da env:
    - "memory": MemoryEndpointStore (dev/test only)
    - "firestore": FirestoreEndpointStore (staging/production)

    Returns:
        Implementação de EndpointStoreProtocol
    """
    environment = get_base_settings().environment
    backend = resolve_endpoint_store_backend()

    if backend == "firestore":
        settings = get_firestore_settings()
        store = FirestoreEndpointStore(
            create_firestore_client(),
            collection_name=settings.collection_endpoints,
        )
        logger.info("endpoint_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        if environment not in ("development", "test"):
            logger.warning(
                "memory_endpoint_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        store = MemoryEndpointStore()
        logger.info("endpoint_store_created", extra={"backend": "memory"})
        return store

    msg = f"ENDPOINT_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)
