"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_endpoint_store: Store de endpoints usando Firestore
    - memory_stores: Stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_endpoint_store import FirestoreEndpointStore
from app.infra.stores.memory_stores import MemoryEndpointStore

__all__ = [
    # Firestore
    "FirestoreEndpointStore",
    # Memory (dev/test)
    "MemoryEndpointStore",
]
