"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import asyncio
import copy
import uuid
from typing import TYPE_CHECKING, Any

from app.domain.endpoint import Endpoint
from app.protocols.endpoint_store import EndpointStoreProtocol
from utils.errors import NotFoundError

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.endpoint import EndpointPayload


class MemoryEndpointStore(EndpointStoreProtocol):
    """Store de endpoints em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, Any]] = {}  # endpoint_id -> documento
        self._lock = asyncio.Lock()

    def _find_owned(self, endpoint_id: str, owner: str) -> dict[str, Any]:
        document = self._documents.get(endpoint_id)
        if document is None or document["owner"] != owner:
            raise NotFoundError("endpoint_not_found")
        return document

    async def create(self, owner: str, payload: EndpointPayload, now: datetime) -> str:
        """Insere endpoint com id hex UUID."""
        endpoint_id = uuid.uuid4().hex
        async with self._lock:
            self._documents[endpoint_id] = {
                **payload.to_document(),
                "owner": owner,
                "createdAt": now,
                "updatedAt": now,
            }
        return endpoint_id

    async def list_by_owner(self, owner: str) -> list[Endpoint]:
        """Lista endpoints do owner em ordem de inserção."""
        async with self._lock:
            return [
                Endpoint.from_document(endpoint_id, copy.deepcopy(document))
                for endpoint_id, document in self._documents.items()
                if document["owner"] == owner
            ]

    async def update_by_owner(
        self,
        endpoint_id: str,
        owner: str,
        payload: EndpointPayload,
        now: datetime,
    ) -> Endpoint:
        """Substitui campos mutáveis e updatedAt."""
        async with self._lock:
            document = self._find_owned(endpoint_id, owner)
            document.update(payload.to_document())
            document["updatedAt"] = now
            return Endpoint.from_document(endpoint_id, copy.deepcopy(document))

    async def delete_by_owner(self, endpoint_id: str, owner: str) -> Endpoint:
        """Remove endpoint do owner."""
        async with self._lock:
            document = self._find_owned(endpoint_id, owner)
            del self._documents[endpoint_id]
            return Endpoint.from_document(endpoint_id, document)
