"""Protocolo para persistência de endpoints de notificação.

Todas as operações de leitura/escrita são escopadas pelo owner: um
registro de outro owner é indistinguível de um registro inexistente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.endpoint import Endpoint, EndpointPayload


class EndpointStoreProtocol(Protocol):
    """Contrato para store de endpoints.

    Falhas de I/O devem ser levantadas como StorageError.
    """

    async def create(self, owner: str, payload: EndpointPayload, now: datetime) -> str:
        """Insere endpoint e retorna o id atribuído."""
        ...

    async def list_by_owner(self, owner: str) -> list[Endpoint]:
        """Lista todos os endpoints do owner."""
        ...

    async def update_by_owner(
        self,
        endpoint_id: str,
        owner: str,
        payload: EndpointPayload,
        now: datetime,
    ) -> Endpoint:
        """Substitui os campos mutáveis. Levanta NotFoundError sem match em (id, owner)."""
        ...

    async def delete_by_owner(self, endpoint_id: str, owner: str) -> Endpoint:
        """Remove endpoint e retorna o removido. Levanta NotFoundError sem match."""
        ...
