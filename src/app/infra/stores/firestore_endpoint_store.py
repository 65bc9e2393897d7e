"""Firestore Endpoint Store — endpoints de notificação por owner.

Um documento por endpoint, id gerado pelo Firestore. Update e delete
rodam numa transação (leitura, comparação de owner, escrita), então o
match em (id, owner) é atômico.

O SDK Python do Firestore é síncrono; toda chamada passa por
asyncio.to_thread para não bloquear o event loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.api_core import exceptions as gcp_exceptions
from pydantic import ValidationError as PydanticValidationError

from app.domain.endpoint import Endpoint
from app.protocols.endpoint_store import EndpointStoreProtocol
from utils.errors import NotFoundError, StorageError

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.firestore import DocumentReference, Transaction

    from app.domain.endpoint import EndpointPayload

logger = logging.getLogger(__name__)

# Collection padrão de endpoints
ENDPOINTS_COLLECTION = "endpoints"


class FirestoreEndpointStore(EndpointStoreProtocol):
    """Store de endpoints usando Firestore.

    Args:
        firestore_client: Cliente Firestore
        collection_name: Nome da collection (default: endpoints)
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = ENDPOINTS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name

    async def create(self, owner: str, payload: EndpointPayload, now: datetime) -> str:
        return await asyncio.to_thread(
            self._guarded, "create", self._create_sync, owner, payload, now
        )

    async def list_by_owner(self, owner: str) -> list[Endpoint]:
        return await asyncio.to_thread(self._guarded, "list", self._list_sync, owner)

    async def update_by_owner(
        self,
        endpoint_id: str,
        owner: str,
        payload: EndpointPayload,
        now: datetime,
    ) -> Endpoint:
        return await asyncio.to_thread(
            self._guarded, "update", self._update_sync, endpoint_id, owner, payload, now
        )

    async def delete_by_owner(self, endpoint_id: str, owner: str) -> Endpoint:
        return await asyncio.to_thread(
            self._guarded, "delete", self._delete_sync, endpoint_id, owner
        )

    # ──────────────────────────────────────────────────────────────────────
    # Implementação síncrona
    # ──────────────────────────────────────────────────────────────────────

    def _guarded(self, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        """Traduz falhas do SDK para StorageError (NotFoundError passa direto)."""
        try:
            return func(*args)
        except NotFoundError:
            raise
        except gcp_exceptions.NotFound as exc:
            raise NotFoundError("endpoint_not_found") from exc
        except (gcp_exceptions.GoogleAPIError, PydanticValidationError, KeyError) as exc:
            msg = f"firestore_{operation}_failed: {type(exc).__name__}: {exc}"
            raise StorageError(msg) from exc

    def _create_sync(self, owner: str, payload: EndpointPayload, now: datetime) -> str:
        doc_ref = self._db.collection(self._collection).document()
        doc_ref.set(
            {
                **payload.to_document(),
                "owner": owner,
                "createdAt": now,
                "updatedAt": now,
            }
        )
        logger.debug("firestore_endpoint_created", extra={"endpoint_id": doc_ref.id})
        return doc_ref.id

    def _list_sync(self, owner: str) -> list[Endpoint]:
        from google.cloud.firestore import FieldFilter

        query = self._db.collection(self._collection).where(
            filter=FieldFilter("owner", "==", owner)
        )
        return [
            Endpoint.from_document(snapshot.id, snapshot.to_dict() or {})
            for snapshot in query.stream()
        ]

    def _update_sync(
        self,
        endpoint_id: str,
        owner: str,
        payload: EndpointPayload,
        now: datetime,
    ) -> Endpoint:
        def _update(transaction: Transaction, doc_ref: DocumentReference) -> Endpoint:
            current = self._read_owned(transaction, doc_ref, owner)
            changes = {**payload.to_document(), "updatedAt": now}
            transaction.update(doc_ref, changes)
            return Endpoint.from_document(endpoint_id, {**current, **changes})

        return self._run_transaction(_update, self._document(endpoint_id))

    def _delete_sync(self, endpoint_id: str, owner: str) -> Endpoint:
        def _delete(transaction: Transaction, doc_ref: DocumentReference) -> Endpoint:
            current = self._read_owned(transaction, doc_ref, owner)
            transaction.delete(doc_ref)
            return Endpoint.from_document(endpoint_id, current)

        return self._run_transaction(_delete, self._document(endpoint_id))

    def _document(self, endpoint_id: str) -> DocumentReference:
        return self._db.collection(self._collection).document(endpoint_id)

    @staticmethod
    def _read_owned(
        transaction: Transaction,
        doc_ref: DocumentReference,
        owner: str,
    ) -> dict[str, Any]:
        snapshot = doc_ref.get(transaction=transaction)
        data = snapshot.to_dict() if snapshot.exists else None
        if not data or data.get("owner") != owner:
            raise NotFoundError("endpoint_not_found")
        return data

    def _run_transaction(
        self,
        func: Callable[[Transaction, DocumentReference], Endpoint],
        doc_ref: DocumentReference,
    ) -> Endpoint:
        """Executa func numa transação com retry automático do SDK."""
        from google.cloud import firestore

        return firestore.transactional(func)(self._db.transaction(), doc_ref)
