"""EndpointService — orquestra autenticação, validação e persistência.

Pipeline de cada operação:
1. AuthGate (falha → AuthenticationError, sem tocar no store)
2. Validação do corpo em create/update (falha → ValidationError)
3. Chamada ao store com o uid como owner, com prazo máximo
4. NotFoundError/StorageError propagam tipados para a borda HTTP

Falhas de armazenamento são registradas aqui com operação, id e owner;
a mensagem pública nunca carrega o detalhe.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TypeVar

from app.observability import bind_principal
from utils.errors import (
    NotFoundError,
    StorageError,
    UpstreamTimeoutError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from api.validators.endpoints import AllowListChecker, EndpointRequestValidator
    from app.domain.endpoint import Endpoint, EndpointPayload
    from app.domain.principal import Principal
    from app.protocols.endpoint_store import EndpointStoreProtocol
    from app.services.auth_gate import AuthGate

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEBUG_GREETING = "Hello from FastAPI with Firebase Auth Token!"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class EndpointService:
    """Casos de uso CRUD de endpoints de notificação.

    Args:
        auth_gate: Autenticação do header Authorization
        validator: Validação de payloads create/update
        store: Persistência escopada por owner
        allow_list: Usernames alvo permitidos (exposto publicamente)
        storage_timeout_seconds: Prazo de cada chamada ao store
        clock: Fonte de tempo (UTC)
    """

    def __init__(
        self,
        auth_gate: AuthGate,
        validator: EndpointRequestValidator,
        store: EndpointStoreProtocol,
        allow_list: AllowListChecker,
        *,
        storage_timeout_seconds: float,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._auth_gate = auth_gate
        self._validator = validator
        self._store = store
        self._allow_list = allow_list
        self._storage_timeout_seconds = storage_timeout_seconds
        self._clock = clock

    def acceptable_target_usernames(self) -> list[str]:
        """Usernames que podem ser alvo de notificação."""
        return list(self._allow_list.usernames)

    async def authenticate(self, authorization: str | None) -> Principal:
        """Autentica sem acessar o store."""
        principal = await self._auth_gate.authenticate(authorization)
        with bind_principal(principal.uid):
            logger.debug("token_verified", extra={"owner": principal.uid})
        return principal

    async def debug_with_token(self, authorization: str | None) -> str:
        """Confirma que o Bearer token é aceito; devolve uma saudação."""
        await self.authenticate(authorization)
        return DEBUG_GREETING

    async def create_endpoint(self, authorization: str | None, body: object) -> str:
        """Registra endpoint para o principal. Retorna o id criado."""
        principal = await self._auth_gate.authenticate(authorization)
        with bind_principal(principal.uid):
            payload = self._validate(body, operation="create", owner=principal.uid)
            now = self._clock()
            endpoint_id = await self._call_store(
                "create",
                principal.uid,
                None,
                lambda: self._store.create(principal.uid, payload, now),
            )
            logger.info(
                "endpoint_created",
                extra={
                    "endpoint_id": endpoint_id,
                    "owner": principal.uid,
                    "dest": payload.destination.dest,
                },
            )
            return endpoint_id

    async def list_endpoints(self, authorization: str | None) -> list[Endpoint]:
        """Lista endpoints do principal."""
        principal = await self._auth_gate.authenticate(authorization)
        with bind_principal(principal.uid):
            endpoints = await self._call_store(
                "list",
                principal.uid,
                None,
                lambda: self._store.list_by_owner(principal.uid),
            )
            logger.info(
                "endpoints_listed", extra={"owner": principal.uid, "count": len(endpoints)}
            )
            return endpoints

    async def update_endpoint(
        self,
        authorization: str | None,
        endpoint_id: str,
        body: object,
    ) -> str:
        """Substitui usernames, label e destino de um endpoint do principal."""
        principal = await self._auth_gate.authenticate(authorization)
        with bind_principal(principal.uid):
            if not self._validator.is_valid_endpoint_id(endpoint_id):
                logger.debug(
                    "endpoint_id_rejected", extra={"operation": "update", "owner": principal.uid}
                )
                raise ValidationError("endpoint_id_invalid")
            payload = self._validate(body, operation="update", owner=principal.uid)
            now = self._clock()
            await self._call_store(
                "update",
                principal.uid,
                endpoint_id,
                lambda: self._store.update_by_owner(endpoint_id, principal.uid, payload, now),
            )
            logger.info(
                "endpoint_updated", extra={"endpoint_id": endpoint_id, "owner": principal.uid}
            )
            return endpoint_id

    async def delete_endpoint(self, authorization: str | None, endpoint_id: str) -> str:
        """Remove definitivamente um endpoint do principal."""
        principal = await self._auth_gate.authenticate(authorization)
        with bind_principal(principal.uid):
            if not self._validator.is_valid_endpoint_id(endpoint_id):
                raise NotFoundError("endpoint_id_invalid")
            await self._call_store(
                "delete",
                principal.uid,
                endpoint_id,
                lambda: self._store.delete_by_owner(endpoint_id, principal.uid),
            )
            logger.info(
                "endpoint_deleted", extra={"endpoint_id": endpoint_id, "owner": principal.uid}
            )
            return endpoint_id

    def _validate(self, body: object, *, operation: str, owner: str) -> EndpointPayload:
        try:
            return self._validator.validate(body)
        except ValidationError as exc:
            logger.debug(
                "endpoint_request_rejected",
                extra={"operation": operation, "owner": owner, "reason": exc.reason},
            )
            raise

    async def _call_store(
        self,
        operation: str,
        owner: str,
        endpoint_id: str | None,
        call: Callable[[], Awaitable[T]],
    ) -> T:
        """Executa chamada ao store com prazo e log de falhas."""
        log_context = {"operation": operation, "owner": owner, "endpoint_id": endpoint_id}
        try:
            return await asyncio.wait_for(call(), timeout=self._storage_timeout_seconds)
        except NotFoundError:
            logger.info("endpoint_not_found", extra=log_context)
            raise
        except TimeoutError as exc:
            logger.error(
                "endpoint_storage_timeout",
                extra={**log_context, "timeout_seconds": self._storage_timeout_seconds},
            )
            raise UpstreamTimeoutError(f"storage_{operation}_timeout") from exc
        except StorageError as exc:
            cause = exc.__cause__
            code = getattr(cause, "code", None)
            logger.error(
                "endpoint_storage_failed",
                extra={
                    **log_context,
                    "error_type": type(cause).__name__ if cause else type(exc).__name__,
                    "error_code": str(code) if code is not None else None,
                    "error": str(exc),
                },
            )
            raise
