"""Endpoints HTTP do registro de endpoints de notificação.

Endpoints:
- GET /api/acceptableTargetUsernames: usernames permitidos como alvo
- POST /api/debug-with-token: verifica o Bearer token
- POST /api/endpoints: registra endpoint
- GET /api/endpoints: lista endpoints do principal
- PUT /api/endpoints/{endpoint_id}: substitui endpoint do principal
- DELETE /api/endpoints/{endpoint_id}: remove endpoint do principal

As rotas só adaptam HTTP ao EndpointService; erros tipados viram
respostas nos exception handlers registrados no app.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import PlainTextResponse

from app.services import EndpointService

logger = logging.getLogger(__name__)

router = APIRouter()

AuthorizationHeader = Annotated[str | None, Header()]


def get_service(request: Request) -> EndpointService:
    """Serviço montado no startup (app.state.endpoint_service)."""
    return request.app.state.endpoint_service


ServiceDep = Annotated[EndpointService, Depends(get_service)]


async def _read_json_body(request: Request) -> Any:
    """Corpo JSON da requisição; None quando vazio ou inválido.

    None é rejeitado pelo validador como corpo que não é objeto.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("request_body_not_json", extra={"path": request.url.path})
        return None


@router.get("/acceptableTargetUsernames")
async def acceptable_target_usernames(service: ServiceDep) -> list[str]:
    """Allow-list de usernames alvo (sem autenticação)."""
    return service.acceptable_target_usernames()


@router.post("/debug-with-token", response_class=PlainTextResponse)
async def debug_with_token(
    service: ServiceDep,
    authorization: AuthorizationHeader = None,
) -> str:
    """Confirma que o Bearer token é aceito."""
    return await service.debug_with_token(authorization)


@router.post("/endpoints")
async def create_endpoint(
    request: Request,
    service: ServiceDep,
    authorization: AuthorizationHeader = None,
) -> dict[str, dict[str, str]]:
    """Registra endpoint de notificação para o principal."""
    body = await _read_json_body(request)
    endpoint_id = await service.create_endpoint(authorization, body)
    return {"data": {"id": endpoint_id}}


@router.get("/endpoints")
async def list_endpoints(
    service: ServiceDep,
    authorization: AuthorizationHeader = None,
) -> list[dict[str, Any]]:
    """Lista endpoints do principal."""
    endpoints = await service.list_endpoints(authorization)
    return [endpoint.to_response() for endpoint in endpoints]


@router.put("/endpoints/{endpoint_id}")
async def update_endpoint(
    endpoint_id: str,
    request: Request,
    service: ServiceDep,
    authorization: AuthorizationHeader = None,
) -> dict[str, str]:
    """Substitui usernames, label e destino de um endpoint do principal."""
    body = await _read_json_body(request)
    return {"id": await service.update_endpoint(authorization, endpoint_id, body)}


@router.delete("/endpoints/{endpoint_id}")
async def delete_endpoint(
    endpoint_id: str,
    service: ServiceDep,
    authorization: AuthorizationHeader = None,
) -> dict[str, str]:
    """Remove definitivamente um endpoint do principal."""
    return {"id": await service.delete_endpoint(authorization, endpoint_id)}
