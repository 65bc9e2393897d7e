"""Endpoint de notificação — destino de alertas persistido por usuário.

O destino é uma união discriminada por `dest`: cada variante carrega
apenas os campos exigidos pelo seu tipo. No armazenamento e na API o
formato é achatado em `dest` + `destDetails`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

DISCORD_WEBHOOK = "discord-webhook"
JSON_WEBHOOK = "json"


class DiscordWebhookDestination(BaseModel):
    """Webhook do Discord (`https://discord.com/api/webhooks/...`)."""

    model_config = ConfigDict(frozen=True)

    dest: Literal["discord-webhook"] = DISCORD_WEBHOOK
    url: str

    def details(self) -> dict[str, Any]:
        return {"url": self.url}


class JsonDestination(BaseModel):
    """Webhook JSON genérico chamado via POST ou GET."""

    model_config = ConfigDict(frozen=True)

    dest: Literal["json"] = JSON_WEBHOOK
    method: Literal["POST", "GET"]
    url: str

    def details(self) -> dict[str, Any]:
        return {"method": self.method, "url": self.url}


Destination = Annotated[
    DiscordWebhookDestination | JsonDestination,
    Field(discriminator="dest"),
]

_DESTINATION_ADAPTER: TypeAdapter[DiscordWebhookDestination | JsonDestination] = TypeAdapter(
    Destination
)


def destination_from_document(
    dest: str,
    details: dict[str, Any],
) -> DiscordWebhookDestination | JsonDestination:
    """Reconstrói a variante de destino a partir do formato persistido."""
    return _DESTINATION_ADAPTER.validate_python({**details, "dest": dest})


class EndpointPayload(BaseModel):
    """Campos mutáveis de um endpoint, já validados (create/update)."""

    model_config = ConfigDict(frozen=True)

    usernames: tuple[str, ...]
    label: str
    destination: Destination

    def to_document(self) -> dict[str, Any]:
        """Converte para o formato persistido (camelCase, destino achatado)."""
        return {
            "usernames": list(self.usernames),
            "label": self.label,
            "dest": self.destination.dest,
            "destDetails": self.destination.details(),
        }


class Endpoint(BaseModel):
    """Endpoint persistido, visível apenas ao seu owner."""

    id: str
    owner: str
    usernames: list[str]
    label: str
    destination: Destination
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, endpoint_id: str, data: dict[str, Any]) -> Endpoint:
        """Cria Endpoint a partir de um documento armazenado."""
        return cls(
            id=endpoint_id,
            owner=data["owner"],
            usernames=list(data["usernames"]),
            label=data["label"],
            destination=destination_from_document(
                data["dest"], dict(data.get("destDetails") or {})
            ),
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
        )

    def to_response(self) -> dict[str, Any]:
        """Formato público do endpoint (sem campos internos de armazenamento)."""
        return {
            "id": self.id,
            "owner": self.owner,
            "usernames": list(self.usernames),
            "label": self.label,
            "dest": self.destination.dest,
            "destDetails": self.destination.details(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
