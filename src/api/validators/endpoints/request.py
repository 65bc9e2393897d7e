"""Validação de corpo de create/update de endpoints.

Checagens em ordem, parando na primeira falha:
1. usernames: lista não vazia de strings não vazias
2. label: string não vazia após strip
3. dest: string
4. destino válido para o tipo
5. todos os usernames na allow-list

Toda falha vira o mesmo ValidationError para o cliente; o motivo
fica em `exc.reason` para logs.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from api.validators.endpoints.destination import DestinationValidator
from app.domain.endpoint import EndpointPayload
from utils.errors import ValidationError

if TYPE_CHECKING:
    from api.validators.endpoints.allow_list import AllowListChecker

_ENDPOINT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,128}")


def _valid_usernames(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(isinstance(item, str) and item != "" for item in value)
    )


class EndpointRequestValidator:
    """Gate único de validação para payloads de endpoint."""

    def __init__(
        self,
        allow_list: AllowListChecker,
        destinations: DestinationValidator | None = None,
    ) -> None:
        self._allow_list = allow_list
        self._destinations = destinations or DestinationValidator()

    def validate(self, body: object) -> EndpointPayload:
        """Valida o corpo e devolve o payload tipado.

        Raises:
            ValidationError: Na primeira checagem que falhar.
        """
        if not isinstance(body, dict):
            raise ValidationError("body_not_object")

        usernames = body.get("usernames")
        if not _valid_usernames(usernames):
            raise ValidationError("usernames_invalid")

        label = body.get("label")
        if not isinstance(label, str) or not label.strip():
            raise ValidationError("label_invalid")

        dest = body.get("dest")
        if not isinstance(dest, str):
            raise ValidationError("dest_not_string")

        destination = self._destinations.validate(dest, body.get("destDetails"))

        if not self._allow_list.check(usernames):
            raise ValidationError("username_not_allowed")

        return EndpointPayload(usernames=tuple(usernames), label=label, destination=destination)

    @staticmethod
    def is_valid_endpoint_id(endpoint_id: object) -> bool:
        """Identificador bem formado (ids do Firestore e hex UUID)."""
        return isinstance(endpoint_id, str) and bool(_ENDPOINT_ID_PATTERN.fullmatch(endpoint_id))
