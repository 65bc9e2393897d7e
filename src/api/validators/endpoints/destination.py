"""Validação de destino (`dest` + `destDetails`) por tipo registrado.

Cada tipo de destino tem um builder que valida os detalhes brutos e
devolve a variante tipada correspondente. Novos tipos entram no
registro sem alterar o validador.
"""

from __future__ import annotations

import ipaddress
import re
from typing import TYPE_CHECKING, Any

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.domain.endpoint import (
    DISCORD_WEBHOOK,
    JSON_WEBHOOK,
    DiscordWebhookDestination,
    JsonDestination,
)
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    DestinationBuilder = Callable[[Mapping[str, Any]], DiscordWebhookDestination | JsonDestination]

DISCORD_WEBHOOK_PREFIX = "https://discord.com/api/webhooks/"
JSON_METHODS = frozenset({"POST", "GET"})
URL_SCHEMES = frozenset({"http", "https"})

_HTTP_URL = TypeAdapter(HttpUrl)
_TLD_PATTERN = re.compile(r"[a-z]{2,}|xn--[a-z0-9-]+")


def is_valid_http_url(value: object) -> bool:
    """Verifica URL absoluta HTTP/HTTPS com host.

    Porta opcional; query e fragment permitidos; até 2083 caracteres.
    O host precisa de TLD alfabético com 2+ letras (ou ser um IP), sem
    underscore; porta 0 é rejeitada. Espaços em qualquer posição
    invalidam a URL, e o esquema deve vir explícito (`scheme://`)
    seguido de authority não vazia.
    """
    if not isinstance(value, str) or not value:
        return False
    if any(char.isspace() for char in value):
        return False
    scheme, separator, rest = value.partition("://")
    if not separator or scheme.lower() not in URL_SCHEMES:
        return False
    if not rest or rest[0] in "/?#":
        return False
    try:
        url = _HTTP_URL.validate_python(value)
    except PydanticValidationError:
        return False
    if url.port == 0:
        return False
    return _is_valid_host(url.host or "")


def _is_valid_host(host: str) -> bool:
    if host.startswith("["):
        return True
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        pass
    else:
        return True
    if "_" in host or "." not in host:
        return False
    return bool(_TLD_PATTERN.fullmatch(host.rsplit(".", 1)[-1]))


def _build_discord_webhook(details: Mapping[str, Any]) -> DiscordWebhookDestination:
    url = details.get("url")
    if not is_valid_http_url(url) or not url.startswith(DISCORD_WEBHOOK_PREFIX):
        raise ValidationError("discord_webhook_url_invalid")
    return DiscordWebhookDestination(url=url)


def _build_json(details: Mapping[str, Any]) -> JsonDestination:
    method = details.get("method")
    if not isinstance(method, str) or method not in JSON_METHODS:
        raise ValidationError("json_method_invalid")
    url = details.get("url")
    if not is_valid_http_url(url):
        raise ValidationError("json_url_invalid")
    return JsonDestination(method=method, url=url)


DEFAULT_BUILDERS: dict[str, DestinationBuilder] = {
    DISCORD_WEBHOOK: _build_discord_webhook,
    JSON_WEBHOOK: _build_json,
}


class DestinationValidator:
    """Valida destino contra os tipos registrados.

    Um builder precisa devolver uma variante de `Destination`
    (app/domain/endpoint.py); um tipo novo exige também a variante
    correspondente na união discriminada para poder ser persistido.

    Args:
        builders: Registro tipo -> builder. Default: discord-webhook e json.
    """

    def __init__(self, builders: Mapping[str, DestinationBuilder] | None = None) -> None:
        self._builders = dict(builders if builders is not None else DEFAULT_BUILDERS)

    @property
    def kinds(self) -> frozenset[str]:
        """Tipos de destino aceitos."""
        return frozenset(self._builders)

    def validate(self, dest: object, details: object) -> DiscordWebhookDestination | JsonDestination:
        """Valida e devolve a variante tipada do destino.

        Raises:
            ValidationError: Tipo desconhecido ou detalhes inválidos.
        """
        builder = self._builders.get(dest) if isinstance(dest, str) else None
        if builder is None:
            raise ValidationError("dest_unknown")
        if not isinstance(details, dict):
            raise ValidationError("dest_details_not_object")
        return builder(details)

    def is_valid(self, dest: object, details: object) -> bool:
        """Versão booleana de validate()."""
        try:
            self.validate(dest, details)
        except ValidationError:
            return False
        return True
