"""Validadores de requisições de endpoints de notificação.

Uso:
    from api.validators.endpoints import AllowListChecker, EndpointRequestValidator

    validator = EndpointRequestValidator(AllowListChecker(["alice", "bob"]))
    payload = validator.validate(body)
"""

from api.validators.endpoints.allow_list import AllowListChecker
from api.validators.endpoints.destination import (
    DISCORD_WEBHOOK_PREFIX,
    JSON_METHODS,
    DestinationValidator,
    is_valid_http_url,
)
from api.validators.endpoints.request import EndpointRequestValidator

__all__ = [
    "DISCORD_WEBHOOK_PREFIX",
    "JSON_METHODS",
    "AllowListChecker",
    "DestinationValidator",
    "EndpointRequestValidator",
    "is_valid_http_url",
]
