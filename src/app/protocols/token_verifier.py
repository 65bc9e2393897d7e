"""Protocolo para verificação de ID tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.principal import Principal


class TokenVerifierProtocol(Protocol):
    """Contrato para verificador de tokens de identidade."""

    async def verify(self, token: str) -> Principal:
        """Decodifica o token. Levanta AuthenticationError se inválido."""
        ...
