"""AuthGate — extrai o bearer token e resolve o principal."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from utils.errors import AuthenticationError, InvalidAuthSchemeError, UpstreamTimeoutError

if TYPE_CHECKING:
    from app.domain.principal import Principal
    from app.protocols.token_verifier import TokenVerifierProtocol

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


def parse_bearer_token(authorization: str | None) -> str:
    """Separa `Bearer <token>` e devolve o token.

    Raises:
        InvalidAuthSchemeError: Header ausente ou esquema diferente de Bearer.
        AuthenticationError: Token vazio.
    """
    if not authorization:
        raise InvalidAuthSchemeError("missing_authorization")
    scheme, _, token = authorization.strip().partition(" ")
    if scheme != BEARER_SCHEME:
        raise InvalidAuthSchemeError("invalid_scheme")
    token = token.strip()
    if not token:
        raise AuthenticationError("missing_token")
    return token


class AuthGate:
    """Autentica requisições delegando a verificação do token.

    Args:
        verifier: Verificador de ID tokens
        timeout_seconds: Prazo máximo da verificação
    """

    def __init__(self, verifier: TokenVerifierProtocol, timeout_seconds: float) -> None:
        self._verifier = verifier
        self._timeout_seconds = timeout_seconds

    async def authenticate(self, authorization: str | None) -> Principal:
        """Valida o header Authorization e retorna o principal.

        Raises:
            AuthenticationError: Credencial ausente ou rejeitada.
            UpstreamTimeoutError: Verificador não respondeu no prazo.
        """
        try:
            token = parse_bearer_token(authorization)
            return await asyncio.wait_for(
                self._verifier.verify(token), timeout=self._timeout_seconds
            )
        except AuthenticationError as exc:
            logger.info("authentication_failed", extra={"reason": exc.reason})
            raise
        except TimeoutError as exc:
            logger.error(
                "token_verification_timeout", extra={"timeout_seconds": self._timeout_seconds}
            )
            raise UpstreamTimeoutError("token_verification_timeout") from exc
