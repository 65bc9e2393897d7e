"""Verificação de ID tokens via Firebase Admin SDK."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions

from app.domain.principal import Principal
from app.protocols.token_verifier import TokenVerifierProtocol
from utils.errors import AuthenticationError

if TYPE_CHECKING:
    from firebase_admin import App

logger = logging.getLogger(__name__)


class FirebaseTokenVerifier(TokenVerifierProtocol):
    """Verifica ID tokens do Firebase Authentication.

    `verify_id_token` é bloqueante (busca certificados e, com
    check_revoked, consulta o usuário), por isso roda em thread.

    Args:
        app: App do Firebase Admin (None usa o app default)
        check_revoked: Rejeita tokens de sessões revogadas
    """

    def __init__(self, app: App | None = None, *, check_revoked: bool = True) -> None:
        self._app = app
        self._check_revoked = check_revoked

    async def verify(self, token: str) -> Principal:
        claims = await asyncio.to_thread(self._verify_sync, token)
        return Principal.from_claims(claims)

    def _verify_sync(self, token: str) -> dict[str, Any]:
        try:
            return auth.verify_id_token(token, app=self._app, check_revoked=self._check_revoked)
        except (ValueError, firebase_exceptions.FirebaseError) as exc:
            logger.debug("id_token_rejected", extra={"error_type": type(exc).__name__})
            raise AuthenticationError(f"id_token_rejected: {type(exc).__name__}") from exc
