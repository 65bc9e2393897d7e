"""Factories de serviços — wiring dos componentes de endpoints.

Settings são lidas uma única vez aqui e passadas explicitamente aos
componentes; nenhuma regra de negócio consulta o ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.validators.endpoints import AllowListChecker, EndpointRequestValidator
from app.bootstrap.clients import create_firebase_app
from app.bootstrap.dependencies_stores import create_endpoint_store
from app.infra.auth import FirebaseTokenVerifier
from app.services import AuthGate, EndpointService
from config.settings import get_endpoint_settings, get_firebase_settings

if TYPE_CHECKING:
    from app.protocols.endpoint_store import EndpointStoreProtocol
    from app.protocols.token_verifier import TokenVerifierProtocol
    from config.settings import EndpointSettings

logger = logging.getLogger(__name__)


def create_token_verifier() -> TokenVerifierProtocol:
    """Cria verificador de ID tokens do Firebase."""
    settings = get_firebase_settings()
    verifier = FirebaseTokenVerifier(create_firebase_app(), check_revoked=settings.check_revoked)
    logger.info("token_verifier_created", extra={"check_revoked": settings.check_revoked})
    return verifier


def build_endpoint_service(
    settings: EndpointSettings,
    *,
    verifier: TokenVerifierProtocol,
    store: EndpointStoreProtocol,
) -> EndpointService:
    """Monta EndpointService a partir de settings e colaboradores explícitos."""
    allow_list = AllowListChecker(settings.acceptable_usernames)
    return EndpointService(
        auth_gate=AuthGate(verifier, timeout_seconds=settings.auth_timeout_seconds),
        validator=EndpointRequestValidator(allow_list),
        store=store,
        allow_list=allow_list,
        storage_timeout_seconds=settings.storage_timeout_seconds,
    )


def create_endpoint_service() -> EndpointService:
    """Cria EndpointService com as implementações configuradas por env."""
    service = build_endpoint_service(
        get_endpoint_settings(),
        verifier=create_token_verifier(),
        store=create_endpoint_store(),
    )
    logger.info("endpoint_service_created")
    return service
