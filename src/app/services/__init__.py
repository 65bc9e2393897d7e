"""Serviços de aplicação — autenticação e casos de uso de endpoints."""

from __future__ import annotations

from app.services.auth_gate import AuthGate, parse_bearer_token
from app.services.endpoint_service import EndpointService

__all__ = [
    "AuthGate",
    "EndpointService",
    "parse_bearer_token",
]
