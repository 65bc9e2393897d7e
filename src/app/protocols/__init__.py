"""Protocolos e contratos do core da aplicação."""

from .endpoint_store import EndpointStoreProtocol
from .token_verifier import TokenVerifierProtocol

__all__ = [
    "EndpointStoreProtocol",
    "TokenVerifierProtocol",
]
