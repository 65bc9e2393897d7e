"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    EndpointServiceError,
    InfrastructureError,
    InvalidAuthSchemeError,
    NotFoundError,
    StorageError,
    UpstreamTimeoutError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "EndpointServiceError",
    "InfrastructureError",
    "InvalidAuthSchemeError",
    "NotFoundError",
    "StorageError",
    "UpstreamTimeoutError",
    "ValidationError",
]
