"""Exceções de domínio do serviço de endpoints de notificação.

Cada erro carrega o status HTTP e a mensagem pública devolvida ao
cliente. Detalhes internos ficam apenas nos logs.
"""

from __future__ import annotations


class EndpointServiceError(Exception):
    """Base para falhas terminais de uma requisição.

    Args:
        reason: Motivo interno (vai para logs, nunca para o cliente).
    """

    status_code: int = 500
    public_message: str = "Internal error occurred"

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason or self.public_message)
        self.reason = reason


class ValidationError(EndpointServiceError):
    """Corpo da requisição malformado ou não permitido."""

    status_code = 400
    public_message = "Bad request body"


class AuthenticationError(EndpointServiceError):
    """Token ausente ou rejeitado pelo verificador."""

    status_code = 401
    public_message = "Invalid token"


class InvalidAuthSchemeError(AuthenticationError):
    """Header Authorization ausente ou com esquema diferente de Bearer."""

    public_message = "Invalid type"


class NotFoundError(EndpointServiceError):
    """Nenhum endpoint do principal corresponde ao identificador."""

    status_code = 404
    public_message = "Endpoint does not exist"


class InfrastructureError(EndpointServiceError):
    """Base para falhas de infraestrutura transitórias."""


class StorageError(InfrastructureError):
    """Falha de I/O ao acessar o armazenamento persistente."""


class UpstreamTimeoutError(InfrastructureError):
    """Dependência externa não respondeu dentro do prazo."""

    status_code = 504
    public_message = "Upstream timeout"
