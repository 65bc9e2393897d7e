"""Observabilidade — contexto de logs e middleware HTTP.

Re-exporta funções de correlation_id e principal para uso em toda a aplicação.

Uso:
    from app.observability import get_correlation_id, bind_principal
"""

from app.observability.correlation import (
    bind_principal,
    generate_correlation_id,
    get_correlation_id,
    get_principal_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "bind_principal",
    "generate_correlation_id",
    "get_correlation_id",
    "get_principal_id",
    "reset_correlation_id",
    "set_correlation_id",
]
