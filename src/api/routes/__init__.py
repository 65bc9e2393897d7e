"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (API de endpoints, health)
- Leitura inicial de request (headers, corpo JSON)
- Delegação para o EndpointService
- Tradução de erros tipados em respostas HTTP

Estrutura:
- routes/endpoints/: CRUD de endpoints de notificação
- routes/health/: health checks e readiness
- errors.py: exception handlers

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
