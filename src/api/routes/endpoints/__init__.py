"""Rotas HTTP do registro de endpoints de notificação."""

from __future__ import annotations

from api.routes.endpoints.router import router

__all__ = ["router"]
