"""Agregador de settings do serviço de endpoints de notificação.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    LogFormat,
    get_base_settings,
)

# Domínio
from config.settings.endpoints import (
    EndpointSettings,
    get_endpoint_settings,
)

# Autenticação
from config.settings.firebase import (
    FirebaseSettings,
    get_firebase_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Domínio
    "EndpointSettings",
    "Environment",
    # Auth
    "FirebaseSettings",
    # Infrastructure
    "FirestoreSettings",
    "LogFormat",
    "get_base_settings",
    "get_endpoint_settings",
    "get_firebase_settings",
    "get_firestore_settings",
]
