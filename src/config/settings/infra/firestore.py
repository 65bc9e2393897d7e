"""Settings do Firestore.

Configurações para Google Cloud Firestore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DATABASE = "(default)"


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        database: Nome do database Firestore
        collection_endpoints: Collection para endpoints de notificação
    """

    project_id: str = ""
    database: str = DEFAULT_DATABASE
    collection_endpoints: str = "endpoints"

    def validate(self) -> list[str]:
        """Valida configurações do Firestore.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.project_id:
            errors.append(
                "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
            )

        if not self.collection_endpoints:
            errors.append("FIRESTORE_COLLECTION_ENDPOINTS não pode ser vazio")

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=(
            os.getenv("FIRESTORE_PROJECT_ID", "")
            or os.getenv("GCP_PROJECT", "")
            or os.getenv("GOOGLE_CLOUD_PROJECT", "")
        ),
        database=os.getenv("FIRESTORE_DATABASE", DEFAULT_DATABASE),
        collection_endpoints=os.getenv("FIRESTORE_COLLECTION_ENDPOINTS", "endpoints"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
