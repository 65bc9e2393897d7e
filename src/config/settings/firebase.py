"""Settings do Firebase Authentication.

Configurações usadas na verificação de ID tokens dos clientes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class FirebaseSettings:
    """Configurações do Firebase Admin SDK.

    Attributes:
        project_id: Projeto Firebase (fallback: GCP_PROJECT)
        credentials_file: JSON de service account; vazio usa ADC
        check_revoked: Consulta revogação de sessão ao verificar token
    """

    project_id: str = ""
    credentials_file: str = ""
    check_revoked: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Firebase."""
        errors: list[str] = []
        if not self.project_id:
            errors.append("FIREBASE_PROJECT_ID ou GCP_PROJECT deve estar configurado")
        if self.credentials_file and not Path(self.credentials_file).is_file():
            errors.append(f"FIREBASE_CREDENTIALS_FILE não encontrado: {self.credentials_file}")
        return errors


def _load_from_env() -> FirebaseSettings:
    """Carrega FirebaseSettings de variáveis de ambiente."""
    return FirebaseSettings(
        project_id=(
            os.getenv("FIREBASE_PROJECT_ID", "")
            or os.getenv("GCP_PROJECT", "")
            or os.getenv("GOOGLE_CLOUD_PROJECT", "")
        ),
        credentials_file=os.getenv("FIREBASE_CREDENTIALS_FILE", ""),
        check_revoked=os.getenv("FIREBASE_CHECK_REVOKED", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_firebase_settings() -> FirebaseSettings:
    """Retorna instância cacheada de FirebaseSettings."""
    return _load_from_env()
