"""Settings do registro de endpoints de notificação.

Allow-list de usernames alvo e limites de tempo das dependências externas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_AUTH_TIMEOUT_SECONDS = 5.0
DEFAULT_STORAGE_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class EndpointSettings:
    """Configurações do domínio de endpoints.

    Attributes:
        acceptable_usernames: Usernames permitidos como alvo (NOTIF_TARGETS)
        auth_timeout_seconds: Prazo da verificação de token
        storage_timeout_seconds: Prazo de cada operação no armazenamento
    """

    acceptable_usernames: tuple[str, ...] = ()
    auth_timeout_seconds: float = DEFAULT_AUTH_TIMEOUT_SECONDS
    storage_timeout_seconds: float = DEFAULT_STORAGE_TIMEOUT_SECONDS

    def validate(self) -> list[str]:
        """Valida configurações do domínio de endpoints."""
        errors: list[str] = []
        if not self.acceptable_usernames:
            errors.append("NOTIF_TARGETS vazio: nenhum endpoint poderá ser registrado")
        if self.auth_timeout_seconds <= 0:
            errors.append("AUTH_VERIFY_TIMEOUT_SECONDS deve ser positivo")
        if self.storage_timeout_seconds <= 0:
            errors.append("STORAGE_TIMEOUT_SECONDS deve ser positivo")
        return errors


def parse_acceptable_usernames(raw: str) -> tuple[str, ...]:
    """Converte lista separada por vírgulas em tupla ordenada, sem vazios."""
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def _load_from_env() -> EndpointSettings:
    """Carrega EndpointSettings de variáveis de ambiente."""
    return EndpointSettings(
        acceptable_usernames=parse_acceptable_usernames(os.getenv("NOTIF_TARGETS", "")),
        auth_timeout_seconds=float(
            os.getenv("AUTH_VERIFY_TIMEOUT_SECONDS", str(DEFAULT_AUTH_TIMEOUT_SECONDS))
        ),
        storage_timeout_seconds=float(
            os.getenv("STORAGE_TIMEOUT_SECONDS", str(DEFAULT_STORAGE_TIMEOUT_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_endpoint_settings() -> EndpointSettings:
    """Retorna instância cacheada de EndpointSettings."""
    return _load_from_env()
