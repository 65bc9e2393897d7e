"""Settings base do serviço de endpoints de notificação.

Configurações comuns ao servidor HTTP, logging e ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "test", "staging", "production"]
LogFormat = Literal["json", "text"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|test|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        host: Interface de escuta do servidor HTTP
        port: Porta de escuta do servidor HTTP
        log_level: Nível de log do root logger
        log_format: "text" (legível, dev) ou "json" (estruturado)
        cors_origins: Origens aceitas pelo CORS
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "notify-endpoints"
    debug: bool = False

    # Servidor
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: tuple[str, ...] = ("*",)

    # Logging
    log_level: str = "DEBUG"
    log_format: LogFormat = "text"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")

        if self.log_format not in ("json", "text"):
            errors.append(f"LOG_FORMAT inválido: {self.log_format}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    if env_lower == "test":
        return "test"
    return "development"


def _parse_csv(raw: str) -> tuple[str, ...]:
    """Separa valor por vírgulas, descartando entradas vazias."""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _parse_log_format(raw: str) -> LogFormat:
    """Converte string de formato de log; qualquer valor diferente de text vira json."""
    return "text" if raw.strip().lower() == "text" else "json"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    verbose = environment in ("development", "test")
    return BaseSettings(
        environment=environment,
        service_name=os.getenv("SERVICE_NAME", "notify-endpoints"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        cors_origins=_parse_csv(os.getenv("CORS_ORIGINS", "*")) or ("*",),
        log_level=os.getenv("LOG_LEVEL", "DEBUG" if verbose else "INFO").upper(),
        log_format=_parse_log_format(os.getenv("LOG_FORMAT", "text" if verbose else "json")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
