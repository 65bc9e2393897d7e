"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from config.settings import get_base_settings

router = APIRouter()

ROOT_GREETING = "Hello from FastAPI"
FIRESTORE_CHECK_TIMEOUT_SECONDS = 3.0


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return ROOT_GREETING


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe com verificação real do Firestore.

    Backend em memória não tem dependência externa: check fica degraded,
    mas o serviço é considerado pronto.
    """
    backend = getattr(request.app.state, "store_backend", "memory")
    if backend == "firestore":
        firestore_check = await _check_firestore(
            getattr(request.app.state, "firestore_client", None),
            getattr(request.app.state, "firestore_collection", "endpoints"),
        )
    else:
        firestore_check = DependencyCheck(status="degraded", error="not_configured")

    ready = firestore_check.status in {"ok", "degraded"}
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"firestore": firestore_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_firestore(firestore_client: Any | None, collection: str) -> DependencyCheck:
    if firestore_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(
            asyncio.to_thread(_probe_collection, firestore_client, collection),
            timeout=FIRESTORE_CHECK_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _probe_collection(firestore_client: Any, collection: str) -> None:
    """Lê no máximo um documento da collection (valida credenciais e rede)."""
    list(firestore_client.collection(collection).limit(1).stream())
