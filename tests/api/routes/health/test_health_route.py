"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check, root


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_root_and_liveness() -> None:
    assert await root() == "Hello from FastAPI"
    health = await health_check()
    assert health.status == "healthy"


@pytest.mark.asyncio
async def test_readiness_with_memory_backend_is_degraded_but_ready() -> None:
    request = _build_request_with_state(SimpleNamespace(store_backend="memory"))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["firestore"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_firestore_client() -> None:
    request = _build_request_with_state(
        SimpleNamespace(store_backend="firestore", firestore_client=None)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["firestore"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_firestore_responds() -> None:
    firestore_client = MagicMock()
    firestore_client.collection.return_value.limit.return_value.stream.return_value = iter([])
    request = _build_request_with_state(
        SimpleNamespace(
            store_backend="firestore",
            firestore_client=firestore_client,
            firestore_collection="endpoints",
        )
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["checks"]["firestore"]["status"] == "ok"
    firestore_client.collection.assert_called_once_with("endpoints")


@pytest.mark.asyncio
async def test_readiness_reports_firestore_failure() -> None:
    firestore_client = MagicMock()
    firestore_client.collection.side_effect = RuntimeError("no credentials")
    request = _build_request_with_state(
        SimpleNamespace(store_backend="firestore", firestore_client=firestore_client)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["firestore"]["error"] == "RuntimeError"
