"""Testes HTTP das rotas /api com TestClient."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.validators.endpoints import AllowListChecker, EndpointRequestValidator
from app.app import create_app
from app.infra.stores import MemoryEndpointStore
from app.services import AuthGate, EndpointService
from tests.fakes.fake_token_verifier import FakeTokenVerifier
from utils.errors import StorageError

ALICE = {"Authorization": "Bearer token-alice"}
BOB = {"Authorization": "Bearer token-bob"}
DISCORD_URL = "https://discord.com/api/webhooks/123/abc"


def _body(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "usernames": ["alice"],
        "label": "Alertas",
        "dest": "discord-webhook",
        "destDetails": {"url": DISCORD_URL},
    }
    body.update(overrides)
    return body


def _client(store: Any = None) -> TestClient:
    allow_list = AllowListChecker(["alice", "bob"])
    service = EndpointService(
        auth_gate=AuthGate(
            FakeTokenVerifier({"token-alice": "uid-alice", "token-bob": "uid-bob"}),
            timeout_seconds=1.0,
        ),
        validator=EndpointRequestValidator(allow_list),
        store=store if store is not None else MemoryEndpointStore(),
        allow_list=allow_list,
        storage_timeout_seconds=1.0,
    )
    return TestClient(create_app(service))


@pytest.fixture
def client() -> TestClient:
    return _client()


class TestPublicRoutes:
    """Rotas sem autenticação."""

    def test_acceptable_target_usernames(self, client: TestClient) -> None:
        response = client.get("/api/acceptableTargetUsernames")
        assert response.status_code == 200
        assert response.json() == ["alice", "bob"]

    def test_correlation_id_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/acceptableTargetUsernames", headers={"X-Correlation-ID": "c-1"})
        assert response.headers["X-Correlation-ID"] == "c-1"

    def test_correlation_id_is_generated(self, client: TestClient) -> None:
        response = client.get("/api/acceptableTargetUsernames")
        assert response.headers["X-Correlation-ID"]


class TestDebugWithToken:
    """POST /api/debug-with-token."""

    def test_valid_token_gets_greeting(self, client: TestClient) -> None:
        response = client.post("/api/debug-with-token", headers=ALICE)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Firebase Auth Token" in response.text

    def test_rejected_token_gets_401_invalid_token(self, client: TestClient) -> None:
        response = client.post(
            "/api/debug-with-token", headers={"Authorization": "Bearer forged"}
        )
        assert response.status_code == 401
        assert response.text == "Invalid token"

    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Basic abc"}])
    def test_missing_or_wrong_scheme_gets_401_invalid_type(
        self, client: TestClient, headers: dict[str, str]
    ) -> None:
        response = client.post("/api/debug-with-token", headers=headers)
        assert response.status_code == 401
        assert response.text == "Invalid type"


class TestEndpointsCrud:
    """Ciclo completo de create/list/update/delete."""

    def test_create_list_update_delete(self, client: TestClient) -> None:
        created = client.post("/api/endpoints", json=_body(), headers=ALICE)
        assert created.status_code == 200
        endpoint_id = created.json()["data"]["id"]

        listed = client.get("/api/endpoints", headers=ALICE)
        assert listed.status_code == 200
        [endpoint] = listed.json()
        assert endpoint["id"] == endpoint_id
        assert endpoint["usernames"] == ["alice"]
        assert endpoint["label"] == "Alertas"
        assert endpoint["dest"] == "discord-webhook"
        assert endpoint["destDetails"] == {"url": DISCORD_URL}
        assert endpoint["createdAt"] == endpoint["updatedAt"]

        updated = client.put(
            f"/api/endpoints/{endpoint_id}",
            json=_body(
                label="Novo",
                dest="json",
                destDetails={"method": "GET", "url": "https://hooks.example.com/n"},
            ),
            headers=ALICE,
        )
        assert updated.status_code == 200
        assert updated.json() == {"id": endpoint_id}
        [endpoint] = client.get("/api/endpoints", headers=ALICE).json()
        assert endpoint["label"] == "Novo"
        assert endpoint["destDetails"] == {"method": "GET", "url": "https://hooks.example.com/n"}

        deleted = client.delete(f"/api/endpoints/{endpoint_id}", headers=ALICE)
        assert deleted.status_code == 200
        assert deleted.json() == {"id": endpoint_id}
        assert client.get("/api/endpoints", headers=ALICE).json() == []

    def test_other_owner_gets_404(self, client: TestClient) -> None:
        endpoint_id = client.post("/api/endpoints", json=_body(), headers=ALICE).json()["data"]["id"]

        put = client.put(f"/api/endpoints/{endpoint_id}", json=_body(), headers=BOB)
        delete = client.delete(f"/api/endpoints/{endpoint_id}", headers=BOB)

        assert put.status_code == 404
        assert put.text == "Endpoint does not exist"
        assert delete.status_code == 404
        assert client.get("/api/endpoints", headers=BOB).json() == []


class TestRejections:
    """Erros tipados viram texto puro com o status certo."""

    @pytest.mark.parametrize(
        "body",
        [
            _body(usernames=["mallory"]),
            _body(dest="json", destDetails={"method": "PUT", "url": "https://x.example.com"}),
            _body(destDetails={"url": "https://evil.example/webhooks/123"}),
            _body(label="  "),
        ],
    )
    def test_invalid_body_gets_400(self, client: TestClient, body: dict[str, Any]) -> None:
        response = client.post("/api/endpoints", json=body, headers=ALICE)
        assert response.status_code == 400
        assert response.text == "Bad request body"

    def test_non_json_body_gets_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/endpoints",
            content=b"{not json",
            headers={**ALICE, "Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_missing_token_gets_401_before_body_checks(self) -> None:
        store = AsyncMock()
        client = _client(store)

        response = client.post("/api/endpoints", content=b"garbage")

        assert response.status_code == 401
        assert store.method_calls == []

    def test_put_with_malformed_id_gets_400(self, client: TestClient) -> None:
        response = client.put("/api/endpoints/bad.id", json=_body(), headers=ALICE)
        assert response.status_code == 400

    def test_delete_with_malformed_id_gets_404(self, client: TestClient) -> None:
        response = client.delete("/api/endpoints/bad.id", headers=ALICE)
        assert response.status_code == 404

    def test_storage_failure_gets_500_without_details(self) -> None:
        store = AsyncMock()
        store.list_by_owner.side_effect = StorageError("firestore_list_failed: secret detail")
        client = _client(store)

        response = client.get("/api/endpoints", headers=ALICE)

        assert response.status_code == 500
        assert response.text == "Internal error occurred"
