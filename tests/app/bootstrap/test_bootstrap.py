"""Testes do composition root: seleção de store e validação de settings."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import build_endpoint_service
from app.bootstrap.dependencies_stores import (
    create_endpoint_store,
    resolve_endpoint_store_backend,
)
from app.infra.stores import MemoryEndpointStore
from config.settings import (
    EndpointSettings,
    get_base_settings,
    get_endpoint_settings,
    get_firebase_settings,
    get_firestore_settings,
)
from tests.fakes.fake_token_verifier import FakeTokenVerifier


def _clear_settings_cache() -> None:
    for getter in (
        get_base_settings,
        get_endpoint_settings,
        get_firebase_settings,
        get_firestore_settings,
    ):
        getter.cache_clear()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "ENDPOINT_STORE_BACKEND",
        "NOTIF_TARGETS",
        "FIREBASE_PROJECT_ID",
        "FIRESTORE_PROJECT_ID",
        "GCP_PROJECT",
        "GOOGLE_CLOUD_PROJECT",
        "FIREBASE_CREDENTIALS_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    _clear_settings_cache()
    yield
    _clear_settings_cache()


class TestStoreSelection:
    """ENDPOINT_STORE_BACKEND e defaults por ambiente."""

    def test_test_environment_defaults_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "test")
        assert resolve_endpoint_store_backend() == "memory"
        assert isinstance(create_endpoint_store(), MemoryEndpointStore)

    def test_production_defaults_to_firestore(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert resolve_endpoint_store_backend() == "firestore"

    def test_memory_outside_dev_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("ENDPOINT_STORE_BACKEND", "memory")

        with caplog.at_level(logging.WARNING):
            store = create_endpoint_store()

        assert isinstance(store, MemoryEndpointStore)
        assert "memory_endpoint_store_in_non_dev" in caplog.messages

    def test_unknown_backend_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENDPOINT_STORE_BACKEND", "mongo")
        with pytest.raises(ValueError, match="ENDPOINT_STORE_BACKEND"):
            create_endpoint_store()


class TestValidateRuntimeSettings:
    """Falha rápida em staging/production, alerta em dev/test."""

    def test_development_only_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")

        with caplog.at_level(logging.WARNING):
            validate_runtime_settings()

        assert "settings_validation_failed" in caplog.messages

    def test_production_raises_with_all_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(RuntimeError) as exc_info:
            validate_runtime_settings()

        message = str(exc_info.value)
        assert "endpoints: NOTIF_TARGETS" in message
        assert "firebase:" in message
        assert "firestore:" in message

    def test_production_passes_when_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("NOTIF_TARGETS", "alice")
        monkeypatch.setenv("GCP_PROJECT", "proj")

        validate_runtime_settings()


class TestInitializeApp:
    """Logging configurado a partir de BaseSettings."""

    def test_json_format_and_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from pythonjsonlogger.json import JsonFormatter

        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_FORMAT", "json")

        initialize_app()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert all(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

    def test_text_format_in_test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from pythonjsonlogger.json import JsonFormatter

        monkeypatch.setenv("ENVIRONMENT", "test")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        initialize_app()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)


class TestBuildEndpointService:
    """Wiring explícito a partir de settings."""

    def test_allow_list_comes_from_settings(self) -> None:
        service = build_endpoint_service(
            EndpointSettings(acceptable_usernames=("alice", "bob")),
            verifier=FakeTokenVerifier(),
            store=MemoryEndpointStore(),
        )
        assert service.acceptable_target_usernames() == ["alice", "bob"]
