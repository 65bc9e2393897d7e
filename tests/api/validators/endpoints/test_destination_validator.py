"""Testes do DestinationValidator e da checagem de URL."""

from __future__ import annotations

from typing import get_args

import pytest

from api.validators.endpoints import DestinationValidator
from api.validators.endpoints.destination import is_valid_http_url
from app.domain.endpoint import Destination, DiscordWebhookDestination, JsonDestination
from utils.errors import ValidationError

DISCORD_URL = "https://discord.com/api/webhooks/123/abc"


class TestIsValidHttpUrl:
    """Testes da validação de URL absoluta HTTP/HTTPS."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com:8080/path?q=1#frag",
            "https://sub.example.co.uk/a/b",
            "http://192.168.0.10/hook",
            "https://example.com:65535/x",
            "https://shop.xn--p1ai/x",
            DISCORD_URL,
        ],
    )
    def test_accepts_absolute_urls(self, url: str) -> None:
        assert is_valid_http_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "example.com",
            "ftp://example.com/file",
            "https://exa mple.com",
            " https://example.com",
            "https://localhost/hook",
            "https://",
            "https://" + "a" * 2100 + ".com",
            "http://a.b/x",
            "https://my_host.example.com/x",
            "https:///example.com/x",
            "http://example.com:0/x",
            "https://a.1/x",
            None,
            42,
        ],
    )
    def test_rejects_invalid_urls(self, url: object) -> None:
        assert is_valid_http_url(url) is False


class TestDiscordWebhook:
    """Destino discord-webhook."""

    def test_accepts_discord_webhook_url(self) -> None:
        destination = DestinationValidator().validate("discord-webhook", {"url": DISCORD_URL})
        assert destination == DiscordWebhookDestination(url=DISCORD_URL)

    def test_rejects_non_discord_host(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DestinationValidator().validate(
                "discord-webhook", {"url": "https://evil.example/webhooks/123"}
            )
        assert exc_info.value.reason == "discord_webhook_url_invalid"

    def test_rejects_http_discord_url(self) -> None:
        validator = DestinationValidator()
        assert validator.is_valid(
            "discord-webhook", {"url": "http://discord.com/api/webhooks/1/a"}
        ) is False

    def test_extra_details_are_dropped(self) -> None:
        destination = DestinationValidator().validate(
            "discord-webhook", {"url": DISCORD_URL, "extra": "ignored"}
        )
        assert destination.details() == {"url": DISCORD_URL}


class TestJsonDestination:
    """Destino json."""

    @pytest.mark.parametrize("method", ["POST", "GET"])
    def test_accepts_post_and_get(self, method: str) -> None:
        destination = DestinationValidator().validate(
            "json", {"method": method, "url": "https://hooks.example.com/x"}
        )
        assert destination == JsonDestination(method=method, url="https://hooks.example.com/x")

    @pytest.mark.parametrize("method", ["PUT", "post", "DELETE", "", None, ["POST"]])
    def test_rejects_other_methods(self, method: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DestinationValidator().validate(
                "json", {"method": method, "url": "https://hooks.example.com/x"}
            )
        assert exc_info.value.reason == "json_method_invalid"

    def test_rejects_invalid_url(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DestinationValidator().validate("json", {"method": "POST", "url": "not a url"})
        assert exc_info.value.reason == "json_url_invalid"


class TestDestinationValidatorRegistry:
    """Registro de tipos de destino."""

    def test_default_kinds(self) -> None:
        assert DestinationValidator().kinds == frozenset({"discord-webhook", "json"})

    def test_default_kinds_match_persistable_variants(self) -> None:
        """Todo tipo registrado por padrão tem variante na união Destination."""
        variants = get_args(get_args(Destination)[0])
        tags = {variant.model_fields["dest"].default for variant in variants}
        assert DestinationValidator().kinds == frozenset(tags)

    @pytest.mark.parametrize("dest", ["slack", "", None, 3])
    def test_rejects_unknown_dest(self, dest: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DestinationValidator().validate(dest, {"url": DISCORD_URL})
        assert exc_info.value.reason == "dest_unknown"

    @pytest.mark.parametrize("details", [None, "https://x.example", ["url"]])
    def test_rejects_non_object_details(self, details: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DestinationValidator().validate("json", details)
        assert exc_info.value.reason == "dest_details_not_object"

    def test_custom_builders_extend_registry(self) -> None:
        def build_always_json(details: object) -> JsonDestination:
            return JsonDestination(method="GET", url="https://fixed.example.com")

        validator = DestinationValidator({"fixed": build_always_json})

        assert validator.kinds == frozenset({"fixed"})
        assert validator.validate("fixed", {}).url == "https://fixed.example.com"
        assert validator.is_valid("json", {}) is False
