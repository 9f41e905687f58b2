"""Unit tests for startup validation and the shared logger helpers."""

import pytest  # type: ignore

from core.config import Settings
from core.logger import format_exception_short
from core.validation import list_fallback_providers, validate_api_environment

NO_KEYS = dict(
    azure_openai_api_key=None,
    azure_openai_endpoint=None,
    openai_api_key=None,
    qloo_api_key=None,
    coingecko_api_key=None,
    opensea_api_key=None,
    twitter_bearer_token=None,
    farcaster_api_key=None,
)


class TestValidateApiEnvironment:
    def test_defaults_are_valid(self):
        is_valid, errors = validate_api_environment(Settings(**NO_KEYS))

        assert is_valid
        assert errors == []

    @pytest.mark.parametrize(
        "overrides,fragment",
        [
            ({"api_port": 0}, "API_PORT"),
            ({"request_timeout_seconds": 0}, "REQUEST_TIMEOUT_SECONDS"),
            ({"cache_ttl_short": 4000}, "Cache TTLs"),
            ({"pipeline_failure_ttl": 4000}, "PIPELINE_FAILURE_TTL"),
        ],
    )
    def test_invalid_values(self, overrides, fragment):
        is_valid, errors = validate_api_environment(Settings(**NO_KEYS, **overrides))

        assert not is_valid
        assert any(fragment in e for e in errors)


class TestFallbackProviders:
    def test_everything_missing(self):
        assert list_fallback_providers(Settings(**NO_KEYS)) == [
            "llm",
            "qloo",
            "coingecko",
            "opensea",
            "twitter",
            "farcaster",
        ]

    def test_azure_needs_endpoint(self):
        settings = Settings(**{**NO_KEYS, "azure_openai_api_key": "k"})

        assert "llm" in list_fallback_providers(settings)

    def test_configured_providers_dropped(self):
        settings = Settings(**{**NO_KEYS, "openai_api_key": "k", "coingecko_api_key": "cg"})

        missing = list_fallback_providers(settings)
        assert "llm" not in missing
        assert "coingecko" not in missing


class TestFormatExceptionShort:
    def test_includes_context_type_and_location(self):
        try:
            raise ValueError("bad theme")
        except ValueError as e:
            text = format_exception_short(e, "Expanding theme")

        assert text.startswith("Expanding theme | ValueError: bad theme | (")
        assert "test_unit.py:" in text

    def test_without_traceback(self):
        assert format_exception_short(RuntimeError("x")) == "RuntimeError: x | (unknown)"
