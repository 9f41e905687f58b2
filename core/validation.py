"""Environment validation for API service startup."""

from typing import List, Tuple

from core.config import Settings, settings as default_settings
from core.logger import logger


def validate_api_environment(settings: Settings = default_settings) -> Tuple[bool, List[str]]:
    """Validate environment configuration for API service.

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    if settings.api_port <= 0 or settings.api_port > 65535:
        errors.append(f"API_PORT must be between 1-65535, got {settings.api_port}")

    if settings.request_timeout_seconds <= 0:
        errors.append("REQUEST_TIMEOUT_SECONDS must be positive")

    if settings.request_max_retries < 0:
        errors.append("REQUEST_MAX_RETRIES must be >= 0")

    if not (0 < settings.cache_ttl_short <= settings.cache_ttl_medium <= settings.cache_ttl_long):
        errors.append("Cache TTLs must satisfy 0 < short <= medium <= long")

    if settings.cache_max_size <= 0:
        errors.append("CACHE_MAX_SIZE must be positive")

    if settings.pipeline_failure_ttl > settings.pipeline_result_ttl:
        errors.append("PIPELINE_FAILURE_TTL must not exceed PIPELINE_RESULT_TTL")

    return len(errors) == 0, errors


def list_fallback_providers(settings: Settings = default_settings) -> List[str]:
    """Return providers that will run in fallback-only mode (no credentials)."""
    missing = []
    if not (settings.azure_openai_api_key and settings.azure_openai_endpoint) and not settings.openai_api_key:
        missing.append("llm")
    if not settings.qloo_api_key:
        missing.append("qloo")
    if not settings.coingecko_api_key:
        missing.append("coingecko")
    if not settings.opensea_api_key:
        missing.append("opensea")
    if not settings.twitter_bearer_token:
        missing.append("twitter")
    if not settings.farcaster_api_key:
        missing.append("farcaster")
    return missing


def log_environment_report(settings: Settings = default_settings) -> bool:
    """Log validation problems and fallback providers. Returns validity."""
    is_valid, errors = validate_api_environment(settings)
    for error in errors:
        logger.error(f"Configuration error: {error}")

    missing = list_fallback_providers(settings)
    if missing:
        logger.warning(
            "Providers without credentials run in fallback mode",
            extra={"providers": ",".join(missing)},
        )
    return is_valid
