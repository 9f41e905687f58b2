"""Constants for the Cultural Arbitrage API."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes returned in the ``error.code`` field of API responses."""

    # Request
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Route-level failures
    EXPANSION_ERROR = "EXPANSION_ERROR"
    ANALYSIS_ERROR = "ANALYSIS_ERROR"
    TASTE_ANALYSIS_ERROR = "TASTE_ANALYSIS_ERROR"
    INFLUENCER_ANALYSIS_ERROR = "INFLUENCER_ANALYSIS_ERROR"
    BRAND_ANALYSIS_ERROR = "BRAND_ANALYSIS_ERROR"
    ASSET_DISCOVERY_ERROR = "ASSET_DISCOVERY_ERROR"
    PIPELINE_ERROR = "PIPELINE_ERROR"
    SIMULATION_ERROR = "SIMULATION_ERROR"
    BACKTEST_ERROR = "BACKTEST_ERROR"

    # Upstream / infrastructure
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"


class HealthStatus(str, Enum):
    """Health states reported by health endpoints."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


# Error codes a client may retry
RETRYABLE_ERROR_CODES: set[ErrorCode] = {
    ErrorCode.UPSTREAM_ERROR,
    ErrorCode.SERVICE_UNAVAILABLE,
    ErrorCode.PIPELINE_ERROR,
}


def is_retryable(error_code: str) -> bool:
    """Check whether an error code string denotes a retryable failure."""
    try:
        return ErrorCode(error_code) in RETRYABLE_ERROR_CODES
    except ValueError:
        return False


__all__ = [
    "ErrorCode",
    "HealthStatus",
    "RETRYABLE_ERROR_CODES",
    "is_retryable",
]
