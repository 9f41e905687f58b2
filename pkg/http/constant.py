DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 1
DEFAULT_RETRY_BACKOFF = 0.5
DEFAULT_USER_AGENT = "Cultural-Arbitrage-Signal-Engine/1.0.0"
DEFAULT_CONTENT_TYPE = "application/json"

# Status codes worth retrying
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

# Status assigned to transport failures that never produced a response
TRANSPORT_ERROR_STATUS = 503
TIMEOUT_ERROR_STATUS = 504

# Error messages
ERROR_BASE_URL_EMPTY = "base_url cannot be empty"
ERROR_SERVICE_NAME_EMPTY = "service_name cannot be empty"
ERROR_INVALID_TIMEOUT = "timeout must be positive"
ERROR_INVALID_RETRIES = "max_retries must be >= 0"

__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_BACKOFF",
    "DEFAULT_USER_AGENT",
    "DEFAULT_CONTENT_TYPE",
    "RETRYABLE_STATUS_CODES",
    "TRANSPORT_ERROR_STATUS",
    "TIMEOUT_ERROR_STATUS",
    "ERROR_BASE_URL_EMPTY",
    "ERROR_SERVICE_NAME_EMPTY",
    "ERROR_INVALID_TIMEOUT",
    "ERROR_INVALID_RETRIES",
]
