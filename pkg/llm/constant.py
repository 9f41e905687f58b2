PROVIDER_AZURE = "azure"
PROVIDER_OPENAI = "openai"

DEFAULT_MODEL = "o4-mini"
DEFAULT_AZURE_API_VERSION = "2025-01-01-preview"
DEFAULT_MAX_TOKENS = 4000
# o4-mini deployments only accept temperature=1.0
DEFAULT_TEMPERATURE = 1.0
DEFAULT_TIMEOUT = 30.0

ROLE_USER = "user"
UNKNOWN_FINISH_REASON = "unknown"

# Error messages
ERROR_NOT_CONFIGURED = (
    "LLM is not configured. Set AZURE_OPENAI_API_KEY and AZURE_OPENAI_ENDPOINT, "
    "or OPENAI_API_KEY."
)
ERROR_EMPTY_RESPONSE = "No response from LLM API"
ERROR_INVALID_MAX_TOKENS = "max_tokens must be positive"
ERROR_INVALID_TEMPERATURE = "temperature must be between 0 and 2"

__all__ = [
    "PROVIDER_AZURE",
    "PROVIDER_OPENAI",
    "DEFAULT_MODEL",
    "DEFAULT_AZURE_API_VERSION",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TIMEOUT",
    "ROLE_USER",
    "UNKNOWN_FINISH_REASON",
    "ERROR_NOT_CONFIGURED",
    "ERROR_EMPTY_RESPONSE",
    "ERROR_INVALID_MAX_TOKENS",
    "ERROR_INVALID_TEMPERATURE",
]
