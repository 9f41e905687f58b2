from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .constant import *


@dataclass
class HttpClientConfig:
    """Configuration for an upstream HTTP client.

    Attributes:
        base_url: Provider base URL
        service_name: Name used in logs and errors (e.g. "CoinGecko")
        headers: Extra default headers such as auth keys
        timeout: Per-request timeout in seconds (default: 30)
        max_retries: Retries for transport errors and retryable statuses (default: 1)
        retry_backoff: Base backoff in seconds, doubled per attempt (default: 0.5)
        user_agent: User-Agent header value
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    base_url: str
    service_name: str
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_backoff: float = DEFAULT_RETRY_BACKOFF
    user_agent: str = DEFAULT_USER_AGENT
    transport: Optional[httpx.AsyncBaseTransport] = None

    def __post_init__(self):
        """Validate configuration."""
        if not self.base_url:
            raise ValueError(ERROR_BASE_URL_EMPTY)
        if not self.service_name:
            raise ValueError(ERROR_SERVICE_NAME_EMPTY)
        if self.timeout <= 0:
            raise ValueError(ERROR_INVALID_TIMEOUT)
        if self.max_retries < 0:
            raise ValueError(ERROR_INVALID_RETRIES)


class ErrHTTPRequest(Exception):
    """Upstream call failed: transport error, timeout, non-2xx or non-JSON body."""

    def __init__(self, message: str, status_code: int, service: str):
        self.message = message
        self.status_code = status_code
        self.service = service
        super().__init__(f"[{service}] {status_code}: {message}")


# Raised while reshaping a 2xx body whose fields have unexpected types.
MALFORMED_PAYLOAD_ERRORS = (TypeError, ValueError, AttributeError, KeyError)


__all__ = [
    "HttpClientConfig",
    "ErrHTTPRequest",
    "MALFORMED_PAYLOAD_ERRORS",
]
