from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class LLMConfig:
    """Configuration for the LLM completion client.

    Azure OpenAI is used when both ``azure_api_key`` and ``azure_endpoint``
    are set; otherwise a plain OpenAI key is used. With neither, the client
    is built but every call raises ``ErrLLMNotConfigured``.
    """

    azure_api_key: Optional[str] = None
    azure_endpoint: Optional[str] = None
    azure_deployment: str = DEFAULT_MODEL
    azure_api_version: str = DEFAULT_AZURE_API_VERSION
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if self.max_tokens <= 0:
            raise ValueError(ERROR_INVALID_MAX_TOKENS)
        if not 0 <= self.temperature <= 2:
            raise ValueError(ERROR_INVALID_TEMPERATURE)

    @property
    def provider(self) -> Optional[str]:
        if self.azure_api_key and self.azure_endpoint:
            return PROVIDER_AZURE
        if self.openai_api_key:
            return PROVIDER_OPENAI
        return None


@dataclass
class LLMResponse:
    """Completion text plus token usage."""

    content: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    finish_reason: str = UNKNOWN_FINISH_REASON


class ErrLLMNotConfigured(Exception):
    """No LLM credentials are configured."""

    def __init__(self, message: str = ERROR_NOT_CONFIGURED):
        super().__init__(message)


class ErrLLMRequest(Exception):
    """The completion request failed or returned no choices."""


__all__ = [
    "LLMConfig",
    "LLMResponse",
    "ErrLLMNotConfigured",
    "ErrLLMRequest",
]
