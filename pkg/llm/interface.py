"""Interface for LLM completion."""

from typing import Optional, Protocol, runtime_checkable

from .type import LLMResponse


@runtime_checkable
class ILLMClient(Protocol):
    """Protocol for single-prompt chat completion."""

    @property
    def is_configured(self) -> bool:
        """Whether credentials are present."""
        ...

    async def complete(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """Send one user prompt and return the first choice."""
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...


__all__ = ["ILLMClient"]
