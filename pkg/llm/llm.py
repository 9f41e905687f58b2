from typing import Optional, Union

from loguru import logger
from openai import AsyncAzureOpenAI, AsyncOpenAI, OpenAIError

from .constant import *
from .interface import ILLMClient
from .type import ErrLLMNotConfigured, ErrLLMRequest, LLMConfig, LLMResponse


class LLMClient(ILLMClient):
    """Chat completion client over the openai SDK.

    Example:
        >>> client = LLMClient(LLMConfig(openai_api_key="sk-..."))
        >>> response = await client.complete("Describe solarpunk", max_tokens=500)
        >>> print(response.content)
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.client: Optional[Union[AsyncAzureOpenAI, AsyncOpenAI]] = None
        self._initialize_client()

    def _initialize_client(self) -> None:
        provider = self.config.provider
        if provider == PROVIDER_AZURE:
            self.client = AsyncAzureOpenAI(
                api_key=self.config.azure_api_key,
                azure_endpoint=self.config.azure_endpoint,
                azure_deployment=self.config.azure_deployment,
                api_version=self.config.azure_api_version,
                timeout=self.config.timeout,
            )
            logger.info("LLM client initialized (Azure OpenAI)")
        elif provider == PROVIDER_OPENAI:
            self.client = AsyncOpenAI(
                api_key=self.config.openai_api_key,
                base_url=self.config.openai_base_url,
                timeout=self.config.timeout,
            )
            logger.info("LLM client initialized (OpenAI)")
        else:
            logger.warning("LLM credentials missing, theme expansion is unavailable")

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def complete(
        self,
        prompt: str,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """Send ``prompt`` as a single user message.

        Raises:
            ErrLLMNotConfigured: no credentials
            ErrLLMRequest: SDK error or empty choice list
        """
        if self.client is None:
            raise ErrLLMNotConfigured()

        try:
            response = await self.client.chat.completions.create(
                model=self.config.model,
                messages=[{"role": ROLE_USER, "content": prompt}],
                max_completion_tokens=max_tokens or self.config.max_tokens,
                temperature=self.config.temperature if temperature is None else temperature,
            )
        except OpenAIError as exc:
            raise ErrLLMRequest(f"LLM request failed: {exc}") from exc

        if not response.choices:
            raise ErrLLMRequest(ERROR_EMPTY_RESPONSE)

        choice = response.choices[0]
        usage = response.usage
        return LLMResponse(
            content=(choice.message.content if choice.message else None) or "",
            prompt_tokens=usage.prompt_tokens if usage else 0,
            completion_tokens=usage.completion_tokens if usage else 0,
            total_tokens=usage.total_tokens if usage else 0,
            finish_reason=choice.finish_reason or UNKNOWN_FINISH_REASON,
        )

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()


__all__ = ["LLMClient"]
