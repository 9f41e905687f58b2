"""LLM theme expansion adapter."""

import json
import time
from typing import Any, Dict, List, Optional

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.llm.interface import ILLMClient
from pkg.llm.type import ErrLLMNotConfigured, ErrLLMRequest
from pkg.logger.logger import Logger

from ..constant import *
from ..errors import ErrExpansionFailed, ErrInvalidInput, ErrNotConfigured
from ..interface import IThemeExpansion
from ..type import AssetSummary, Config, CulturalAnalysis, ThemeExpansion
from .helpers import parse_asset_summary, parse_cultural_analysis, parse_theme_expansion


class ThemeExpansionUseCase(IThemeExpansion):
    """Expands a free-text theme into keywords and context with an LLM.

    This is the only adapter without a synthetic fallback for a missing or
    failing upstream: ``expand_theme`` raises ``ErrNotConfigured`` or
    ``ErrExpansionFailed``. A reply that is not JSON still yields a
    degraded expansion.
    """

    def __init__(
        self,
        config: Config,
        llm: ILLMClient,
        cache: Optional[ICache] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.llm = llm
        self.cache = cache
        self.logger = logger

    @property
    def is_configured(self) -> bool:
        return self.llm.is_configured

    async def expand_theme(
        self,
        theme: str,
        use_cache: bool = True,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> ThemeExpansion:
        """Expand ``theme`` into a ThemeExpansion, cached under the theme text.

        Raises:
            ErrInvalidInput: empty theme
            ErrNotConfigured: no LLM credentials
            ErrExpansionFailed: LLM request failed
        """
        if not theme or not theme.strip():
            raise ErrInvalidInput("theme cannot be empty")

        cache_key = CacheKeys.theme_expansion(theme)
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                if self.logger:
                    self.logger.debug("[ThemeExpansion] Cache hit", extra={"theme": theme})
                return cached

        start = time.perf_counter()
        content = await self._complete(
            THEME_EXPANSION_PROMPT.format(theme=theme),
            max_tokens or self.config.max_tokens,
            temperature if temperature is not None else self.config.temperature,
        )
        expansion = parse_theme_expansion(theme, content)

        if self.logger:
            self.logger.info(
                "[ThemeExpansion] Theme expanded",
                extra={
                    "theme": theme,
                    "keywords": len(expansion.expanded_keywords),
                    "confidence": expansion.confidence,
                    "elapsed_ms": int((time.perf_counter() - start) * 1000),
                },
            )

        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, expansion, self.config.cache_ttl)
        return expansion

    async def generate_cultural_analysis(
        self, keywords: List[str], context: str = ""
    ) -> CulturalAnalysis:
        """Score cultural significance and trend potential for ``keywords``."""
        if not keywords:
            raise ErrInvalidInput("keywords cannot be empty")
        content = await self._complete(
            CULTURAL_ANALYSIS_PROMPT.format(keywords=", ".join(keywords), context=context),
            CULTURAL_ANALYSIS_MAX_TOKENS,
            self.config.temperature,
        )
        return parse_cultural_analysis(content)

    async def summarize_asset_opportunities(
        self, assets: List[Dict[str, Any]], theme: str
    ) -> AssetSummary:
        """Write an executive summary over already scored assets."""
        content = await self._complete(
            ASSET_SUMMARY_PROMPT.format(theme=theme, assets=json.dumps(assets, indent=2, default=str)),
            ASSET_SUMMARY_MAX_TOKENS,
            self.config.temperature,
        )
        return parse_asset_summary(content)

    async def _complete(
        self, prompt: str, max_tokens: int, temperature: Optional[float]
    ) -> str:
        try:
            response = await self.llm.complete(prompt, max_tokens=max_tokens, temperature=temperature)
        except ErrLLMNotConfigured as exc:
            raise ErrNotConfigured(str(exc)) from exc
        except ErrLLMRequest as exc:
            if self.logger:
                self.logger.error("[ThemeExpansion] LLM request failed", extra={"error": str(exc)})
            raise ErrExpansionFailed(str(exc)) from exc
        return response.content


__all__ = ["ThemeExpansionUseCase"]
