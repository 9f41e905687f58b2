"""Taste correlation adapter."""

import time
from typing import List, Optional

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.http.interface import IHttpClient
from pkg.http.type import MALFORMED_PAYLOAD_ERRORS, ErrHTTPRequest
from pkg.logger.logger import Logger
from internal.theme_expansion.interface import IThemeExpansion

from ..constant import *
from ..errors import ErrInvalidInput
from ..interface import ITaste
from ..type import (
    BrandAffinities,
    Config,
    InfluencerCorrelations,
    TasteProfile,
    TasteRecommendation,
)
from .helpers import (
    analysis_to_recommendation,
    basic_recommendation,
    normalize_brands,
    normalize_influencers,
    normalize_recommendation,
)


class TasteUseCase(ITaste):
    """Correlates keywords against the taste graph.

    Fallback chain when the upstream call fails or no client is configured:
    real API, then an LLM cultural analysis reshaped into correlations, then
    a keyword echo. Only real API results are cached.
    """

    def __init__(
        self,
        config: Config,
        client: Optional[IHttpClient] = None,
        theme_expansion: Optional[IThemeExpansion] = None,
        cache: Optional[ICache] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.client = client
        self.theme_expansion = theme_expansion
        self.cache = cache
        self.logger = logger

    async def get_taste_correlations(
        self,
        theme: str,
        keywords: List[str],
        categories: Optional[List[str]] = None,
        use_cache: bool = True,
        limit: Optional[int] = None,
    ) -> TasteRecommendation:
        if not theme:
            raise ErrInvalidInput("theme cannot be empty")
        categories = list(categories or [])
        keywords = list(keywords or [])

        cache_key = CacheKeys.taste_correlation(
            ",".join(categories), ",".join([theme, *keywords])
        )
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        if self.client is None:
            return await self._ai_fallback(theme, keywords, categories)

        body = {
            "query": {
                "theme": theme,
                "keywords": keywords,
                "categories": categories or list(DEFAULT_CATEGORIES),
                "limit": limit or self.config.default_limit,
                "includeMetadata": True,
            },
            "options": {
                "demographicWeighting": True,
                "culturalContext": True,
                "trendingBoost": True,
            },
        }

        start = time.perf_counter()
        try:
            raw = await self.client.post_json(CORRELATIONS_PATH, body)
            recommendation = normalize_recommendation(raw if isinstance(raw, dict) else {})
        except ErrHTTPRequest as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] API call failed, using AI fallback",
                    extra={"status": exc.status_code, "error": exc.message},
                )
            return await self._ai_fallback(theme, keywords, categories)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] Malformed API payload, using AI fallback",
                    extra={"error": f"{type(exc).__name__}: {exc}"},
                )
            return await self._ai_fallback(theme, keywords, categories)

        if self.logger:
            self.logger.info(
                "[Taste] Correlations fetched",
                extra={
                    "theme": theme,
                    "count": len(recommendation.recommendations),
                    "elapsed_ms": int((time.perf_counter() - start) * 1000),
                },
            )

        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, recommendation, self.config.cache_ttl)
        return recommendation

    async def _ai_fallback(
        self, theme: str, keywords: List[str], categories: List[str]
    ) -> TasteRecommendation:
        if self.theme_expansion is None or not self.theme_expansion.is_configured:
            return basic_recommendation(theme, keywords, categories)

        try:
            analysis = await self.theme_expansion.generate_cultural_analysis(
                keywords or [theme], AI_CONTEXT_TEMPLATE.format(theme=theme)
            )
        except Exception as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] AI fallback failed, using basic fallback",
                    extra={"error": str(exc)},
                )
            return basic_recommendation(theme, keywords, categories)

        return analysis_to_recommendation(analysis, theme, keywords, categories)

    async def get_influencer_correlations(
        self, profile: TasteProfile, platforms: Optional[List[str]] = None
    ) -> InfluencerCorrelations:
        if self.client is None:
            return InfluencerCorrelations()
        body = {
            "tasteProfile": profile.to_dict(),
            "platforms": platforms or list(DEFAULT_PLATFORMS),
            "limit": INFLUENCER_LIMIT,
            "minFollowers": INFLUENCER_MIN_FOLLOWERS,
        }
        try:
            raw = await self.client.post_json(INFLUENCERS_PATH, body)
            return normalize_influencers(raw if isinstance(raw, dict) else {})
        except ErrHTTPRequest as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] Influencer correlation failed", extra={"error": exc.message}
                )
        except MALFORMED_PAYLOAD_ERRORS as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] Malformed influencer payload", extra={"error": str(exc)}
                )
        return InfluencerCorrelations()

    async def get_brand_affinities(
        self, profile: TasteProfile, sectors: Optional[List[str]] = None
    ) -> BrandAffinities:
        if self.client is None:
            return BrandAffinities()
        body = {
            "tasteProfile": profile.to_dict(),
            "sectors": sectors or list(DEFAULT_SECTORS),
            "limit": BRAND_LIMIT,
            "includeWebPresence": True,
        }
        try:
            raw = await self.client.post_json(BRANDS_PATH, body)
            return normalize_brands(raw if isinstance(raw, dict) else {})
        except ErrHTTPRequest as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] Brand affinity analysis failed", extra={"error": exc.message}
                )
        except MALFORMED_PAYLOAD_ERRORS as exc:
            if self.logger:
                self.logger.warning(
                    "[Taste] Malformed brand payload", extra={"error": str(exc)}
                )
        return BrandAffinities()


__all__ = ["TasteUseCase"]
