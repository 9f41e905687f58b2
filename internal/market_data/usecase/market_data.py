"""Token market-data adapter."""

from typing import List, Optional

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.defaults.defaults import StrictDefaultsFiller
from pkg.defaults.interface import IDefaultsFiller
from pkg.http.interface import IHttpClient
from pkg.http.type import MALFORMED_PAYLOAD_ERRORS, ErrHTTPRequest
from pkg.logger.logger import Logger

from ..constant import *
from ..interface import IMarketData
from ..type import Config, TokenInfo, TokenMatch, TokenSearch, TrendingToken
from .helpers import (
    create_token_match,
    dedupe_matches,
    extract_price,
    normalize_search,
    normalize_token_info,
    normalize_trending,
)


class MarketDataUseCase(IMarketData):
    """Finds tokens related to a keyword set.

    Every provider failure is logged and turned into ``None`` or ``[]``;
    nothing raises past this class. Without a client the adapter returns
    empty results.
    """

    def __init__(
        self,
        config: Config,
        client: Optional[IHttpClient] = None,
        cache: Optional[ICache] = None,
        defaults: Optional[IDefaultsFiller] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.client = client
        self.cache = cache
        self.defaults = defaults or StrictDefaultsFiller()
        self.logger = logger

    def _warn(self, message: str, **fields) -> None:
        if self.logger:
            self.logger.warning(f"[MarketData] {message}", extra=fields)

    async def get_token_info(self, token_id: str, use_cache: bool = True) -> Optional[TokenInfo]:
        if self.client is None or not token_id:
            return None

        cache_key = CacheKeys.token_info(token_id)
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            payload = await self.client.get_json(
                COIN_PATH.format(token_id=token_id),
                params={
                    "localization": False,
                    "tickers": False,
                    "market_data": True,
                    "community_data": True,
                    "developer_data": False,
                    "sparkline": False,
                },
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get token info", token_id=token_id, error=exc.message)
            return None
        if not isinstance(payload, dict) or not payload.get("id"):
            self._warn("Malformed token payload", token_id=token_id)
            return None

        try:
            info = normalize_token_info(payload, self.defaults)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed token payload", token_id=token_id, error=str(exc))
            return None
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, info, self.config.info_ttl)
        return info

    async def get_token_price(self, token_id: str, vs_currency: str = DEFAULT_VS_CURRENCY) -> Optional[float]:
        if self.client is None or not token_id:
            return None

        cache_key = CacheKeys.token_price(f"{token_id}-{vs_currency}")
        if self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            payload = await self.client.get_json(
                SIMPLE_PRICE_PATH,
                params={"ids": token_id, "vs_currencies": vs_currency, "include_24hr_change": True},
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get price", token_id=token_id, error=exc.message)
            return None

        price = extract_price(payload, token_id, vs_currency)
        if price is not None and self.cache is not None:
            await self.cache.set(cache_key, price, self.config.price_ttl)
        return price

    async def get_trending_tokens(self, use_cache: bool = True) -> List[TrendingToken]:
        if self.client is None:
            return []

        cache_key = CacheKeys.trending_coins()
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            payload = await self.client.get_json(TRENDING_PATH)
        except ErrHTTPRequest as exc:
            self._warn("Failed to get trending tokens", error=exc.message)
            return []

        try:
            trending = normalize_trending(payload if isinstance(payload, dict) else {})
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed trending payload", error=str(exc))
            return []
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, trending, self.config.trending_ttl)
        return trending

    async def search_tokens(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[TokenSearch]:
        if self.client is None or not query:
            return []
        try:
            payload = await self.client.get_json(SEARCH_PATH, params={"query": query})
        except ErrHTTPRequest as exc:
            self._warn("Search failed", query=query, error=exc.message)
            return []
        try:
            return normalize_search(payload if isinstance(payload, dict) else {}, limit)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed search payload", query=query, error=str(exc))
            return []

    async def find_relevant_tokens(self, keywords: List[str], limit: int = DEFAULT_FIND_LIMIT) -> List[TokenMatch]:
        """Search the first keywords, add trending tokens, dedupe and rank.

        Keyword hits must score above 30, trending tokens get +10 and must
        score above 25.
        """
        matches: List[TokenMatch] = []

        for keyword in keywords[:SEARCH_KEYWORD_LIMIT]:
            for result in await self.search_tokens(keyword, SEARCH_RESULTS_PER_KEYWORD):
                info = await self.get_token_info(result.id)
                if info is None:
                    continue
                match = create_token_match(info, keyword, keywords, self.defaults.social_mentions())
                if match.relevance_score > KEYWORD_MATCH_FLOOR:
                    matches.append(match)

        for trending in (await self.get_trending_tokens())[:TRENDING_LIMIT]:
            info = await self.get_token_info(trending.id)
            if info is None:
                continue
            match = create_token_match(info, "", keywords, self.defaults.social_mentions())
            match.cultural_alignment.trending_score = trending.score
            match.relevance_score += TRENDING_BOOST
            if match.relevance_score > TRENDING_MATCH_FLOOR:
                matches.append(match)

        ranked = sorted(dedupe_matches(matches), key=lambda m: m.relevance_score, reverse=True)

        if self.logger:
            self.logger.info(
                "[MarketData] Relevant tokens found",
                extra={"keywords": len(keywords), "matches": len(ranked), "limit": limit},
            )
        return ranked[:limit]


__all__ = ["MarketDataUseCase"]
