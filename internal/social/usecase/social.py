"""Social signal adapter."""

import asyncio
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.http.interface import IHttpClient
from pkg.http.type import MALFORMED_PAYLOAD_ERRORS, ErrHTTPRequest
from pkg.logger.logger import Logger

from ..constant import *
from ..interface import ISocial
from ..type import (
    Config,
    FarcasterCast,
    SentimentLexicon,
    SocialInfluencer,
    SocialMention,
    SocialTrendAnalysis,
    TwitterTrend,
)
from .helpers import (
    analyze_farcaster_data,
    analyze_twitter_data,
    cultural_relevance,
    fallback_farcaster_casts,
    fallback_twitter_trends,
    farcaster_influencers,
    momentum,
    normalize_farcaster_casts,
    normalize_twitter_mentions,
    normalize_twitter_trends,
    overall_score,
    twitter_influencers,
    viral_potential,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SocialUseCase(ISocial):
    """Collects Twitter and Farcaster signals for a keyword.

    A platform without a client serves canned fallback data (trends, casts)
    or nothing (mentions). Provider failures do the same after a warning.
    """

    def __init__(
        self,
        config: Config,
        twitter: Optional[IHttpClient] = None,
        farcaster: Optional[IHttpClient] = None,
        cache: Optional[ICache] = None,
        lexicon: Optional[SentimentLexicon] = None,
        clock: Callable[[], datetime] = _utcnow,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.twitter = twitter
        self.farcaster = farcaster
        self.cache = cache
        self.lexicon = lexicon or SentimentLexicon()
        self.clock = clock
        self.logger = logger

    def _warn(self, message: str, **fields) -> None:
        if self.logger:
            self.logger.warning(f"[Social] {message}", extra=fields)

    async def get_twitter_trends(self, location: str = GLOBAL_LOCATION, use_cache: bool = True) -> List[TwitterTrend]:
        cache_key = CacheKeys.twitter_trends(location)
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        if self.twitter is None:
            self._warn("Twitter API not configured, using fallback trends")
            return fallback_twitter_trends()

        try:
            payload = await self.twitter.get_json(
                TWITTER_TRENDS_PATH,
                params={"id": GLOBAL_WOEID if location == GLOBAL_LOCATION else location},
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get Twitter trends", location=location, error=exc.message)
            return fallback_twitter_trends()

        try:
            trends = normalize_twitter_trends(payload)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed Twitter trends payload", location=location, error=str(exc))
            return fallback_twitter_trends()
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, trends, self.config.trends_ttl)
        return trends

    async def search_twitter_mentions(self, query: str, count: int = DEFAULT_MENTION_COUNT) -> List[SocialMention]:
        if self.twitter is None:
            self._warn("Twitter API not configured")
            return []
        if not query:
            return []

        try:
            payload = await self.twitter.get_json(
                TWITTER_SEARCH_PATH,
                params={
                    "query": f"{query} -is:retweet",
                    "max_results": min(count, MAX_TWITTER_RESULTS),
                    "tweet.fields": TWEET_FIELDS,
                    "user.fields": USER_FIELDS,
                    "expansions": "author_id",
                },
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to search Twitter", query=query, error=exc.message)
            return []
        try:
            return normalize_twitter_mentions(payload, query, self.lexicon)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed Twitter search payload", query=query, error=str(exc))
            return []

    async def get_farcaster_casts(
        self, query: Optional[str] = None, limit: int = DEFAULT_CAST_LIMIT, use_cache: bool = True
    ) -> List[FarcasterCast]:
        cache_key = CacheKeys.farcaster_search(query) if query else CacheKeys.farcaster_trends()
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        if self.farcaster is None:
            self._warn("Farcaster API not configured, using fallback casts")
            return fallback_farcaster_casts(self.clock())

        params = {"limit": min(limit, MAX_FARCASTER_RESULTS)}
        if query:
            params["q"] = query
        try:
            payload = await self.farcaster.get_json(
                FARCASTER_SEARCH_PATH if query else FARCASTER_TRENDING_PATH, params=params
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get Farcaster casts", query=query, error=exc.message)
            return fallback_farcaster_casts(self.clock())

        try:
            casts = normalize_farcaster_casts(payload.get("casts") if isinstance(payload, dict) else None)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed Farcaster payload", query=query, error=str(exc))
            return fallback_farcaster_casts(self.clock())
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, casts, self.config.casts_ttl)
        return casts

    async def analyze_social_trend(self, keyword: str) -> SocialTrendAnalysis:
        """Fetch mentions, casts and trends concurrently and fold them into one analysis."""
        mentions, casts, trends = await asyncio.gather(
            self.search_twitter_mentions(keyword, ANALYSIS_MENTION_COUNT),
            self.get_farcaster_casts(keyword, ANALYSIS_CAST_LIMIT),
            self.get_twitter_trends(),
        )

        twitter = analyze_twitter_data(keyword, mentions, trends)
        farcaster = analyze_farcaster_data(casts)

        analysis = SocialTrendAnalysis(
            keyword=keyword,
            twitter=twitter,
            farcaster=farcaster,
            overall_score=overall_score(twitter, farcaster),
            momentum=momentum(mentions, casts, self.clock()),
            cultural_relevance=cultural_relevance(mentions, casts),
            viral_potential=viral_potential(mentions, casts),
        )

        if self.logger:
            self.logger.debug(
                "[Social] Trend analyzed",
                extra={
                    "keyword": keyword,
                    "mentions": twitter.mention_count,
                    "casts": farcaster.cast_count,
                    "overall_score": analysis.overall_score,
                    "momentum": analysis.momentum,
                },
            )
        return analysis

    async def get_social_influencers(
        self, topic: str, platform: str = PLATFORM_BOTH, limit: int = DEFAULT_INFLUENCER_LIMIT
    ) -> List[SocialInfluencer]:
        influencers: List[SocialInfluencer] = []

        if platform in (PLATFORM_TWITTER, PLATFORM_BOTH):
            mentions = await self.search_twitter_mentions(topic, INFLUENCER_SAMPLE_SIZE)
            influencers.extend(twitter_influencers(mentions))

        if platform in (PLATFORM_FARCASTER, PLATFORM_BOTH):
            casts = await self.get_farcaster_casts(topic, INFLUENCER_SAMPLE_SIZE)
            influencers.extend(farcaster_influencers(casts))

        influencers.sort(key=lambda i: i.relevance_score, reverse=True)
        return influencers[:limit]


__all__ = ["SocialUseCase"]
