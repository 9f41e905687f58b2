"""NFT marketplace adapter."""

from typing import List, Optional

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.defaults.defaults import StrictDefaultsFiller
from pkg.defaults.interface import IDefaultsFiller
from pkg.http.interface import IHttpClient
from pkg.http.type import MALFORMED_PAYLOAD_ERRORS, ErrHTTPRequest
from pkg.logger.logger import Logger

from ..constant import *
from ..interface import IMarketplace
from ..type import CollectionStats, Config, NFTAsset, NFTCollection, NFTMatch
from .helpers import (
    create_nft_match,
    dedupe_matches,
    normalize_asset,
    normalize_collection,
    normalize_collection_stats,
)


class MarketplaceUseCase(IMarketplace):
    """Finds NFT collections related to a keyword set.

    Provider failures are logged and become ``None`` or ``[]``.
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
            self.logger.warning(f"[Marketplace] {message}", extra=fields)

    def _collections(self, payload) -> List[NFTCollection]:
        items = payload.get("collections") if isinstance(payload, dict) else None
        collections = []
        for item in items if isinstance(items, list) else []:
            if not isinstance(item, dict):
                continue
            try:
                collections.append(normalize_collection(item, self.defaults))
            except MALFORMED_PAYLOAD_ERRORS as exc:
                self._warn("Skipping malformed collection", error=str(exc))
        return collections

    async def get_collection(self, slug: str, use_cache: bool = True) -> Optional[NFTCollection]:
        if self.client is None or not slug:
            return None

        cache_key = CacheKeys.collection(slug)
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            payload = await self.client.get_json(COLLECTION_PATH.format(slug=slug))
        except ErrHTTPRequest as exc:
            self._warn("Failed to get collection", slug=slug, error=exc.message)
            return None
        if not isinstance(payload, dict):
            return None

        try:
            collection = normalize_collection(payload, self.defaults)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed collection payload", slug=slug, error=str(exc))
            return None
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, collection, self.config.collection_ttl)
        return collection

    async def get_collection_stats(self, slug: str, use_cache: bool = True) -> Optional[CollectionStats]:
        if self.client is None or not slug:
            return None

        cache_key = CacheKeys.collection_stats(slug)
        if use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            payload = await self.client.get_json(COLLECTION_STATS_PATH.format(slug=slug))
        except ErrHTTPRequest as exc:
            self._warn("Failed to get stats", slug=slug, error=exc.message)
            return None

        try:
            stats = normalize_collection_stats(slug, payload)
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed stats payload", slug=slug, error=str(exc))
            return None
        if use_cache and self.cache is not None:
            await self.cache.set(cache_key, stats, self.config.stats_ttl)
        return stats

    async def search_collections(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[NFTCollection]:
        if self.client is None or not query:
            return []
        try:
            payload = await self.client.get_json(
                COLLECTIONS_PATH,
                params={"search": query, "limit": min(limit, MAX_SEARCH_LIMIT), "include_hidden": False},
            )
        except ErrHTTPRequest as exc:
            self._warn("Search failed", query=query, error=exc.message)
            return []
        return self._collections(payload)

    async def get_collection_assets(
        self, slug: str, limit: int = DEFAULT_ASSETS_LIMIT, sort_by: str = SORT_PRICE
    ) -> List[NFTAsset]:
        if self.client is None or not slug:
            return []
        if sort_by not in VALID_SORTS:
            sort_by = SORT_PRICE
        try:
            payload = await self.client.get_json(
                COLLECTION_NFTS_PATH.format(slug=slug),
                params={"limit": min(limit, MAX_ASSETS_LIMIT), "order_by": sort_by, "order_direction": "asc"},
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get assets", slug=slug, error=exc.message)
            return []
        items = payload.get("nfts") if isinstance(payload, dict) else None
        try:
            return [normalize_asset(item) for item in items or [] if isinstance(item, dict)]
        except MALFORMED_PAYLOAD_ERRORS as exc:
            self._warn("Malformed assets payload", slug=slug, error=str(exc))
            return []

    async def get_trending_collections(self) -> List[NFTCollection]:
        """Collections listing used as a trending proxy."""
        if self.client is None:
            return []
        try:
            payload = await self.client.get_json(
                COLLECTIONS_PATH,
                params={"limit": TRENDING_REQUEST_LIMIT, "include_hidden": False},
            )
        except ErrHTTPRequest as exc:
            self._warn("Failed to get trending collections", error=exc.message)
            return []
        return self._collections(payload)

    async def find_relevant_nfts(self, keywords: List[str], limit: int = DEFAULT_FIND_LIMIT) -> List[NFTMatch]:
        """Search the first keywords, add trending collections, dedupe and rank.

        Keyword hits must score above 25. Trending collections get +15 and
        must score above 20. Matches above 50 carry a sample of top assets.
        """
        matches: List[NFTMatch] = []

        for keyword in keywords[:SEARCH_KEYWORD_LIMIT]:
            for collection in await self.search_collections(keyword, SEARCH_RESULTS_PER_KEYWORD):
                stats = await self.get_collection_stats(collection.slug)
                if stats is None:
                    continue
                match = create_nft_match(collection, stats, keyword, keywords)
                if match.relevance_score > KEYWORD_MATCH_FLOOR:
                    matches.append(match)

        for collection in (await self.get_trending_collections())[:TRENDING_LIMIT]:
            stats = await self.get_collection_stats(collection.slug)
            if stats is None:
                continue
            match = create_nft_match(collection, stats, "", keywords)
            match.cultural_alignment.trending_factor = min(100.0, stats.volume["1d"] / 10_000)
            match.relevance_score += TRENDING_BOOST
            if match.relevance_score > TRENDING_MATCH_FLOOR:
                matches.append(match)

        ranked = sorted(dedupe_matches(matches), key=lambda m: m.relevance_score, reverse=True)[:limit]

        for match in ranked:
            if match.relevance_score > TOP_ASSETS_MIN_RELEVANCE:
                match.top_assets = await self.get_collection_assets(
                    match.collection.slug, TOP_ASSETS_COUNT, SORT_PRICE
                )

        if self.logger:
            self.logger.info(
                "[Marketplace] Relevant collections found",
                extra={"keywords": len(keywords), "matches": len(ranked), "limit": limit},
            )
        return ranked


__all__ = ["MarketplaceUseCase"]
