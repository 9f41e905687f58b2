import asyncio
import base64
import math
import re
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from loguru import logger

from .constant import *
from .interface import ICache, TTL
from .type import CacheConfig, CacheEntry


class MemoryCache(ICache):
    """In-process TTL cache with capacity eviction.

    Entries expire lazily on read and are also removed by a background
    sweep task started with ``start()``. When the entry count reaches
    ``max_size`` the oldest 10% (by insertion time) is evicted before the
    new value is stored. Nothing is persisted.

    Example:
        >>> cache = MemoryCache(CacheConfig(max_size=500))
        >>> await cache.start()
        >>>
        >>> await cache.set("theme_expansion:solarpunk", {"keywords": []}, "medium")
        >>> value = await cache.get("theme_expansion:solarpunk")
        >>> await cache.close()
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            config: CacheConfig instance (defaults applied when None)
            clock: Monotonic time source in seconds, injectable for tests
        """
        self.config = config or CacheConfig()
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._sweep_task: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Start the background expiry sweep."""
        if self._sweep_task is None or self._sweep_task.done():
            self._sweep_task = asyncio.create_task(self._sweep_loop())
            logger.info(
                f"Memory cache started (max_size={self.config.max_size}, "
                f"sweep_interval={self.config.sweep_interval}s)"
            )

    async def close(self) -> None:
        """Cancel the sweep task and drop all entries."""
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
            self._sweep_task = None
        self._entries.clear()
        logger.info("Memory cache closed")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.config.sweep_interval)
            removed = await self.sweep()
            if removed:
                logger.debug(f"Memory cache sweep removed {removed} expired entries")

    async def sweep(self) -> int:
        """Remove every expired entry. Returns the number removed."""
        async with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    def resolve_ttl(self, ttl: TTL) -> float:
        """Map a TTL class name or a number of seconds to seconds."""
        if isinstance(ttl, str):
            if ttl == TTL_SHORT:
                return self.config.ttl_short
            if ttl == TTL_MEDIUM:
                return self.config.ttl_medium
            if ttl == TTL_LONG:
                return self.config.ttl_long
            raise ValueError(f"{ERROR_UNKNOWN_TTL_CLASS}: {ttl}")
        if ttl <= 0:
            raise ValueError(ERROR_INVALID_TTL)
        return float(ttl)

    async def set(self, key: str, value: Any, ttl: TTL = TTL_MEDIUM) -> None:
        seconds = self.resolve_ttl(ttl)
        async with self._lock:
            if key not in self._entries and len(self._entries) >= self.config.max_size:
                self._evict_oldest()
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock(), ttl=seconds)

    async def get(self, key: str) -> Optional[Any]:
        async with self._lock:
            return self._get_live(key)

    async def has(self, key: str) -> bool:
        async with self._lock:
            self._get_live(key)
            return key in self._entries

    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._entries.pop(key, None) is not None

    async def get_or_set(
        self, key: str, factory: Callable[[], Awaitable[Any]], ttl: TTL = TTL_MEDIUM
    ) -> Any:
        """Return the cached value, or await ``factory()`` once and store it.

        The factory runs outside the lock; concurrent misses for the same key
        may both call it and the last write wins.
        """
        cached = await self.get(key)
        if cached is not None:
            return cached
        value = await factory()
        await self.set(key, value, ttl)
        return value

    # ------------------------------------------------------------------
    # Batch and pattern operations
    # ------------------------------------------------------------------

    async def mget(self, keys: List[str]) -> Dict[str, Optional[Any]]:
        async with self._lock:
            return {key: self._get_live(key) for key in keys}

    async def mset(self, entries: Dict[str, Any], ttl: TTL = TTL_MEDIUM) -> None:
        for key, value in entries.items():
            await self.set(key, value, ttl)

    async def keys(self, pattern: Optional[str] = None) -> List[str]:
        async with self._lock:
            all_keys = list(self._entries.keys())
        if not pattern:
            return all_keys
        regex = _wildcard_regex(pattern)
        return [key for key in all_keys if regex.fullmatch(key)]

    async def delete_by_pattern(self, pattern: str) -> int:
        deleted = 0
        for key in await self.keys(pattern):
            if await self.delete(key):
                deleted += 1
        return deleted

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def stats(self) -> Dict[str, int]:
        return {"size": len(self._entries), "maxSize": self.config.max_size}

    # ------------------------------------------------------------------
    # Internals (caller holds the lock)
    # ------------------------------------------------------------------

    def _get_live(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            return None
        return entry.value

    def _evict_oldest(self) -> None:
        count = max(1, math.floor(self.config.max_size * EVICTION_RATIO))
        oldest = sorted(self._entries.items(), key=lambda item: item[1].stored_at)[:count]
        for key, _ in oldest:
            del self._entries[key]


def _wildcard_regex(pattern: str) -> "re.Pattern[str]":
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")))


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class CacheKeys:
    """Cache key builders shared by the adapters and the orchestrator."""

    @staticmethod
    def theme_expansion(theme: str) -> str:
        return f"theme_expansion:{theme}"

    @staticmethod
    def taste_correlation(categories: str, keywords: str) -> str:
        return f"taste_correlation:{categories}:{_b64(keywords)}"

    @staticmethod
    def token_price(token_id: str) -> str:
        return f"coingecko:price:{token_id.lower()}"

    @staticmethod
    def token_info(token_id: str) -> str:
        return f"coingecko:info:{token_id}"

    @staticmethod
    def trending_coins() -> str:
        return "coingecko:trending"

    @staticmethod
    def collection(slug: str) -> str:
        return f"opensea:collection:{slug}"

    @staticmethod
    def collection_stats(slug: str) -> str:
        return f"opensea:stats:{slug}"

    @staticmethod
    def twitter_trends(location: Optional[str] = None) -> str:
        return f"twitter:trends:{location or 'global'}"

    @staticmethod
    def farcaster_trends() -> str:
        return "farcaster:trends"

    @staticmethod
    def farcaster_search(query: str) -> str:
        return f"farcaster:search:{query}"

    @staticmethod
    def full_pipeline(vibe: str) -> str:
        return f"pipeline:{_b64(vibe)}"


__all__ = [
    "MemoryCache",
    "CacheKeys",
]
