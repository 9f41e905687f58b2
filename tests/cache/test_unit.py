"""Unit tests for MemoryCache.

Covers TTL classes, lazy expiry with an injected clock, capacity eviction,
batch/pattern operations and the shared key builders.
"""

import pytest  # type: ignore

from pkg.cache.cache import CacheKeys, MemoryCache
from pkg.cache.type import CacheConfig


# ============================================================================
# Test Fixtures
# ============================================================================


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache:
    return MemoryCache(CacheConfig(ttl_short=10, ttl_medium=60, ttl_long=120, max_size=10), clock=clock)


# ============================================================================
# Config
# ============================================================================


class TestCacheConfig:
    """Validation of CacheConfig."""

    def test_defaults(self):
        config = CacheConfig()
        assert (config.ttl_short, config.ttl_medium, config.ttl_long) == (300, 1800, 3600)
        assert config.max_size == 1000

    def test_rejects_unordered_ttls(self):
        with pytest.raises(ValueError):
            CacheConfig(ttl_short=100, ttl_medium=50, ttl_long=200)

    def test_rejects_non_positive_max_size(self):
        with pytest.raises(ValueError):
            CacheConfig(max_size=0)


# ============================================================================
# Single-key operations
# ============================================================================


class TestGetSet:
    """Basic get/set/has/delete behavior."""

    @pytest.mark.anyio
    async def test_set_then_get(self, cache: MemoryCache):
        await cache.set("k", {"a": 1})
        assert await cache.get("k") == {"a": 1}
        assert await cache.has("k") is True

    @pytest.mark.anyio
    async def test_missing_key_returns_none(self, cache: MemoryCache):
        assert await cache.get("nope") is None
        assert await cache.has("nope") is False

    @pytest.mark.anyio
    async def test_delete(self, cache: MemoryCache):
        await cache.set("k", 1)
        assert await cache.delete("k") is True
        assert await cache.delete("k") is False
        assert await cache.get("k") is None

    @pytest.mark.anyio
    async def test_unknown_ttl_class_raises(self, cache: MemoryCache):
        with pytest.raises(ValueError):
            await cache.set("k", 1, "forever")

    @pytest.mark.anyio
    async def test_numeric_ttl_must_be_positive(self, cache: MemoryCache):
        with pytest.raises(ValueError):
            await cache.set("k", 1, 0)


class TestExpiry:
    """Entries expire after their TTL class elapses."""

    @pytest.mark.anyio
    async def test_value_is_live_until_ttl(self, cache: MemoryCache, clock: FakeClock):
        await cache.set("k", "v", "short")
        clock.advance(10)
        assert await cache.get("k") == "v"

    @pytest.mark.anyio
    async def test_value_expires_after_ttl(self, cache: MemoryCache, clock: FakeClock):
        await cache.set("k", "v", "short")
        clock.advance(10.5)
        assert await cache.get("k") is None
        assert cache.size() == 0

    @pytest.mark.anyio
    async def test_ttl_classes_differ(self, cache: MemoryCache, clock: FakeClock):
        await cache.set("short", 1, "short")
        await cache.set("long", 2, "long")
        clock.advance(61)
        assert await cache.get("short") is None
        assert await cache.get("long") == 2

    @pytest.mark.anyio
    async def test_sweep_removes_expired(self, cache: MemoryCache, clock: FakeClock):
        await cache.set("a", 1, "short")
        await cache.set("b", 2, "medium")
        clock.advance(30)
        assert await cache.sweep() == 1
        assert await cache.keys() == ["b"]


class TestEviction:
    """Capacity eviction drops the oldest entries first."""

    @pytest.mark.anyio
    async def test_oldest_entry_evicted_when_full(self, cache: MemoryCache, clock: FakeClock):
        for i in range(10):
            await cache.set(f"k{i}", i)
            clock.advance(1)
        await cache.set("new", "x")
        assert cache.size() == 10
        assert await cache.get("k0") is None
        assert await cache.get("new") == "x"

    @pytest.mark.anyio
    async def test_overwrite_does_not_evict(self, cache: MemoryCache):
        for i in range(10):
            await cache.set(f"k{i}", i)
        await cache.set("k5", "updated")
        assert cache.size() == 10
        assert await cache.get("k0") == 0


# ============================================================================
# Composite operations
# ============================================================================


class TestGetOrSet:
    """get_or_set calls the factory only on a miss."""

    @pytest.mark.anyio
    async def test_factory_called_once(self, cache: MemoryCache):
        calls = []

        async def factory():
            calls.append(1)
            return "computed"

        assert await cache.get_or_set("k", factory) == "computed"
        assert await cache.get_or_set("k", factory) == "computed"
        assert len(calls) == 1


class TestBatchAndPattern:
    """mget/mset, wildcard keys and pattern deletion."""

    @pytest.mark.anyio
    async def test_mset_mget(self, cache: MemoryCache):
        await cache.mset({"a": 1, "b": 2})
        assert await cache.mget(["a", "b", "c"]) == {"a": 1, "b": 2, "c": None}

    @pytest.mark.anyio
    async def test_keys_with_wildcard(self, cache: MemoryCache):
        await cache.mset({"coingecko:price:btc": 1, "coingecko:info:btc": 2, "opensea:stats:x": 3})
        assert sorted(await cache.keys("coingecko:*")) == ["coingecko:info:btc", "coingecko:price:btc"]

    @pytest.mark.anyio
    async def test_delete_by_pattern(self, cache: MemoryCache):
        await cache.mset({"twitter:trends:global": 1, "twitter:trends:us": 2, "farcaster:trends": 3})
        assert await cache.delete_by_pattern("twitter:*") == 2
        assert await cache.keys() == ["farcaster:trends"]

    @pytest.mark.anyio
    async def test_clear_and_stats(self, cache: MemoryCache):
        await cache.mset({"a": 1, "b": 2})
        assert cache.stats() == {"size": 2, "maxSize": 10}
        await cache.clear()
        assert cache.size() == 0


class TestLifecycle:
    """start/close manage the sweep task."""

    @pytest.mark.anyio
    async def test_start_and_close(self, cache: MemoryCache):
        await cache.start()
        await cache.set("k", 1)
        await cache.close()
        assert cache.size() == 0


class TestCacheKeys:
    """Key builder formats."""

    def test_price_key_is_lowercased(self):
        assert CacheKeys.token_price("BTC") == "coingecko:price:btc"

    def test_twitter_trends_default_location(self):
        assert CacheKeys.twitter_trends() == "twitter:trends:global"
        assert CacheKeys.twitter_trends("us") == "twitter:trends:us"

    def test_pipeline_key_is_base64(self):
        assert CacheKeys.full_pipeline("solarpunk") == "pipeline:c29sYXJwdW5r"

    def test_taste_key_encodes_keywords(self):
        assert CacheKeys.taste_correlation("music", "a") == "taste_correlation:music:YQ=="
