"""Unit tests for the token market-data adapter."""

import httpx
import pytest  # type: ignore

from internal.market_data import Config, NewMarketData
from internal.market_data.usecase.helpers import create_token_match, normalize_token_info
from internal.market_data.type import TokenInfo
from pkg.cache.cache import MemoryCache
from pkg.defaults.defaults import RandomDefaultsFiller, StrictDefaultsFiller
from pkg.http.http import HttpClient
from pkg.http.type import HttpClientConfig


# ============================================================================
# Test Fixtures & Mocks
# ============================================================================


COINS = {
    "solar-coin": {
        "id": "solar-coin",
        "symbol": "slr",
        "name": "Solar Coin",
        "market_data": {
            "current_price": {"usd": 2.0},
            "total_volume": {"usd": 5_000_000},
            "market_cap": {"usd": 200_000_000},
            "price_change_percentage_24h": 4.0,
        },
    },
    "meme": {"id": "meme", "symbol": "meme", "name": "Meme", "market_data": {}},
}


class FakeCoinGecko:
    """Routes CoinGecko paths to canned payloads and counts calls."""

    def __init__(self, fail: bool = False, overrides=None) -> None:
        self.fail = fail
        self.overrides = overrides or {}
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        if self.fail:
            return httpx.Response(500, json={"error": "upstream down"})
        if path in self.overrides:
            return httpx.Response(200, json=self.overrides[path])
        if path == "/search/trending":
            return httpx.Response(
                200,
                json={"coins": [{"item": {"id": "solar-coin", "score": 3}}, {"item": {"id": "meme", "score": 1}}]},
            )
        if path == "/search":
            return httpx.Response(
                200, json={"coins": [{"id": "solar-coin", "name": "Solar Coin", "symbol": "slr"}]}
            )
        if path == "/simple/price":
            return httpx.Response(200, json={"solar-coin": {"usd": 2.5}})
        if path.startswith("/coins/"):
            coin = COINS.get(path.rsplit("/", 1)[-1])
            if coin is None:
                return httpx.Response(404, json={"error": "coin not found"})
            return httpx.Response(200, json=coin)
        return httpx.Response(404)


def make_adapter(upstream: FakeCoinGecko, cache=None):
    client = HttpClient(
        HttpClientConfig(
            base_url="https://coingecko.test",
            service_name="CoinGeckoService",
            max_retries=0,
            transport=httpx.MockTransport(upstream),
        )
    )
    return NewMarketData(Config(), client=client, cache=cache, defaults=StrictDefaultsFiller())


# ============================================================================
# Helpers
# ============================================================================


class TestNormalizeTokenInfo:
    """Token payload normalisation and price imputation."""

    def test_reported_price_kept(self):
        info = normalize_token_info(COINS["solar-coin"], StrictDefaultsFiller())
        assert info.symbol == "SLR"
        assert info.current_price == 2.0
        assert info.price_imputed is False

    def test_price_from_market_cap_over_supply(self):
        info = normalize_token_info(
            {"id": "x", "market_data": {"market_cap": {"usd": 1000}, "circulating_supply": 100}},
            StrictDefaultsFiller(),
        )
        assert info.current_price == 10
        assert info.price_imputed is True

    def test_filler_used_without_supply(self):
        info = normalize_token_info(
            {"id": "x", "market_data": {"market_cap": {"usd": 5_000_000_000}}}, RandomDefaultsFiller(seed=1)
        )
        assert 10 <= info.current_price <= 1000
        assert info.price_imputed is True


class TestCreateTokenMatch:
    """Relevance heuristics for a token against keywords."""

    def test_keyword_match(self):
        info = normalize_token_info(COINS["solar-coin"], StrictDefaultsFiller())
        match = create_token_match(info, "solar", ["solar"], 0)
        assert match.relevance_score == 64
        assert match.market_metrics.liquidity_score == 50
        assert match.cultural_alignment.narrative_match == 50
        assert match.reasoning.startswith('Direct match with keyword "solar"')

    def test_no_signal(self):
        match = create_token_match(TokenInfo(id="m", symbol="M", name="M"), "", ["solar"], 0)
        assert match.relevance_score == 8
        assert match.reasoning == "General market correlation detected"

    def test_momentum_capped(self):
        info = TokenInfo(id="p", symbol="P", name="Pump", price_change_percent_24h=60.0)
        match = create_token_match(info, "", ["solar"], 0)
        assert match.market_metrics.momentum_score == 100
        assert match.market_metrics.volatility_score == 100

    def test_momentum_just_below_cap(self):
        info = TokenInfo(id="p", symbol="P", name="Pump", price_change_percent_24h=30.0)
        match = create_token_match(info, "", ["solar"], 0)
        assert match.market_metrics.momentum_score == 90


# ============================================================================
# Adapter
# ============================================================================


class TestFindRelevantTokens:
    """find_relevant_tokens ranking, dedupe and failure handling."""

    @pytest.mark.anyio
    async def test_keyword_hit_kept_weak_trending_dropped(self):
        adapter = make_adapter(FakeCoinGecko())
        matches = await adapter.find_relevant_tokens(["solar"])
        assert [m.token.id for m in matches] == ["solar-coin"]
        assert matches[0].relevance_score == 64

    @pytest.mark.anyio
    async def test_limit(self):
        adapter = make_adapter(FakeCoinGecko())
        assert await adapter.find_relevant_tokens(["solar"], limit=0) == []

    @pytest.mark.anyio
    async def test_upstream_failure_returns_empty(self):
        adapter = make_adapter(FakeCoinGecko(fail=True))
        assert await adapter.find_relevant_tokens(["solar", "energy"]) == []

    @pytest.mark.anyio
    async def test_without_client(self):
        adapter = NewMarketData(Config())
        assert await adapter.find_relevant_tokens(["solar"]) == []
        assert await adapter.get_trending_tokens() == []
        assert await adapter.get_token_price("solar-coin") is None


class TestLookups:
    """Single token lookups and caching."""

    @pytest.mark.anyio
    async def test_token_price_cached(self):
        upstream = FakeCoinGecko()
        adapter = make_adapter(upstream, cache=MemoryCache())
        assert await adapter.get_token_price("solar-coin") == 2.5
        assert await adapter.get_token_price("solar-coin") == 2.5
        assert upstream.calls.count("/simple/price") == 1

    @pytest.mark.anyio
    async def test_token_info_missing(self):
        adapter = make_adapter(FakeCoinGecko())
        assert await adapter.get_token_info("nope") is None

    @pytest.mark.anyio
    async def test_trending_normalized(self):
        adapter = make_adapter(FakeCoinGecko())
        trending = await adapter.get_trending_tokens()
        assert [(t.id, t.score) for t in trending] == [("solar-coin", 3), ("meme", 1)]

    @pytest.mark.anyio
    async def test_search_tokens(self):
        adapter = make_adapter(FakeCoinGecko())
        results = await adapter.search_tokens("solar")
        assert results[0].id == "solar-coin"
        assert results[0].market_cap_rank == 999999


class TestMalformedPayloads:
    """Well-formed HTTP responses whose bodies have the wrong shape."""

    @pytest.mark.anyio
    async def test_search_coins_as_object(self):
        adapter = make_adapter(FakeCoinGecko(overrides={"/search": {"coins": {"a": 1}}}))
        assert await adapter.search_tokens("solar") == []
        matches = await adapter.find_relevant_tokens(["solar"])
        assert isinstance(matches, list)

    @pytest.mark.anyio
    async def test_market_data_as_string(self):
        upstream = FakeCoinGecko(
            overrides={"/coins/solar-coin": {"id": "solar-coin", "name": "Solar Coin", "market_data": "oops"}}
        )
        adapter = make_adapter(upstream)

        info = await adapter.get_token_info("solar-coin")
        assert info is not None
        assert info.market_cap == 0
        assert info.price_imputed is True
        assert isinstance(await adapter.find_relevant_tokens(["solar"]), list)

    @pytest.mark.anyio
    async def test_wrongly_typed_fields(self):
        upstream = FakeCoinGecko(
            overrides={
                "/coins/solar-coin": {"id": "solar-coin", "name": 7, "symbol": ["slr"], "market_data": {"market_cap": "big"}},
                "/search/trending": {"coins": "none"},
            }
        )
        adapter = make_adapter(upstream)

        info = await adapter.get_token_info("solar-coin")
        assert (info.name, info.symbol, info.market_cap) == ("", "", 0)
        assert await adapter.get_trending_tokens() == []
        assert isinstance(await adapter.find_relevant_tokens(["solar"]), list)
