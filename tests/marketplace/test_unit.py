"""Unit tests for the NFT marketplace adapter."""

import httpx
import pytest  # type: ignore

from internal.marketplace import Config, NewMarketplace
from internal.marketplace.usecase.helpers import (
    display_name,
    normalize_asset,
    normalize_collection,
    normalize_collection_stats,
)
from pkg.cache.cache import MemoryCache
from pkg.defaults.defaults import StrictDefaultsFiller
from pkg.http.http import HttpClient
from pkg.http.type import HttpClientConfig


ADDRESS = "0xabcdef0123456789abcdef0123456789abcd1234"


# ============================================================================
# Test Fixtures & Mocks
# ============================================================================


class FakeOpenSea:
    """Routes OpenSea paths to canned payloads and counts calls."""

    def __init__(self, fail: bool = False, overrides=None) -> None:
        self.fail = fail
        self.overrides = overrides or {}
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        if self.fail:
            return httpx.Response(503, json={"error": "maintenance"})
        if path in self.overrides:
            return httpx.Response(200, json=self.overrides[path])
        if path == "/collections":
            if request.url.params.get("search") == "solar":
                return httpx.Response(
                    200,
                    json={
                        "collections": [
                            {
                                "collection": "solar-punks",
                                "name": "Solar Punks",
                                "description": "Art for a bright future",
                                "safelist_request_status": "verified",
                                "twitter_username": "sp",
                            }
                        ]
                    },
                )
            return httpx.Response(
                200, json={"collections": [{"collection": "random", "name": "Random", "description": "misc"}]}
            )
        if path == "/collections/solar-punks/stats":
            return httpx.Response(
                200, json={"stats": {"one_day_volume": 20000, "one_day_change": 4, "num_owners": 500}}
            )
        if path == "/collections/random/stats":
            return httpx.Response(200, json={"stats": {}})
        if path == "/collections/solar-punks/nfts":
            return httpx.Response(
                200,
                json={
                    "nfts": [
                        {"identifier": "1", "name": "Punk #1", "last_sale": {"total_price": "1000000000000000000"}}
                    ]
                },
            )
        return httpx.Response(404, json={"error": "not found"})


def make_adapter(upstream: FakeOpenSea, cache=None):
    client = HttpClient(
        HttpClientConfig(
            base_url="https://opensea.test",
            service_name="OpenSeaService",
            max_retries=0,
            transport=httpx.MockTransport(upstream),
        )
    )
    return NewMarketplace(Config(), client=client, cache=cache, defaults=StrictDefaultsFiller())


# ============================================================================
# Helpers
# ============================================================================


class TestDisplayName:
    """Readable names for blank or address-like collection names."""

    def test_plain_name(self):
        assert display_name("Cool Cats", "cool-cats", "") == "Cool Cats"

    def test_address_name_uses_slug(self):
        assert display_name(ADDRESS, "cool-cats_club", ADDRESS) == "Cool Cats Club"

    def test_address_only(self):
        assert display_name("", ADDRESS, ADDRESS) == "Collection 0xabcd...1234"

    def test_nothing_known(self):
        assert display_name("", "", "") == "Unknown Collection"


class TestNormalization:
    """Collection, stats and asset payloads."""

    def test_floor_from_average_price(self):
        collection = normalize_collection(
            {"collection": "x", "name": "X", "stats": {"average_price": 1.0}}, StrictDefaultsFiller()
        )
        assert collection.floor_price == pytest.approx(0.8)

    def test_floor_from_volume_over_sales(self):
        collection = normalize_collection(
            {"collection": "x", "stats": {"one_day_volume": 10, "one_day_sales": 5}}, StrictDefaultsFiller()
        )
        assert collection.floor_price == pytest.approx(1.4)

    def test_default_description(self):
        collection = normalize_collection({"collection": "x", "name": "X"}, StrictDefaultsFiller())
        assert collection.description == "X is an NFT collection with unique digital assets."
        assert collection.verification_status == "unverified"

    def test_stats_camel_case(self):
        stats = normalize_collection_stats("x", {"floorPrice": 2.5, "oneDayVolume": 12, "numOwners": 40})
        assert stats.floor_price == 2.5
        assert stats.volume["1d"] == 12
        assert stats.num_owners == 40

    def test_asset_prices_in_eth(self):
        asset = normalize_asset(
            {
                "identifier": 7,
                "last_sale": {"total_price": "2000000000000000000", "payment_token": {"symbol": "WETH"}},
                "orders": [{"current_price": "500000000000000000"}],
            }
        )
        assert asset.name == "#7"
        assert asset.last_sale_price == 2.0
        assert asset.last_sale_currency == "WETH"
        assert asset.current_price == 0.5


# ============================================================================
# Adapter
# ============================================================================


class TestFindRelevantNfts:
    """find_relevant_nfts ranking and top-asset enrichment."""

    @pytest.mark.anyio
    async def test_ranked_with_top_assets(self):
        upstream = FakeOpenSea()
        adapter = make_adapter(upstream)

        matches = await adapter.find_relevant_nfts(["solar"])

        assert [(m.collection.slug, m.relevance_score) for m in matches] == [
            ("solar-punks", 79),
            ("random", 23),
        ]
        assert [a.name for a in matches[0].top_assets] == ["Punk #1"]
        assert matches[1].top_assets == []
        assert upstream.calls.count("/collections/solar-punks/nfts") == 1

    @pytest.mark.anyio
    async def test_upstream_failure_returns_empty(self):
        adapter = make_adapter(FakeOpenSea(fail=True))
        assert await adapter.find_relevant_nfts(["solar"]) == []

    @pytest.mark.anyio
    async def test_without_client(self):
        adapter = NewMarketplace(Config())
        assert await adapter.find_relevant_nfts(["solar"]) == []
        assert await adapter.get_collection("solar-punks") is None


class TestLookups:
    """Single collection lookups."""

    @pytest.mark.anyio
    async def test_stats_cached(self):
        upstream = FakeOpenSea()
        adapter = make_adapter(upstream, cache=MemoryCache())
        first = await adapter.get_collection_stats("solar-punks")
        second = await adapter.get_collection_stats("solar-punks")
        assert first is second
        assert upstream.calls.count("/collections/solar-punks/stats") == 1

    @pytest.mark.anyio
    async def test_invalid_sort_defaults_to_price(self):
        upstream = FakeOpenSea()
        adapter = make_adapter(upstream)
        assets = await adapter.get_collection_assets("solar-punks", sort_by="bogus")
        assert assets[0].token_id == "1"

    @pytest.mark.anyio
    async def test_missing_collection(self):
        adapter = make_adapter(FakeOpenSea())
        assert await adapter.get_collection("ghost") is None


class TestMalformedPayloads:
    """Well-formed HTTP responses whose bodies have the wrong shape."""

    @pytest.mark.anyio
    async def test_collections_as_object(self):
        adapter = make_adapter(FakeOpenSea(overrides={"/collections": {"collections": {"a": 1}}}))
        assert await adapter.search_collections("solar") == []
        assert await adapter.find_relevant_nfts(["solar"]) == []

    @pytest.mark.anyio
    async def test_wrongly_typed_collection_fields(self):
        upstream = FakeOpenSea(
            overrides={
                "/collections": {
                    "collections": [
                        {
                            "collection": 5,
                            "name": ["x"],
                            "primary_asset_contracts": "0x",
                            "stats": "n/a",
                            "created_date": 7,
                        }
                    ]
                }
            }
        )
        adapter = make_adapter(upstream)

        collections = await adapter.search_collections("solar")

        assert [c.name for c in collections] == ["Unknown Collection"]
        assert collections[0].created_date == ""
        assert isinstance(await adapter.find_relevant_nfts(["solar"]), list)

    @pytest.mark.anyio
    async def test_malformed_assets(self):
        upstream = FakeOpenSea(
            overrides={
                "/collections/solar-punks/nfts": {
                    "nfts": [{"identifier": "1", "last_sale": {"total_price": "1", "payment_token": "eth"}}]
                }
            }
        )
        adapter = make_adapter(upstream)

        assert await adapter.get_collection_assets("solar-punks") == []
        matches = await adapter.find_relevant_nfts(["solar"])
        assert matches[0].collection.slug == "solar-punks"
        assert matches[0].top_assets == []
