"""Unit tests for the taste correlation adapter and its fallback tiers."""

import json
from typing import Optional

import httpx
import pytest  # type: ignore

from internal.taste import Config, ErrInvalidInput, NewTaste, TasteProfile
from internal.theme_expansion import CulturalAnalysis
from pkg.cache.cache import MemoryCache
from pkg.http.http import HttpClient
from pkg.http.type import HttpClientConfig


# ============================================================================
# Test Fixtures & Mocks
# ============================================================================


QLOO_REPLY = {
    "recommendations": [
        {
            "name": "Studio Ghibli",
            "category": "film",
            "score": 0.92,
            "confidence": 0.8,
            "explanation": "Nature-forward optimism",
            "demographic_fit": 0.7,
            "cultural_relevance": 0.9,
            "trending_score": 0.4,
        },
        {"title": "Patagonia"},
    ],
    "profile": {
        "keywords": ["solar"],
        "categories": ["fashion"],
        "demographics": {"age_range": "25-34", "interests": ["hiking"]},
    },
    "metadata": {"total_analyzed": 120, "version": "2.1"},
}


def mock_client(handler) -> HttpClient:
    return HttpClient(
        HttpClientConfig(
            base_url="https://qloo.test",
            service_name="QlooService",
            max_retries=0,
            transport=httpx.MockTransport(handler),
        )
    )


def json_handler(payload, status: int = 200, seen: Optional[list] = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append((request.url.path, json.loads(request.content or b"{}")))
        return httpx.Response(status, json=payload)

    return handler


class FakeThemeExpansion:
    """Fake LLM adapter for the AI fallback tier."""

    def __init__(self, configured: bool = True, error: Optional[Exception] = None) -> None:
        self.configured = configured
        self.error = error
        self.calls = 0

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate_cultural_analysis(self, keywords, context=""):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return CulturalAnalysis(
            analysis="solid",
            cultural_significance=80,
            trend_potential=72,
            opportunities=["community solar", "eco fashion"],
        )


# ============================================================================
# Correlations
# ============================================================================


class TestTasteCorrelations:
    """get_taste_correlations through API and fallbacks."""

    @pytest.mark.anyio
    async def test_api_result_normalized(self):
        seen = []
        adapter = NewTaste(Config(), client=mock_client(json_handler(QLOO_REPLY, seen=seen)))

        result = await adapter.get_taste_correlations("solarpunk", ["solar"], ["fashion"], limit=5)

        first, second = result.recommendations
        assert first.item == "Studio Ghibli"
        assert first.relevance_score == 92
        assert first.trending_factor == 40
        assert second.item == "Patagonia"
        assert second.relevance_score == 50
        assert second.category == "general"
        assert result.taste_profile.demographics.age_range == "25-34"
        assert result.metadata.algorithm_version == "2.1"

        path, body = seen[0]
        assert path == "/taste/correlations"
        assert body["query"]["limit"] == 5
        assert body["query"]["categories"] == ["fashion"]

    @pytest.mark.anyio
    async def test_default_categories_sent(self):
        seen = []
        adapter = NewTaste(Config(), client=mock_client(json_handler(QLOO_REPLY, seen=seen)))
        await adapter.get_taste_correlations("solarpunk", ["solar"])
        assert seen[0][1]["query"]["categories"] == ["entertainment", "fashion", "technology", "art"]

    @pytest.mark.anyio
    async def test_api_results_cached(self):
        seen = []
        adapter = NewTaste(
            Config(), client=mock_client(json_handler(QLOO_REPLY, seen=seen)), cache=MemoryCache()
        )
        await adapter.get_taste_correlations("solarpunk", ["solar"])
        await adapter.get_taste_correlations("solarpunk", ["solar"])
        assert len(seen) == 1

    @pytest.mark.anyio
    async def test_api_failure_uses_ai_fallback(self):
        expansion = FakeThemeExpansion()
        adapter = NewTaste(
            Config(),
            client=mock_client(json_handler({"error": "down"}, status=500)),
            theme_expansion=expansion,
            cache=MemoryCache(),
        )

        result = await adapter.get_taste_correlations("solarpunk", ["solar", "green"], ["tech"])

        assert expansion.calls == 1
        assert [r.item for r in result.recommendations] == [
            "community solar",
            "eco fashion",
            "solar culture",
            "green culture",
        ]
        assert result.recommendations[0].relevance_score == 80
        assert result.metadata.algorithm_version == "ai-cultural-analysis-1.0.0"

        # AI results are not cached
        await adapter.get_taste_correlations("solarpunk", ["solar", "green"], ["tech"])
        assert expansion.calls == 2

    @pytest.mark.anyio
    async def test_no_client_no_llm_uses_basic_fallback(self):
        adapter = NewTaste(Config(), theme_expansion=FakeThemeExpansion(configured=False))
        result = await adapter.get_taste_correlations("solarpunk", ["solar", "green", "punk"], ["art"])

        assert [r.item for r in result.recommendations] == ["solar", "green", "punk"]
        assert [r.relevance_score for r in result.recommendations] == [90, 85, 80]
        assert result.metadata.algorithm_version == "basic-fallback-1.0.0"
        assert result.taste_profile.cultural_affinities == ["solarpunk"]

    @pytest.mark.anyio
    async def test_ai_failure_uses_basic_fallback(self):
        adapter = NewTaste(Config(), theme_expansion=FakeThemeExpansion(error=RuntimeError("llm down")))
        result = await adapter.get_taste_correlations("solarpunk", ["solar"])
        assert result.metadata.algorithm_version == "basic-fallback-1.0.0"

    @pytest.mark.anyio
    async def test_empty_theme(self):
        with pytest.raises(ErrInvalidInput):
            await NewTaste(Config()).get_taste_correlations("", ["x"])


# ============================================================================
# Influencers & brands
# ============================================================================


class TestInfluencersAndBrands:
    """Secondary taste lookups."""

    @pytest.mark.anyio
    async def test_influencers(self):
        reply = {
            "influencers": [
                {"username": "sunny", "platform": "twitter", "relevance": 0.8, "followers": 50000}
            ]
        }
        adapter = NewTaste(Config(), client=mock_client(json_handler(reply)))
        result = await adapter.get_influencer_correlations(TasteProfile(keywords=["solar"]))
        assert result.influencers[0].handle == "sunny"
        assert result.influencers[0].relevance_score == 80
        assert result.total_analyzed == 1

    @pytest.mark.anyio
    async def test_influencers_without_client(self):
        result = await NewTaste(Config()).get_influencer_correlations(TasteProfile())
        assert result.influencers == []

    @pytest.mark.anyio
    async def test_brands(self):
        reply = {
            "brands": [
                {
                    "name": "SolarCo",
                    "sector": "energy",
                    "affinity": 0.66,
                    "web_presence": {"nft_activity": True, "social_score": 40},
                }
            ]
        }
        adapter = NewTaste(Config(), client=mock_client(json_handler(reply)))
        result = await adapter.get_brand_affinities(TasteProfile())
        brand = result.brands[0]
        assert brand.affinity_score == 66
        assert brand.has_nfts is True
        assert brand.has_crypto is False

    @pytest.mark.anyio
    async def test_brand_failure_returns_empty(self):
        adapter = NewTaste(Config(), client=mock_client(json_handler({}, status=404)))
        result = await adapter.get_brand_affinities(TasteProfile())
        assert result.brands == []


# ============================================================================
# Malformed payloads
# ============================================================================


class TestMalformedPayloads:
    """Well-formed HTTP responses whose bodies have the wrong shape."""

    @pytest.mark.anyio
    async def test_string_score_treated_as_missing(self):
        reply = {"recommendations": [{"name": "x", "score": "0.9"}]}
        adapter = NewTaste(Config(), client=mock_client(json_handler(reply)))

        result = await adapter.get_taste_correlations("solarpunk", ["solar"])

        assert result.recommendations[0].item == "x"
        assert result.recommendations[0].relevance_score == 50

    @pytest.mark.anyio
    async def test_profile_as_list_ignored(self):
        reply = {"recommendations": [], "profile": ["a"], "metadata": "v2"}
        adapter = NewTaste(Config(), client=mock_client(json_handler(reply)))

        result = await adapter.get_taste_correlations("solarpunk", ["solar"])

        assert result.taste_profile.keywords == []
        assert result.metadata.algorithm_version == "1.0.0"

    @pytest.mark.anyio
    async def test_unusable_body_uses_ai_fallback(self):
        expansion = FakeThemeExpansion()
        adapter = NewTaste(
            Config(),
            client=mock_client(json_handler({"recommendations": 5})),
            theme_expansion=expansion,
            cache=MemoryCache(),
        )

        result = await adapter.get_taste_correlations("solarpunk", ["solar"])

        assert expansion.calls == 1
        assert result.metadata.algorithm_version == "ai-cultural-analysis-1.0.0"

    @pytest.mark.anyio
    async def test_unusable_body_without_llm_uses_basic_fallback(self):
        reply = {"recommendations": [], "profile": {"keywords": 3}}
        adapter = NewTaste(Config(), client=mock_client(json_handler(reply)))

        result = await adapter.get_taste_correlations("solarpunk", ["solar"])

        assert result.metadata.algorithm_version == "basic-fallback-1.0.0"

    @pytest.mark.anyio
    async def test_secondary_lookups_return_empty(self):
        adapter = NewTaste(Config(), client=mock_client(json_handler({"influencers": 7, "brands": 7})))

        assert (await adapter.get_influencer_correlations(TasteProfile())).influencers == []
        assert (await adapter.get_brand_affinities(TasteProfile())).brands == []
