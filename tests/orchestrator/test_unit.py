"""Unit tests for the cultural arbitrage pipeline.

The adapters are replaced with fakes so each test controls exactly which
branch fails. Scoring runs for real against a fixed clock.
"""

from datetime import datetime, timezone
from typing import List, Optional, Set

import pytest  # type: ignore

from internal.market_data.type import TokenCulturalAlignment, TokenInfo, TokenMarketMetrics, TokenMatch
from internal.orchestrator import Config, NewOrchestrator, PipelineOptions
from internal.orchestrator.constant import (
    ALWAYS_ACTIONS,
    FAILED_CONFIDENCE,
    FAILED_SUMMARY,
    FALLBACK_ACTION_ITEMS,
)
from internal.marketplace.usecase.helpers import create_nft_match, normalize_collection, normalize_collection_stats
from internal.orchestrator.usecase.helpers import collection_asset, overall_confidence, overall_score
from internal.scoring import ScoringContext
from internal.orchestrator.usecase.orchestrator import OrchestratorUseCase
from internal.scoring.usecase.scorer import Scorer
from internal.social.type import FarcasterAnalysis, SocialTrendAnalysis, TwitterAnalysis
from internal.taste.type import TasteRecommendation
from internal.theme_expansion.errors import ErrNotConfigured
from internal.theme_expansion.type import AssetSummary, ThemeExpansion
from pkg.cache.cache import MemoryCache
from pkg.defaults.defaults import StrictDefaultsFiller

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

ALL_STAGES = [
    "theme_expansion",
    "taste_correlation",
    "social_analysis",
    "asset_discovery",
    "scoring_filtering",
    "ai_summary",
]


# ============================================================================
# Test Fixtures & Fakes
# ============================================================================


class FakeThemeExpansion:
    """Returns a fixed expansion and summary, or raises."""

    def __init__(self, error: Optional[Exception] = None, summary_error: Optional[Exception] = None):
        self.error = error
        self.summary_error = summary_error
        self.expand_calls = 0
        self.summarized: List[dict] = []

    @property
    def is_configured(self) -> bool:
        return self.error is None

    async def expand_theme(self, theme, use_cache=True):
        self.expand_calls += 1
        if self.error is not None:
            raise self.error
        return ThemeExpansion(
            original_theme=theme,
            expanded_keywords=["solar", "eco", "green", "renewable"],
            categories=["sustainability", "technology"],
            confidence=0.8,
        )

    async def generate_cultural_analysis(self, theme, keywords):
        raise NotImplementedError

    async def summarize_asset_opportunities(self, assets, theme):
        if self.summary_error is not None:
            raise self.summary_error
        self.summarized = assets
        return AssetSummary(summary="Solar assets are rising", market_timing="Early", risk_assessment="Moderate")


class FakeTaste:
    async def get_taste_correlations(self, theme, keywords, categories=None, use_cache=True):
        return TasteRecommendation()

    async def get_influencer_correlations(self, theme, limit=10):
        raise NotImplementedError

    async def get_brand_affinities(self, theme, limit=10):
        raise NotImplementedError


class FakeSocial:
    """Analyses every keyword except those listed in ``failing``."""

    def __init__(self, failing: Optional[Set[str]] = None):
        self.failing = failing or set()
        self.analyzed: List[str] = []

    async def analyze_social_trend(self, keyword):
        self.analyzed.append(keyword)
        if keyword in self.failing:
            raise RuntimeError(f"provider down for {keyword}")
        return SocialTrendAnalysis(
            keyword=keyword,
            twitter=TwitterAnalysis(mention_count=4, sentiment_score=0.5),
            farcaster=FarcasterAnalysis(cast_count=2, engagement_score=3.0),
            overall_score=40,
            momentum="rising",
            cultural_relevance=30,
            viral_potential=25,
        )


def make_match(index: int) -> TokenMatch:
    raw = {
        "id": f"solar-{index}",
        "symbol": f"sol{index}",
        "name": f"Solar {index}",
        "description": {"en": "A solarpunk renewable energy token"},
        "categories": ["energy"],
        "links": {"homepage": ["https://solar.example"], "twitter_screen_name": "solar"},
        "market_data": {
            "current_price": {"usd": 1.0 + index},
            "market_cap": {"usd": 50_000_000 + index * 1_000_000},
            "total_volume": {"usd": 1_000_000 * (index + 1)},
            "price_change_percentage_24h": float(index),
        },
    }
    token = TokenInfo(
        id=raw["id"],
        symbol=raw["symbol"],
        name=raw["name"],
        current_price=1.0 + index,
        market_cap=raw["market_data"]["market_cap"]["usd"],
        raw=raw,
    )
    return TokenMatch(
        token=token,
        relevance_score=60,
        market_metrics=TokenMarketMetrics(50, 20, 10, 50),
        cultural_alignment=TokenCulturalAlignment(social_mentions=0, trending_score=0, narrative_match=60),
        reasoning="Matches keywords: solar",
    )


class FakeMarketData:
    def __init__(self, count: int = 8, error: Optional[Exception] = None):
        self.count = count
        self.error = error

    async def find_relevant_tokens(self, keywords, limit=20):
        if self.error is not None:
            raise self.error
        return [make_match(i) for i in range(min(self.count, limit))]


class FakeMarketplace:
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls = 0

    async def find_relevant_nfts(self, keywords, limit=15):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return []


def make_orchestrator(
    theme_expansion=None,
    social=None,
    market_data=None,
    marketplace=None,
    cache=None,
) -> OrchestratorUseCase:
    return OrchestratorUseCase(
        config=Config(result_ttl=1800, failure_ttl=300),
        theme_expansion=theme_expansion or FakeThemeExpansion(),
        taste=FakeTaste(),
        social=social or FakeSocial(),
        market_data=market_data or FakeMarketData(),
        marketplace=marketplace or FakeMarketplace(),
        scorer=Scorer(clock=lambda: NOW),
        cache=cache,
        clock=lambda: NOW,
    )


# ============================================================================
# Factory
# ============================================================================


class TestNew:
    def test_missing_collaborator_rejected(self):
        with pytest.raises(ValueError, match="taste"):
            NewOrchestrator(
                Config(),
                theme_expansion=FakeThemeExpansion(),
                taste=None,
                social=FakeSocial(),
                market_data=FakeMarketData(),
                marketplace=FakeMarketplace(),
                scorer=Scorer(),
            )

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            NewOrchestrator(
                {},
                theme_expansion=FakeThemeExpansion(),
                taste=FakeTaste(),
                social=FakeSocial(),
                market_data=FakeMarketData(),
                marketplace=FakeMarketplace(),
                scorer=Scorer(),
            )


# ============================================================================
# Full pipeline
# ============================================================================


class TestProcessFullPipeline:
    """Ordering, fan-out and failure isolation of a pipeline run."""

    @pytest.mark.anyio
    async def test_tokens_only_run_is_sorted_and_capped(self):
        marketplace = FakeMarketplace()
        orchestrator = make_orchestrator(marketplace=marketplace)

        result = await orchestrator.process_full_pipeline(
            "solarpunk", PipelineOptions(include_nfts=False, max_assets=5, use_cache=False)
        )

        assert marketplace.calls == 0
        assert 0 < len(result.asset_matches) <= 5
        assert all(a.type == "token" for a in result.asset_matches)
        assert all(a.scores.confidence >= 0.3 for a in result.asset_matches)
        relevances = [a.scores.relevance for a in result.asset_matches]
        assert relevances == sorted(relevances, reverse=True)
        assert result.metadata.pipeline == ALL_STAGES
        assert result.processing.errors == []

    @pytest.mark.anyio
    async def test_api_call_accounting(self):
        orchestrator = make_orchestrator()

        result = await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        # expansion + taste + 4 social keywords + 2 branches * 3 + summary
        assert result.processing.api_calls == 1 + 1 + 4 + 6 + 1

    @pytest.mark.anyio
    async def test_social_fans_out_over_vibe_and_three_keywords(self):
        social = FakeSocial()
        orchestrator = make_orchestrator(social=social)

        result = await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        assert sorted(social.analyzed) == ["eco", "green", "solar", "solarpunk"]
        assert set(result.social_analysis) == {"solarpunk", "solar", "eco", "green"}

    @pytest.mark.anyio
    @pytest.mark.parametrize("parallel", [True, False])
    async def test_partial_social_failure_is_recorded(self, parallel):
        orchestrator = make_orchestrator(social=FakeSocial(failing={"eco", "green"}))

        result = await orchestrator.process_full_pipeline(
            "solarpunk", PipelineOptions(use_cache=False, enable_parallel_processing=parallel)
        )

        assert set(result.social_analysis) == {"solarpunk", "solar"}
        assert len(result.processing.errors) == 2
        assert "Social analysis failed for keyword eco: provider down for eco" in result.processing.errors
        assert result.metadata.pipeline == ALL_STAGES

    @pytest.mark.anyio
    async def test_failing_market_branch_still_completes(self):
        orchestrator = make_orchestrator(market_data=FakeMarketData(error=RuntimeError("coingecko down")))

        result = await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        assert result.asset_matches == []
        assert result.processing.errors == ["Asset discovery failed for tokens: coingecko down"]
        assert result.metadata.pipeline == ALL_STAGES
        assert result.overall_score == 0
        assert result.recommendations.summary == "Solar assets are rising"

    @pytest.mark.anyio
    async def test_theme_expansion_failure_gives_failed_result(self):
        orchestrator = make_orchestrator(theme_expansion=FakeThemeExpansion(error=ErrNotConfigured("no LLM")))

        result = await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        assert result.theme_expansion.confidence == FAILED_CONFIDENCE
        assert result.theme_expansion.expanded_keywords == ["solarpunk"]
        assert result.recommendations.summary == FAILED_SUMMARY
        assert result.processing.errors[0] == "no LLM"
        assert result.metadata.pipeline == ["theme_expansion"]
        assert result.overall_score == 0
        assert result.confidence == 0
        assert result.metadata.expires_at == "2025-06-01T12:05:00+00:00"

    @pytest.mark.anyio
    async def test_summary_failure_uses_fallback_recommendations(self):
        orchestrator = make_orchestrator(theme_expansion=FakeThemeExpansion(summary_error=RuntimeError("LLM timeout")))

        result = await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        recs = result.recommendations
        assert recs.summary.startswith('Analysis of "solarpunk" reveals')
        assert "sustainability, technology" in recs.summary
        assert recs.action_items == list(FALLBACK_ACTION_ITEMS)
        assert len(recs.top_assets) <= 5
        assert result.processing.errors == []

    @pytest.mark.anyio
    async def test_summary_success_builds_action_items(self):
        theme = FakeThemeExpansion()
        orchestrator = make_orchestrator(theme_expansion=theme)

        result = await orchestrator.process_full_pipeline(
            "solarpunk", PipelineOptions(use_cache=False, time_horizon="short")
        )

        items = result.recommendations.action_items
        assert items[0].startswith(f"Research {result.asset_matches[0].name} further")
        assert items[1].startswith("Monitor rising trends:")
        assert "Set tight stop-losses for short-term positions" in items
        assert items[-2:] == list(ALWAYS_ACTIONS)
        assert len(theme.summarized) == len(result.asset_matches)
        assert result.metadata.expires_at == "2025-06-01T12:30:00+00:00"


# ============================================================================
# Caching
# ============================================================================


class TestPipelineCache:
    @pytest.mark.anyio
    async def test_cache_hit_increments_cached(self):
        theme = FakeThemeExpansion()
        orchestrator = make_orchestrator(theme_expansion=theme, cache=MemoryCache())

        first = await orchestrator.process_full_pipeline("solarpunk")
        second = await orchestrator.process_full_pipeline("solarpunk")

        assert theme.expand_calls == 1
        assert first.processing.cached == 0
        assert second.processing.cached == 1
        assert second.asset_matches == first.asset_matches

    @pytest.mark.anyio
    async def test_use_cache_false_bypasses_cache(self):
        theme = FakeThemeExpansion()
        cache = MemoryCache()
        orchestrator = make_orchestrator(theme_expansion=theme, cache=cache)

        await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))
        await orchestrator.process_full_pipeline("solarpunk", PipelineOptions(use_cache=False))

        assert theme.expand_calls == 2
        assert cache.size() == 0

    @pytest.mark.anyio
    async def test_failed_result_is_cached(self):
        theme = FakeThemeExpansion(error=RuntimeError("boom"))
        orchestrator = make_orchestrator(theme_expansion=theme, cache=MemoryCache())

        await orchestrator.process_full_pipeline("solarpunk")
        again = await orchestrator.process_full_pipeline("solarpunk")

        assert theme.expand_calls == 1
        assert again.recommendations.summary == FAILED_SUMMARY
        assert again.processing.cached == 1


# ============================================================================
# Overall metrics
# ============================================================================


class TestOverallMetrics:
    def test_overall_score_empty(self):
        assert overall_score([], {}) == 0

    def test_overall_confidence_defaults(self):
        expansion = ThemeExpansion(original_theme="x", confidence=0.8)
        # 0.8 * 0.4 + 0.3 * 0.4 + 0.4 * 0.2
        assert overall_confidence(expansion, [], {}) == 0.52


class TestCollectionAsset:
    """Filled-in collection values flowing into scoring."""

    def _risk_factors(self, defaults) -> List[str]:
        collection = normalize_collection({"collection": "dusk", "name": "Dusk"}, defaults, now=NOW)
        stats = normalize_collection_stats("dusk", {"stats": {}})
        asset = collection_asset(create_nft_match(collection, stats, "", ["dusk"]))
        scored = Scorer(clock=lambda: NOW).score_asset(asset, ScoringContext(keywords=["dusk"], theme="dusk"))
        return scored.scores.risk.factors

    def test_strict_collection_without_date_has_no_age_risk(self):
        assert "Very new asset" not in self._risk_factors(StrictDefaultsFiller())

    def test_strict_collection_keeps_date_unset(self):
        collection = normalize_collection({"collection": "dusk"}, StrictDefaultsFiller(), now=NOW)
        assert collection.created_date == ""
        assert collection_asset(
            create_nft_match(collection, normalize_collection_stats("dusk", {}), "", [])
        ).metadata.created_date is None
