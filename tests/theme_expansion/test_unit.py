"""Unit tests for the theme expansion adapter and its response parsers."""

import json
from typing import List, Optional

import pytest  # type: ignore

from internal.theme_expansion import (
    Config,
    ErrExpansionFailed,
    ErrInvalidInput,
    ErrNotConfigured,
    NewThemeExpansion,
)
from internal.theme_expansion.usecase.helpers import (
    extract_json,
    parse_asset_summary,
    parse_cultural_analysis,
    parse_theme_expansion,
)
from pkg.cache.cache import MemoryCache
from pkg.llm.type import ErrLLMNotConfigured, ErrLLMRequest, LLMResponse


# ============================================================================
# Test Fixtures & Mocks
# ============================================================================


EXPANSION_REPLY = json.dumps(
    {
        "expandedKeywords": ["solar", "renewable", "eco-futurism"],
        "categories": ["technology", "environment"],
        "culturalContext": {
            "description": "Optimistic climate futures",
            "demographics": ["Gen Z"],
            "platforms": ["Twitter"],
            "timeframe": "emerging",
        },
        "relatedTrends": ["regenerative finance"],
        "sentiment": "positive",
        "confidence": 0.85,
    }
)


class FakeLLM:
    """Fake LLM client returning canned replies or raising."""

    def __init__(self, replies: Optional[List[str]] = None, error: Optional[Exception] = None) -> None:
        self.replies = list(replies or [])
        self.error = error
        self.prompts: List[str] = []
        self.kwargs: List[dict] = []

    @property
    def is_configured(self) -> bool:
        return not isinstance(self.error, ErrLLMNotConfigured)

    async def complete(self, prompt, max_tokens=None, temperature=None) -> LLMResponse:
        self.prompts.append(prompt)
        self.kwargs.append({"max_tokens": max_tokens, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.replies.pop(0) if self.replies else "")

    async def close(self) -> None:
        pass


# ============================================================================
# Parsers
# ============================================================================


class TestExtractJson:
    """JSON extraction from raw and fenced replies."""

    def test_plain(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced(self):
        assert extract_json('Here:\n```json\n{"a": 2}\n```') == {"a": 2}

    def test_array_rejected(self):
        with pytest.raises(ValueError):
            extract_json("[1, 2]")

    def test_garbage_rejected(self):
        with pytest.raises(ValueError):
            extract_json("not json")


class TestParseThemeExpansion:
    """Theme expansion parsing and degradation."""

    def test_full_reply(self):
        expansion = parse_theme_expansion("solarpunk", EXPANSION_REPLY)
        assert expansion.original_theme == "solarpunk"
        assert expansion.expanded_keywords == ["solar", "renewable", "eco-futurism"]
        assert expansion.cultural_context.timeframe == "emerging"
        assert expansion.sentiment == "positive"
        assert expansion.confidence == 0.85

    def test_invalid_json_falls_back(self):
        expansion = parse_theme_expansion("solarpunk", "sorry, I cannot help")
        assert expansion.expanded_keywords == ["solarpunk"]
        assert expansion.categories == ["general"]
        assert expansion.confidence == 0.3

    def test_missing_fields_defaulted(self):
        expansion = parse_theme_expansion("x", '{"sentiment": "ecstatic"}')
        assert expansion.expanded_keywords == []
        assert expansion.sentiment == "neutral"
        assert expansion.confidence == 0.5
        assert expansion.cultural_context.timeframe == "unknown"

    def test_confidence_clamped(self):
        assert parse_theme_expansion("x", '{"confidence": 4}').confidence == 1.0


class TestParseOtherReplies:
    """Cultural analysis and asset summary parsing."""

    def test_cultural_analysis_fallback(self):
        analysis = parse_cultural_analysis("oops")
        assert analysis.cultural_significance == 50
        assert analysis.trend_potential == 50
        assert analysis.risk_factors == ["Analysis error"]

    def test_asset_summary(self):
        summary = parse_asset_summary(
            json.dumps(
                {
                    "summary": "Solar assets look strong",
                    "topOpportunities": [{"asset": "KLIMA", "reasoning": "fit", "score": 82}, "junk"],
                    "marketTiming": "Early",
                }
            )
        )
        assert summary.summary == "Solar assets look strong"
        assert [o.asset for o in summary.top_opportunities] == ["KLIMA"]
        assert summary.market_timing == "Early"
        assert summary.risk_assessment == "Analysis error occurred"

    def test_asset_summary_fallback(self):
        assert parse_asset_summary("").summary == "Summary generation failed"


# ============================================================================
# Adapter
# ============================================================================


class TestExpandTheme:
    """expand_theme behavior with a fake LLM."""

    @pytest.mark.anyio
    async def test_expands_and_caches(self):
        llm = FakeLLM([EXPANSION_REPLY])
        cache = MemoryCache()
        adapter = NewThemeExpansion(Config(), llm=llm, cache=cache)

        first = await adapter.expand_theme("solarpunk")
        second = await adapter.expand_theme("solarpunk")

        assert first.expanded_keywords == ["solar", "renewable", "eco-futurism"]
        assert second is first
        assert len(llm.prompts) == 1
        assert "solarpunk" in llm.prompts[0]
        assert llm.kwargs[0]["max_tokens"] == 4000

    @pytest.mark.anyio
    async def test_cache_bypass(self):
        llm = FakeLLM([EXPANSION_REPLY, EXPANSION_REPLY])
        adapter = NewThemeExpansion(Config(), llm=llm, cache=MemoryCache())
        await adapter.expand_theme("solarpunk", use_cache=False)
        await adapter.expand_theme("solarpunk", use_cache=False)
        assert len(llm.prompts) == 2

    @pytest.mark.anyio
    async def test_empty_theme(self):
        adapter = NewThemeExpansion(Config(), llm=FakeLLM())
        with pytest.raises(ErrInvalidInput):
            await adapter.expand_theme("   ")

    @pytest.mark.anyio
    async def test_not_configured(self):
        adapter = NewThemeExpansion(Config(), llm=FakeLLM(error=ErrLLMNotConfigured()))
        assert adapter.is_configured is False
        with pytest.raises(ErrNotConfigured):
            await adapter.expand_theme("solarpunk")

    @pytest.mark.anyio
    async def test_request_failure(self):
        adapter = NewThemeExpansion(Config(), llm=FakeLLM(error=ErrLLMRequest("boom")))
        with pytest.raises(ErrExpansionFailed):
            await adapter.expand_theme("solarpunk")

    @pytest.mark.anyio
    async def test_non_json_reply_degrades(self):
        adapter = NewThemeExpansion(Config(), llm=FakeLLM(["plain prose"]))
        expansion = await adapter.expand_theme("vaporwave")
        assert expansion.expanded_keywords == ["vaporwave"]
        assert expansion.confidence == 0.3

    @pytest.mark.anyio
    async def test_cultural_analysis_requires_keywords(self):
        adapter = NewThemeExpansion(Config(), llm=FakeLLM())
        with pytest.raises(ErrInvalidInput):
            await adapter.generate_cultural_analysis([])

    @pytest.mark.anyio
    async def test_summarize_embeds_assets(self):
        llm = FakeLLM(['{"summary": "ok"}'])
        adapter = NewThemeExpansion(Config(), llm=llm)
        summary = await adapter.summarize_asset_opportunities([{"name": "KLIMA"}], "solarpunk")
        assert summary.summary == "ok"
        assert "KLIMA" in llm.prompts[0]
        assert llm.kwargs[0]["max_tokens"] == 1500


class TestNew:
    def test_rejects_bad_config(self):
        with pytest.raises(ValueError):
            NewThemeExpansion({"max_tokens": 1}, llm=FakeLLM())  # type: ignore[arg-type]
