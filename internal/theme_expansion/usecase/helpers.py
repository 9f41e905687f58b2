"""Parsing helpers for LLM responses."""

import json
import re
from typing import Any, Dict, List

from ..constant import *
from ..type import (
    AssetOpportunity,
    AssetSummary,
    CulturalAnalysis,
    CulturalContext,
    ThemeExpansion,
)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)


def extract_json(content: str) -> Dict[str, Any]:
    """Decode a JSON object, accepting a markdown code fence around it.

    Raises:
        ValueError: content is not a JSON object
    """
    text = (content or "").strip()
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("expected a JSON object")
    return parsed


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


def _number(value: Any, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def parse_theme_expansion(theme: str, content: str) -> ThemeExpansion:
    try:
        parsed = extract_json(content)
    except ValueError:
        return fallback_theme_expansion(theme)

    raw_context = parsed.get("culturalContext")
    if isinstance(raw_context, dict):
        context = CulturalContext(
            description=str(raw_context.get("description") or ""),
            demographics=_str_list(raw_context.get("demographics")),
            platforms=_str_list(raw_context.get("platforms")),
            timeframe=str(raw_context.get("timeframe") or DEFAULT_TIMEFRAME),
        )
    else:
        context = CulturalContext()

    sentiment = parsed.get("sentiment")
    if sentiment not in VALID_SENTIMENTS:
        sentiment = SENTIMENT_NEUTRAL

    confidence = _number(parsed.get("confidence"), DEFAULT_CONFIDENCE) or DEFAULT_CONFIDENCE

    return ThemeExpansion(
        original_theme=theme,
        expanded_keywords=_str_list(parsed.get("expandedKeywords")),
        categories=_str_list(parsed.get("categories")),
        cultural_context=context,
        related_trends=_str_list(parsed.get("relatedTrends")),
        sentiment=sentiment,
        confidence=max(0.0, min(1.0, float(confidence))),
    )


def fallback_theme_expansion(theme: str) -> ThemeExpansion:
    return ThemeExpansion(
        original_theme=theme,
        expanded_keywords=[theme],
        categories=[DEFAULT_CATEGORY],
        cultural_context=CulturalContext(description=FALLBACK_DESCRIPTION),
        related_trends=[],
        sentiment=SENTIMENT_NEUTRAL,
        confidence=FALLBACK_CONFIDENCE,
    )


def parse_cultural_analysis(content: str) -> CulturalAnalysis:
    try:
        parsed = extract_json(content)
    except ValueError:
        return CulturalAnalysis(
            analysis=FALLBACK_ANALYSIS_TEXT,
            cultural_significance=FALLBACK_ANALYSIS_SCORE,
            trend_potential=FALLBACK_ANALYSIS_SCORE,
            risk_factors=[FALLBACK_ANALYSIS_RISK],
            opportunities=[],
        )

    return CulturalAnalysis(
        analysis=str(parsed.get("analysis") or ""),
        cultural_significance=_number(parsed.get("culturalSignificance"), FALLBACK_ANALYSIS_SCORE),
        trend_potential=_number(parsed.get("trendPotential"), FALLBACK_ANALYSIS_SCORE),
        risk_factors=_str_list(parsed.get("riskFactors")),
        opportunities=_str_list(parsed.get("opportunities")),
    )


def parse_asset_summary(content: str) -> AssetSummary:
    try:
        parsed = extract_json(content)
    except ValueError:
        return AssetSummary(summary=FALLBACK_SUMMARY)

    opportunities = []
    for item in parsed.get("topOpportunities") or []:
        if not isinstance(item, dict):
            continue
        opportunities.append(
            AssetOpportunity(
                asset=str(item.get("asset") or ""),
                reasoning=str(item.get("reasoning") or ""),
                score=_number(item.get("score"), 0),
            )
        )

    return AssetSummary(
        summary=str(parsed.get("summary") or ""),
        top_opportunities=opportunities,
        market_timing=str(parsed.get("marketTiming") or FALLBACK_MARKET_TIMING),
        risk_assessment=str(parsed.get("riskAssessment") or FALLBACK_RISK_ASSESSMENT),
    )


__all__ = [
    "extract_json",
    "parse_theme_expansion",
    "fallback_theme_expansion",
    "parse_cultural_analysis",
    "parse_asset_summary",
]
