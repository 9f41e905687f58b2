from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class Config:
    """Configuration for the theme expansion adapter.

    Attributes:
        max_tokens: Completion budget for theme expansion
        temperature: Sampling temperature, None keeps the client default
        cache_ttl: TTL class for cached expansions
    """

    max_tokens: int = 4000
    temperature: Optional[float] = None
    cache_ttl: str = "medium"

    def __post_init__(self):
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if self.temperature is not None and not 0 <= self.temperature <= 2:
            raise ValueError("temperature must be between 0 and 2")


@dataclass
class CulturalContext:
    description: str = ""
    demographics: List[str] = field(default_factory=list)
    platforms: List[str] = field(default_factory=list)
    timeframe: str = DEFAULT_TIMEFRAME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "demographics": list(self.demographics),
            "platforms": list(self.platforms),
            "timeframe": self.timeframe,
        }


@dataclass
class ThemeExpansion:
    """Keywords, categories and context derived from one free-text theme."""

    original_theme: str
    expanded_keywords: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    cultural_context: CulturalContext = field(default_factory=CulturalContext)
    related_trends: List[str] = field(default_factory=list)
    sentiment: str = SENTIMENT_NEUTRAL
    confidence: float = DEFAULT_CONFIDENCE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalTheme": self.original_theme,
            "expandedKeywords": list(self.expanded_keywords),
            "categories": list(self.categories),
            "culturalContext": self.cultural_context.to_dict(),
            "relatedTrends": list(self.related_trends),
            "sentiment": self.sentiment,
            "confidence": self.confidence,
        }


@dataclass
class CulturalAnalysis:
    analysis: str
    cultural_significance: float
    trend_potential: float
    risk_factors: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysis": self.analysis,
            "culturalSignificance": self.cultural_significance,
            "trendPotential": self.trend_potential,
            "riskFactors": list(self.risk_factors),
            "opportunities": list(self.opportunities),
        }


@dataclass
class AssetOpportunity:
    asset: str
    reasoning: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"asset": self.asset, "reasoning": self.reasoning, "score": self.score}


@dataclass
class AssetSummary:
    summary: str
    top_opportunities: List[AssetOpportunity] = field(default_factory=list)
    market_timing: str = FALLBACK_MARKET_TIMING
    risk_assessment: str = FALLBACK_RISK_ASSESSMENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "topOpportunities": [o.to_dict() for o in self.top_opportunities],
            "marketTiming": self.market_timing,
            "riskAssessment": self.risk_assessment,
        }


__all__ = [
    "Config",
    "CulturalContext",
    "ThemeExpansion",
    "CulturalAnalysis",
    "AssetOpportunity",
    "AssetSummary",
]
