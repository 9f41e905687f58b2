from dataclasses import dataclass, field
from typing import Any, Dict, List

from internal.scoring.type import ScoredAsset
from internal.social.type import SocialTrendAnalysis
from internal.taste.type import TasteRecommendation
from internal.theme_expansion.type import ThemeExpansion

from .constant import *


@dataclass
class Config:
    """Pipeline configuration.

    Attributes:
        result_ttl: Seconds a successful TrendResult stays cached
        failure_ttl: Seconds a failed TrendResult stays cached
    """

    result_ttl: int = 1800
    failure_ttl: int = 300

    def __post_init__(self):
        if self.result_ttl <= 0 or self.failure_ttl <= 0:
            raise ValueError("pipeline TTLs must be positive")


@dataclass
class PipelineOptions:
    use_cache: bool = True
    max_assets: int = DEFAULT_MAX_ASSETS
    include_nfts: bool = True
    include_tokens: bool = True
    risk_tolerance: str = RISK_TOLERANCE_MEDIUM
    time_horizon: str = TIME_HORIZON_MEDIUM
    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    enable_parallel_processing: bool = True

    def __post_init__(self):
        if self.risk_tolerance not in RISK_TOLERANCES:
            raise ValueError(f"risk_tolerance must be one of {RISK_TOLERANCES}")
        if self.time_horizon not in TIME_HORIZONS:
            raise ValueError(f"time_horizon must be one of {TIME_HORIZONS}")
        if self.max_assets < 0:
            raise ValueError("max_assets must be non-negative")


@dataclass
class ProcessingInfo:
    total_time: int = 0
    api_calls: int = 0
    cached: int = 0
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalTime": self.total_time,
            "apiCalls": self.api_calls,
            "cached": self.cached,
            "errors": list(self.errors),
        }


@dataclass
class Recommendations:
    summary: str
    top_assets: List[ScoredAsset] = field(default_factory=list)
    market_timing: str = ""
    risk_assessment: str = ""
    action_items: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "topAssets": [a.to_dict() for a in self.top_assets],
            "marketTiming": self.market_timing,
            "riskAssessment": self.risk_assessment,
            "actionItems": list(self.action_items),
        }


@dataclass
class ResultMetadata:
    generated_at: str
    expires_at: str
    version: str = PIPELINE_VERSION
    pipeline: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedAt": self.generated_at,
            "expiresAt": self.expires_at,
            "version": self.version,
            "pipeline": list(self.pipeline),
        }


@dataclass
class TrendResult:
    """Everything one pipeline run produced for a vibe."""

    original_vibe: str
    theme_expansion: ThemeExpansion
    taste_profile: TasteRecommendation
    social_analysis: Dict[str, SocialTrendAnalysis]
    asset_matches: List[ScoredAsset]
    overall_score: float
    confidence: float
    processing: ProcessingInfo
    recommendations: Recommendations
    metadata: ResultMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalVibe": self.original_vibe,
            "themeExpansion": self.theme_expansion.to_dict(),
            "tasteProfile": self.taste_profile.to_dict(),
            "socialAnalysis": {k: v.to_dict() for k, v in self.social_analysis.items()},
            "assetMatches": [a.to_dict() for a in self.asset_matches],
            "overallScore": self.overall_score,
            "confidence": self.confidence,
            "processing": self.processing.to_dict(),
            "recommendations": self.recommendations.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


__all__ = [
    "Config",
    "PipelineOptions",
    "ProcessingInfo",
    "Recommendations",
    "ResultMetadata",
    "TrendResult",
]
