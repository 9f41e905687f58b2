from dataclasses import dataclass, field
from typing import Any, Dict, List

from .constant import *


@dataclass
class Config:
    """Configuration for the taste adapter."""

    cache_ttl: str = "medium"
    default_limit: int = DEFAULT_LIMIT

    def __post_init__(self):
        if self.default_limit <= 0:
            raise ValueError("default_limit must be positive")


@dataclass
class TasteCorrelation:
    item: str
    category: str
    relevance_score: float
    confidence_level: float
    reasoning: str
    demographic_match: float
    cultural_alignment: float
    trending_factor: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item": self.item,
            "category": self.category,
            "relevanceScore": self.relevance_score,
            "confidenceLevel": self.confidence_level,
            "reasoning": self.reasoning,
            "demographicMatch": self.demographic_match,
            "culturalAlignment": self.cultural_alignment,
            "trendingFactor": self.trending_factor,
        }


@dataclass
class Demographics:
    age_range: str = DEFAULT_AGE_RANGE
    interests: List[str] = field(default_factory=list)
    behaviors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ageRange": self.age_range,
            "interests": list(self.interests),
            "behaviors": list(self.behaviors),
        }


@dataclass
class TasteProfile:
    keywords: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    demographics: Demographics = field(default_factory=Demographics)
    cultural_affinities: List[str] = field(default_factory=list)
    brand_affinities: List[str] = field(default_factory=list)
    content_preferences: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": list(self.keywords),
            "categories": list(self.categories),
            "demographics": self.demographics.to_dict(),
            "culturalAffinities": list(self.cultural_affinities),
            "brandAffinities": list(self.brand_affinities),
            "contentPreferences": list(self.content_preferences),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TasteProfile":
        demo = data.get("demographics") or {}
        return cls(
            keywords=list(data.get("keywords") or []),
            categories=list(data.get("categories") or []),
            demographics=Demographics(
                age_range=demo.get("ageRange") or DEFAULT_AGE_RANGE,
                interests=list(demo.get("interests") or []),
                behaviors=list(demo.get("behaviors") or []),
            ),
            cultural_affinities=list(data.get("culturalAffinities") or []),
            brand_affinities=list(data.get("brandAffinities") or []),
            content_preferences=list(data.get("contentPreferences") or []),
        )


@dataclass
class TasteMetadata:
    total_analyzed: int = 0
    processing_time: float = 0
    algorithm_version: str = DEFAULT_ALGORITHM_VERSION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAnalyzed": self.total_analyzed,
            "processingTime": self.processing_time,
            "algorithmVersion": self.algorithm_version,
        }


@dataclass
class TasteRecommendation:
    """Correlations plus the taste profile they were derived from."""

    recommendations: List[TasteCorrelation] = field(default_factory=list)
    taste_profile: TasteProfile = field(default_factory=TasteProfile)
    metadata: TasteMetadata = field(default_factory=TasteMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recommendations": [r.to_dict() for r in self.recommendations],
            "tasteProfile": self.taste_profile.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


@dataclass
class Influencer:
    handle: str
    platform: str
    relevance_score: float
    follower_count: int
    engagement_rate: float
    cultural_alignment: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "handle": self.handle,
            "platform": self.platform,
            "relevanceScore": self.relevance_score,
            "followerCount": self.follower_count,
            "engagementRate": self.engagement_rate,
            "culturalAlignment": self.cultural_alignment,
        }


@dataclass
class InfluencerCorrelations:
    influencers: List[Influencer] = field(default_factory=list)
    total_analyzed: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "influencers": [i.to_dict() for i in self.influencers],
            "totalAnalyzed": self.total_analyzed,
        }


@dataclass
class BrandAffinity:
    name: str
    sector: str
    affinity_score: float
    reasoning: str
    has_nfts: bool = False
    has_crypto: bool = False
    social_engagement: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "sector": self.sector,
            "affinityScore": self.affinity_score,
            "reasoning": self.reasoning,
            "webPresence": {
                "hasNFTs": self.has_nfts,
                "hasCrypto": self.has_crypto,
                "socialEngagement": self.social_engagement,
            },
        }


@dataclass
class BrandAffinities:
    brands: List[BrandAffinity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"brands": [b.to_dict() for b in self.brands]}


__all__ = [
    "Config",
    "TasteCorrelation",
    "Demographics",
    "TasteProfile",
    "TasteMetadata",
    "TasteRecommendation",
    "Influencer",
    "InfluencerCorrelations",
    "BrandAffinity",
    "BrandAffinities",
]
