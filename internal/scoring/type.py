from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class PriceInfo:
    current: float = 0.0
    currency: str = DEFAULT_CURRENCY
    change_24h: Optional[float] = None
    change_percent_24h: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "current": self.current,
                "currency": self.currency,
                "change24h": self.change_24h,
                "changePercent24h": self.change_percent_24h,
            }
        )


@dataclass
class VolumeInfo:
    volume_24h: float = 0.0
    volume_total: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"volume24h": self.volume_24h, "volumeTotal": self.volume_total})


@dataclass
class SupplyInfo:
    circulating: Optional[float] = None
    total: Optional[float] = None
    max: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"circulating": self.circulating, "total": self.total, "max": self.max})


@dataclass
class AssetMetadata:
    blockchain: Optional[str] = None
    contract_address: Optional[str] = None
    created_date: Optional[str] = None
    verified: bool = False
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "blockchain": self.blockchain,
                "contractAddress": self.contract_address,
                "createdDate": self.created_date,
                "verified": self.verified,
                "category": self.category,
            }
        )


@dataclass
class AssetLinks:
    website: Optional[str] = None
    twitter: Optional[str] = None
    discord: Optional[str] = None
    opensea: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "website": self.website,
                "twitter": self.twitter,
                "discord": self.discord,
                "opensea": self.opensea,
            }
        )


@dataclass
class AssetImages:
    thumbnail: Optional[str] = None
    small: Optional[str] = None
    large: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({"thumbnail": self.thumbnail, "small": self.small, "large": self.large})


@dataclass
class NormalizedAsset:
    """Canonical tradable item, token or NFT collection."""

    id: str
    type: str
    name: str
    description: str = ""
    symbol: Optional[str] = None
    price: Optional[PriceInfo] = None
    volume: Optional[VolumeInfo] = None
    market_cap: Optional[float] = None
    floor_price: Optional[float] = None
    supply: Optional[SupplyInfo] = None
    metadata: AssetMetadata = field(default_factory=AssetMetadata)
    links: AssetLinks = field(default_factory=AssetLinks)
    images: AssetImages = field(default_factory=AssetImages)

    @property
    def volume_24h(self) -> float:
        return self.volume.volume_24h if self.volume else 0.0

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "symbol": self.symbol,
            "description": self.description,
            "price": self.price.to_dict() if self.price else None,
            "volume": self.volume.to_dict() if self.volume else None,
            "marketCap": self.market_cap,
            "floorPrice": self.floor_price,
            "supply": self.supply.to_dict() if self.supply else None,
            "metadata": self.metadata.to_dict(),
            "links": self.links.to_dict(),
            "images": self.images.to_dict(),
        }
        return _compact(data)


@dataclass
class SocialMetrics:
    """Social signal attached to an asset by keyword overlap."""

    mentions: int = 0
    engagement: float = 0.0
    sentiment: float = 0.0
    trending_score: float = 0.0
    viral_potential: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mentions": self.mentions,
            "engagement": self.engagement,
            "sentiment": self.sentiment,
            "trendingScore": self.trending_score,
            "viralPotential": self.viral_potential,
        }


@dataclass
class ScoringContext:
    """Cultural side of a scoring request."""

    keywords: List[str]
    theme: str
    social_metrics: Optional[SocialMetrics] = None
    categories: Optional[List[str]] = None


@dataclass
class MarketContext:
    """Market side of a scoring request. Truthy ``momentum``/``liquidity`` override the derived values."""

    trending: bool = False
    momentum: Optional[float] = None
    liquidity: Optional[float] = None


@dataclass
class CulturalScores:
    theme_match: float = 0
    social_buzz: float = 0
    narrative_strength: float = 0
    viral_potential: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "themeMatch": self.theme_match,
            "socialBuzz": self.social_buzz,
            "narrativeStrength": self.narrative_strength,
            "viralPotential": self.viral_potential,
        }


@dataclass
class MarketScores:
    liquidity: float = 0
    momentum: float = 0
    volatility: float = 0
    community: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "liquidity": self.liquidity,
            "momentum": self.momentum,
            "volatility": self.volatility,
            "community": self.community,
        }


@dataclass
class RiskAssessment:
    level: str
    score: float
    factors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "score": self.score, "factors": list(self.factors)}


@dataclass
class AssetScores:
    relevance: float
    confidence: float
    cultural: CulturalScores
    market: MarketScores
    risk: RiskAssessment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "relevance": self.relevance,
            "confidence": self.confidence,
            "cultural": self.cultural.to_dict(),
            "market": self.market.to_dict(),
            "risk": self.risk.to_dict(),
        }


@dataclass
class ScoredAsset:
    """A NormalizedAsset with its scores, reasoning and sources."""

    asset: NormalizedAsset
    scores: AssetScores
    reasoning: str
    sources: List[str] = field(default_factory=list)
    last_updated: str = ""
    social_metrics: Optional[SocialMetrics] = None
    time_horizon: str = "medium"

    @property
    def id(self) -> str:
        return self.asset.id

    @property
    def type(self) -> str:
        return self.asset.type

    @property
    def name(self) -> str:
        return self.asset.name

    @property
    def relevance_score(self) -> float:
        return self.scores.relevance

    @property
    def confidence(self) -> float:
        return self.scores.confidence

    @property
    def risk_level(self) -> str:
        return self.scores.risk.level

    def to_dict(self) -> Dict[str, Any]:
        data = self.asset.to_dict()
        data.update(
            {
                "scores": self.scores.to_dict(),
                "relevanceScore": self.scores.relevance,
                "confidence": self.scores.confidence,
                "riskLevel": self.scores.risk.level,
                "timeHorizon": self.time_horizon,
                "socialMetrics": self.social_metrics.to_dict() if self.social_metrics else None,
                "reasoning": self.reasoning,
                "sources": list(self.sources),
                "lastUpdated": self.last_updated,
            }
        )
        return data


@dataclass
class ResponseMetadata:
    source: str
    timestamp: str
    cached: bool = False
    processing_time: float = 0
    confidence: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "timestamp": self.timestamp,
            "cached": self.cached,
            "processingTime": self.processing_time,
            "confidence": self.confidence,
        }


@dataclass
class NormalizedResponse:
    data: Any
    metadata: ResponseMetadata

    def to_dict(self) -> Dict[str, Any]:
        data = self.data.to_dict() if hasattr(self.data, "to_dict") else self.data
        return {"data": data, "metadata": self.metadata.to_dict()}


@dataclass
class ErrorResponse:
    code: str
    message: str
    source: str
    retryable: bool = True
    timestamp: str = ""
    request_id: str = ""
    details: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": _compact(
                {
                    "code": self.code,
                    "message": self.message,
                    "details": self.details,
                    "retryable": self.retryable,
                    "source": self.source,
                }
            ),
            "metadata": {"timestamp": self.timestamp, "requestId": self.request_id},
        }


__all__ = [
    "PriceInfo",
    "VolumeInfo",
    "SupplyInfo",
    "AssetMetadata",
    "AssetLinks",
    "AssetImages",
    "NormalizedAsset",
    "SocialMetrics",
    "ScoringContext",
    "MarketContext",
    "CulturalScores",
    "MarketScores",
    "RiskAssessment",
    "AssetScores",
    "ScoredAsset",
    "ResponseMetadata",
    "NormalizedResponse",
    "ErrorResponse",
]
