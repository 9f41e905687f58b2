from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .constant import *


@dataclass
class Config:
    """Configuration for the market-data adapter."""

    info_ttl: str = "short"
    price_ttl: str = "short"
    trending_ttl: str = "medium"


@dataclass
class TokenInfo:
    """Market snapshot of one token. ``raw`` keeps the provider payload."""

    id: str
    symbol: str
    name: str
    current_price: float = 0.0
    market_cap: float = 0.0
    volume_24h: float = 0.0
    price_change_24h: float = 0.0
    price_change_percent_24h: float = 0.0
    circulating_supply: float = 0.0
    total_supply: float = 0.0
    max_supply: Optional[float] = None
    ath: float = 0.0
    ath_date: str = ""
    atl: float = 0.0
    atl_date: str = ""
    last_updated: str = ""
    price_imputed: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "symbol": self.symbol,
            "name": self.name,
            "currentPrice": self.current_price,
            "marketCap": self.market_cap,
            "volume24h": self.volume_24h,
            "priceChange24h": self.price_change_24h,
            "priceChangePercent24h": self.price_change_percent_24h,
            "circulatingSupply": self.circulating_supply,
            "totalSupply": self.total_supply,
            "maxSupply": self.max_supply,
            "ath": self.ath,
            "athDate": self.ath_date,
            "atl": self.atl,
            "atlDate": self.atl_date,
            "lastUpdated": self.last_updated,
        }


@dataclass
class TrendingToken:
    id: str
    symbol: str
    name: str
    thumb: str = ""
    small: str = ""
    large: str = ""
    slug: str = ""
    price_btc: float = 0.0
    score: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "symbol": self.symbol,
            "name": self.name,
            "thumb": self.thumb,
            "small": self.small,
            "large": self.large,
            "slug": self.slug,
            "priceBtc": self.price_btc,
            "score": self.score,
        }


@dataclass
class TokenSearch:
    id: str
    name: str
    symbol: str
    market_cap_rank: int = UNRANKED_MARKET_CAP_RANK
    thumb: str = ""
    large: str = ""


@dataclass
class TokenMarketMetrics:
    liquidity_score: float
    volatility_score: float
    momentum_score: float
    community_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "liquidityScore": self.liquidity_score,
            "volatilityScore": self.volatility_score,
            "momentumScore": self.momentum_score,
            "communityScore": self.community_score,
        }


@dataclass
class TokenCulturalAlignment:
    social_mentions: int
    trending_score: float
    narrative_match: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "socialMentions": self.social_mentions,
            "trendingScore": self.trending_score,
            "narrativeMatch": self.narrative_match,
        }


@dataclass
class TokenMatch:
    """A token matched against keywords with its pre-filter relevance."""

    token: TokenInfo
    relevance_score: float
    market_metrics: TokenMarketMetrics
    cultural_alignment: TokenCulturalAlignment
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "token": self.token.to_dict(),
            "relevanceScore": self.relevance_score,
            "marketMetrics": self.market_metrics.to_dict(),
            "culturalAlignment": self.cultural_alignment.to_dict(),
            "reasoning": self.reasoning,
        }


__all__ = [
    "Config",
    "TokenInfo",
    "TrendingToken",
    "TokenSearch",
    "TokenMarketMetrics",
    "TokenCulturalAlignment",
    "TokenMatch",
]
