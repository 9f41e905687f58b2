from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class Config:
    """Configuration for the marketplace adapter."""

    collection_ttl: str = "medium"
    stats_ttl: str = "short"


@dataclass
class SocialLinks:
    website: str = ""
    discord: str = ""
    twitter: str = ""
    instagram: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "website": self.website,
            "discord": self.discord,
            "twitter": self.twitter,
            "instagram": self.instagram,
        }


@dataclass
class NFTCollection:
    """Collection listing. ``raw`` keeps the provider payload."""

    slug: str
    name: str
    description: str
    image_url: str = ""
    banner_image_url: str = ""
    contract_address: str = ""
    blockchain: str = DEFAULT_BLOCKCHAIN
    total_supply: int = 0
    floor_price: float = 0.0
    floor_price_symbol: str = DEFAULT_SYMBOL
    volume_total: float = 0.0
    volume_24h: float = 0.0
    change_24h: float = 0.0
    average_price_24h: float = 0.0
    sales_count_24h: int = 0
    owners_count: int = 0
    created_date: str = ""
    verification_status: str = STATUS_UNVERIFIED
    social_links: SocialLinks = field(default_factory=SocialLinks)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "imageUrl": self.image_url,
            "bannerImageUrl": self.banner_image_url,
            "contractAddress": self.contract_address,
            "blockchain": self.blockchain,
            "totalSupply": self.total_supply,
            "floorPrice": self.floor_price,
            "floorPriceSymbol": self.floor_price_symbol,
            "volumeTotal": self.volume_total,
            "volume24h": self.volume_24h,
            "change24h": self.change_24h,
            "averagePrice24h": self.average_price_24h,
            "salesCount24h": self.sales_count_24h,
            "ownersCount": self.owners_count,
            "createdDate": self.created_date,
            "verificationStatus": self.verification_status,
            "socialLinks": self.social_links.to_dict(),
        }


@dataclass
class CollectionStats:
    slug: str
    total_volume: float = 0.0
    total_sales: float = 0.0
    total_supply: float = 0.0
    count: float = 0.0
    num_owners: float = 0.0
    average_price: float = 0.0
    num_reports: float = 0.0
    market_cap: float = 0.0
    floor_price: float = 0.0
    floor_price_symbol: str = DEFAULT_SYMBOL
    volume: Dict[str, float] = field(default_factory=lambda: {"1d": 0.0, "7d": 0.0, "30d": 0.0})
    change: Dict[str, float] = field(default_factory=lambda: {"1d": 0.0, "7d": 0.0, "30d": 0.0})
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "totalVolume": self.total_volume,
            "totalSales": self.total_sales,
            "totalSupply": self.total_supply,
            "count": self.count,
            "numOwners": self.num_owners,
            "averagePrice": self.average_price,
            "numReports": self.num_reports,
            "marketCap": self.market_cap,
            "floorPrice": self.floor_price,
            "floorPriceSymbol": self.floor_price_symbol,
            "volume": dict(self.volume),
            "change": dict(self.change),
        }


@dataclass
class NFTTrait:
    trait_type: str
    value: Any
    display_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"traitType": self.trait_type, "value": self.value, "displayType": self.display_type}


@dataclass
class NFTAsset:
    token_id: str
    name: str
    description: str = ""
    image_url: str = ""
    collection_slug: str = ""
    collection_name: str = ""
    contract_address: str = ""
    traits: List[NFTTrait] = field(default_factory=list)
    owner: str = ""
    permalink: str = ""
    last_sale_price: float = 0.0
    last_sale_currency: str = DEFAULT_SYMBOL
    last_sale_date: str = ""
    current_price: float = 0.0
    current_price_currency: str = DEFAULT_SYMBOL
    rarity_rank: Optional[int] = None
    rarity_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tokenId": self.token_id,
            "name": self.name,
            "description": self.description,
            "imageUrl": self.image_url,
            "collection": {
                "slug": self.collection_slug,
                "name": self.collection_name,
                "contractAddress": self.contract_address,
            },
            "traits": [t.to_dict() for t in self.traits],
            "owner": self.owner,
            "permalink": self.permalink,
            "lastSale": {
                "price": self.last_sale_price,
                "currency": self.last_sale_currency,
                "date": self.last_sale_date,
            },
            "currentPrice": {"price": self.current_price, "currency": self.current_price_currency},
            "rarityRank": self.rarity_rank,
            "rarityScore": self.rarity_score,
        }


@dataclass
class NFTMarketMetrics:
    liquidity_score: float
    momentum_score: float
    community_score: float
    utility_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "liquidityScore": self.liquidity_score,
            "momentumScore": self.momentum_score,
            "communityScore": self.community_score,
            "utilityScore": self.utility_score,
        }


@dataclass
class NFTCulturalAlignment:
    aesthetic_match: float
    narrative_relevance: float
    trending_factor: float
    social_buzz: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "aestheticMatch": self.aesthetic_match,
            "narrativeRelevance": self.narrative_relevance,
            "trendingFactor": self.trending_factor,
            "socialBuzz": self.social_buzz,
        }


@dataclass
class NFTMatch:
    """A collection matched against keywords with its pre-filter relevance."""

    collection: NFTCollection
    stats: CollectionStats
    relevance_score: float
    market_metrics: NFTMarketMetrics
    cultural_alignment: NFTCulturalAlignment
    reasoning: str
    top_assets: List[NFTAsset] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collection": self.collection.to_dict(),
            "relevanceScore": self.relevance_score,
            "marketMetrics": self.market_metrics.to_dict(),
            "culturalAlignment": self.cultural_alignment.to_dict(),
            "reasoning": self.reasoning,
            "topAssets": [a.to_dict() for a in self.top_assets],
        }


__all__ = [
    "Config",
    "SocialLinks",
    "NFTCollection",
    "CollectionStats",
    "NFTTrait",
    "NFTAsset",
    "NFTMarketMetrics",
    "NFTCulturalAlignment",
    "NFTMatch",
]
