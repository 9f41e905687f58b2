"""Asset discovery request schemas."""

from typing import List, Literal

from pydantic import Field

from models.schemas.base import CamelModel

AssetType = Literal["tokens", "nfts", "both"]


class AssetsOptions(CamelModel):
    use_cache: bool = True
    limit: int = Field(default=20, gt=0, le=50)
    include_market_data: bool = True
    include_social_data: bool = True
    min_relevance_score: float = Field(default=20, ge=0, le=100)


class AssetsRequest(CamelModel):
    """Body of POST /api/assets."""
    keywords: List[str] = Field(min_length=1, max_length=20)
    categories: List[str] = Field(default_factory=list)
    asset_types: List[AssetType] = Field(default_factory=lambda: ["both"])
    options: AssetsOptions = Field(default_factory=AssetsOptions)

    def includes(self, asset_type: str) -> bool:
        return asset_type in self.asset_types or "both" in self.asset_types


class TokenDiscoveryRequest(CamelModel):
    """Body of POST /api/assets/tokens."""
    keywords: List[str] = Field(min_length=1, max_length=20)
    categories: List[str] = Field(default_factory=list)
    limit: int = Field(default=20, gt=0, le=50)
    use_cache: bool = True


class NFTDiscoveryRequest(TokenDiscoveryRequest):
    """Body of POST /api/assets/nfts."""
    limit: int = Field(default=15, gt=0, le=50)
