"""Full pipeline request schemas."""

from typing import Literal

from pydantic import Field

from internal.orchestrator.type import PipelineOptions
from models.schemas.base import CamelModel


class SearchOptions(CamelModel):
    use_cache: bool = True
    max_assets: int = Field(default=20, gt=0, le=50)
    include_nfts: bool = Field(default=True, alias="includeNFTs")
    include_tokens: bool = True
    risk_tolerance: Literal["low", "medium", "high"] = "medium"
    time_horizon: Literal["short", "medium", "long"] = "medium"
    min_confidence: float = Field(default=0.3, ge=0, le=1)
    enable_parallel_processing: bool = True

    def to_pipeline_options(self) -> PipelineOptions:
        return PipelineOptions(
            use_cache=self.use_cache,
            max_assets=self.max_assets,
            include_nfts=self.include_nfts,
            include_tokens=self.include_tokens,
            risk_tolerance=self.risk_tolerance,
            time_horizon=self.time_horizon,
            min_confidence=self.min_confidence,
            enable_parallel_processing=self.enable_parallel_processing,
        )


class SearchRequest(CamelModel):
    """Body of POST /api/search."""
    vibe: str = Field(min_length=1, max_length=500, description="Cultural vibe or theme to analyze")
    options: SearchOptions = Field(default_factory=SearchOptions)


class QuickSearchRequest(CamelModel):
    """Body of POST /api/search/quick."""
    vibe: str = Field(min_length=1, max_length=200)
    asset_type: Literal["tokens", "nfts", "both"] = "both"
    limit: int = Field(default=5, gt=0, le=10)
