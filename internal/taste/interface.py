from typing import List, Optional, Protocol, runtime_checkable

from .type import BrandAffinities, InfluencerCorrelations, TasteProfile, TasteRecommendation


@runtime_checkable
class ITaste(Protocol):
    """Taste-graph correlation with a three-tier fallback chain."""

    async def get_taste_correlations(
        self,
        theme: str,
        keywords: List[str],
        categories: Optional[List[str]] = None,
        use_cache: bool = True,
        limit: Optional[int] = None,
    ) -> TasteRecommendation: ...

    async def get_influencer_correlations(
        self, profile: TasteProfile, platforms: Optional[List[str]] = None
    ) -> InfluencerCorrelations: ...

    async def get_brand_affinities(
        self, profile: TasteProfile, sectors: Optional[List[str]] = None
    ) -> BrandAffinities: ...


__all__ = ["ITaste"]
