from typing import List, Optional, Protocol, runtime_checkable

from .type import FarcasterCast, SocialInfluencer, SocialMention, SocialTrendAnalysis, TwitterTrend


@runtime_checkable
class ISocial(Protocol):
    """Social signal collection across Twitter and Farcaster."""

    async def get_twitter_trends(self, location: str = "global", use_cache: bool = True) -> List[TwitterTrend]: ...

    async def search_twitter_mentions(self, query: str, count: int = 20) -> List[SocialMention]: ...

    async def get_farcaster_casts(
        self, query: Optional[str] = None, limit: int = 50, use_cache: bool = True
    ) -> List[FarcasterCast]: ...

    async def analyze_social_trend(self, keyword: str) -> SocialTrendAnalysis: ...

    async def get_social_influencers(
        self, topic: str, platform: str = "both", limit: int = 10
    ) -> List[SocialInfluencer]: ...


__all__ = ["ISocial"]
