from typing import List, Optional, Protocol, runtime_checkable

from .type import TokenInfo, TokenMatch, TokenSearch, TrendingToken


@runtime_checkable
class IMarketData(Protocol):
    """Token discovery against a crypto market-data API."""

    async def get_token_info(self, token_id: str, use_cache: bool = True) -> Optional[TokenInfo]: ...

    async def get_token_price(self, token_id: str, vs_currency: str = "usd") -> Optional[float]: ...

    async def get_trending_tokens(self, use_cache: bool = True) -> List[TrendingToken]: ...

    async def search_tokens(self, query: str, limit: int = 10) -> List[TokenSearch]: ...

    async def find_relevant_tokens(self, keywords: List[str], limit: int = 20) -> List[TokenMatch]: ...


__all__ = ["IMarketData"]
