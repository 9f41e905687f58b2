from typing import List, Optional, Protocol, runtime_checkable

from .type import CollectionStats, NFTAsset, NFTCollection, NFTMatch


@runtime_checkable
class IMarketplace(Protocol):
    """NFT collection discovery against a marketplace API."""

    async def get_collection(self, slug: str, use_cache: bool = True) -> Optional[NFTCollection]: ...

    async def get_collection_stats(self, slug: str, use_cache: bool = True) -> Optional[CollectionStats]: ...

    async def search_collections(self, query: str, limit: int = 20) -> List[NFTCollection]: ...

    async def get_collection_assets(
        self, slug: str, limit: int = 20, sort_by: str = "price"
    ) -> List[NFTAsset]: ...

    async def get_trending_collections(self) -> List[NFTCollection]: ...

    async def find_relevant_nfts(self, keywords: List[str], limit: int = 15) -> List[NFTMatch]: ...


__all__ = ["IMarketplace"]
