"""Marketplace Domain: NFT collection discovery."""

from .constant import *
from .interface import IMarketplace
from .type import (
    Config,
    SocialLinks,
    NFTCollection,
    CollectionStats,
    NFTTrait,
    NFTAsset,
    NFTMarketMetrics,
    NFTCulturalAlignment,
    NFTMatch,
)
from .usecase.new import New as NewMarketplace

__all__ = [
    "IMarketplace",
    "Config",
    "SocialLinks",
    "NFTCollection",
    "CollectionStats",
    "NFTTrait",
    "NFTAsset",
    "NFTMarketMetrics",
    "NFTCulturalAlignment",
    "NFTMatch",
    "NewMarketplace",
    "SERVICE_NAME",
    "API_KEY_HEADER",
]
