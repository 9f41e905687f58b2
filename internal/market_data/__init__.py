"""Market Data Domain: token discovery and pricing."""

from .constant import *
from .interface import IMarketData
from .type import (
    Config,
    TokenInfo,
    TrendingToken,
    TokenSearch,
    TokenMarketMetrics,
    TokenCulturalAlignment,
    TokenMatch,
)
from .usecase.new import New as NewMarketData

__all__ = [
    "IMarketData",
    "Config",
    "TokenInfo",
    "TrendingToken",
    "TokenSearch",
    "TokenMarketMetrics",
    "TokenCulturalAlignment",
    "TokenMatch",
    "NewMarketData",
    "SERVICE_NAME",
    "API_KEY_HEADER",
]
