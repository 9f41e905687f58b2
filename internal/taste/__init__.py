"""Taste Correlation Domain."""

from .constant import *
from .interface import ITaste
from .type import (
    Config,
    TasteCorrelation,
    Demographics,
    TasteProfile,
    TasteMetadata,
    TasteRecommendation,
    Influencer,
    InfluencerCorrelations,
    BrandAffinity,
    BrandAffinities,
)
from .errors import ErrInvalidInput
from .usecase.new import New as NewTaste

__all__ = [
    "ITaste",
    "Config",
    "TasteCorrelation",
    "Demographics",
    "TasteProfile",
    "TasteMetadata",
    "TasteRecommendation",
    "Influencer",
    "InfluencerCorrelations",
    "BrandAffinity",
    "BrandAffinities",
    "ErrInvalidInput",
    "NewTaste",
    "SERVICE_NAME",
    "DEFAULT_CATEGORIES",
    "DEFAULT_PLATFORMS",
    "DEFAULT_SECTORS",
]
