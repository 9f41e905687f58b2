"""Scoring Domain: asset normalisation, scoring and response envelopes."""

from .constant import *
from .errors import ErrNormalizationFailed, ErrUnknownSource
from .interface import IScorer
from .type import (
    PriceInfo,
    VolumeInfo,
    SupplyInfo,
    AssetMetadata,
    AssetLinks,
    AssetImages,
    NormalizedAsset,
    SocialMetrics,
    ScoringContext,
    MarketContext,
    CulturalScores,
    MarketScores,
    RiskAssessment,
    AssetScores,
    ScoredAsset,
    NormalizedResponse,
    ErrorResponse,
)
from .usecase.new import New as NewScorer
from .usecase.helpers import risk_level
from .usecase.normalizer import clean_description, normalize_collection, normalize_token

__all__ = [
    "ErrNormalizationFailed",
    "ErrUnknownSource",
    "IScorer",
    "PriceInfo",
    "VolumeInfo",
    "SupplyInfo",
    "AssetMetadata",
    "AssetLinks",
    "AssetImages",
    "NormalizedAsset",
    "SocialMetrics",
    "ScoringContext",
    "MarketContext",
    "CulturalScores",
    "MarketScores",
    "RiskAssessment",
    "AssetScores",
    "ScoredAsset",
    "NormalizedResponse",
    "ErrorResponse",
    "NewScorer",
    "risk_level",
    "clean_description",
    "normalize_collection",
    "normalize_token",
    "ASSET_TYPE_TOKEN",
    "ASSET_TYPE_NFT",
    "RISK_LOW",
    "RISK_MEDIUM",
    "RISK_HIGH",
    "RISK_EXTREME",
]
