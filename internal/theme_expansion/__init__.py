"""Theme Expansion Domain.

Turns a free-text cultural theme into keywords, categories and context
with an LLM, and summarises scored assets for recommendations.
"""

from .constant import *
from .interface import IThemeExpansion
from .type import (
    Config,
    CulturalContext,
    ThemeExpansion,
    CulturalAnalysis,
    AssetOpportunity,
    AssetSummary,
)
from .errors import ErrNotConfigured, ErrExpansionFailed, ErrInvalidInput
from .usecase.new import New as NewThemeExpansion

__all__ = [
    "IThemeExpansion",
    "Config",
    "CulturalContext",
    "ThemeExpansion",
    "CulturalAnalysis",
    "AssetOpportunity",
    "AssetSummary",
    "ErrNotConfigured",
    "ErrExpansionFailed",
    "ErrInvalidInput",
    "NewThemeExpansion",
    "SERVICE_NAME",
]
