"""Social Domain: Twitter and Farcaster trend analysis."""

from .constant import *
from .errors import ErrLexiconInvalid
from .interface import ISocial
from .type import (
    Config,
    SentimentLexicon,
    TwitterTrend,
    SocialMention,
    FarcasterCast,
    TwitterAnalysis,
    FarcasterAnalysis,
    SocialTrendAnalysis,
    SocialInfluencer,
)
from .usecase.new import New as NewSocial

__all__ = [
    "ErrLexiconInvalid",
    "ISocial",
    "Config",
    "SentimentLexicon",
    "TwitterTrend",
    "SocialMention",
    "FarcasterCast",
    "TwitterAnalysis",
    "FarcasterAnalysis",
    "SocialTrendAnalysis",
    "SocialInfluencer",
    "NewSocial",
    "SERVICE_NAME",
]
