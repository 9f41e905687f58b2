"""Constants for taste correlation."""

SERVICE_NAME = "QlooService"

# Endpoints
CORRELATIONS_PATH = "/taste/correlations"
INFLUENCERS_PATH = "/influencers/correlate"
BRANDS_PATH = "/brands/affinities"

# Request defaults
DEFAULT_CATEGORIES = ["entertainment", "fashion", "technology", "art"]
DEFAULT_PLATFORMS = ["twitter", "instagram", "tiktok"]
DEFAULT_SECTORS = ["technology", "fashion", "entertainment"]
DEFAULT_LIMIT = 20
INFLUENCER_LIMIT = 10
INFLUENCER_MIN_FOLLOWERS = 10000
BRAND_LIMIT = 15

# Normalisation defaults
DEFAULT_ITEM = "Unknown"
DEFAULT_BRAND_NAME = "Unknown Brand"
DEFAULT_CATEGORY = "general"
DEFAULT_SCORE = 0.5
DEFAULT_CORRELATION_CONFIDENCE = 0.7
DEFAULT_REASONING = "Taste algorithm correlation"
DEFAULT_BRAND_REASONING = "Taste correlation analysis"
DEFAULT_AGE_RANGE = "18-35"
DEFAULT_ALGORITHM_VERSION = "1.0.0"
DEFAULT_PLATFORM = "unknown"

# AI fallback tier
AI_ALGORITHM_VERSION = "ai-cultural-analysis-1.0.0"
AI_CONTEXT_TEMPLATE = (
    'Generate taste correlations and cultural insights for the theme "{theme}" '
    "with focus on crypto/NFT relevance, demographic analysis, and trending factors."
)
AI_MAX_OPPORTUNITIES = 8
AI_MAX_CORRELATIONS = 10
AI_KEYWORD_CORRELATIONS = 4
AI_AGE_RANGE = "18-34"
AI_BEHAVIORS = ["social_media_active", "trend_following", "early_adopter"]
AI_CONTENT_PREFERENCES = ["digital_art", "tech_innovation", "cultural_movements"]
AI_KEYWORD_CATEGORY = "lifestyle"
AI_PROCESSING_TIME = 150

# Basic fallback tier
BASIC_ALGORITHM_VERSION = "basic-fallback-1.0.0"
BASIC_REASONING = "Keyword-based correlation (basic fallback)"
BASIC_MAX_CORRELATIONS = 10
BASIC_BEHAVIORS = ["social_media_active", "trend_following"]
BASIC_PROCESSING_TIME = 100

# Profile interests are the first N keywords
PROFILE_INTEREST_COUNT = 5

__all__ = [
    "SERVICE_NAME",
    "CORRELATIONS_PATH",
    "INFLUENCERS_PATH",
    "BRANDS_PATH",
    "DEFAULT_CATEGORIES",
    "DEFAULT_PLATFORMS",
    "DEFAULT_SECTORS",
    "DEFAULT_LIMIT",
    "INFLUENCER_LIMIT",
    "INFLUENCER_MIN_FOLLOWERS",
    "BRAND_LIMIT",
    "DEFAULT_ITEM",
    "DEFAULT_BRAND_NAME",
    "DEFAULT_CATEGORY",
    "DEFAULT_SCORE",
    "DEFAULT_CORRELATION_CONFIDENCE",
    "DEFAULT_REASONING",
    "DEFAULT_BRAND_REASONING",
    "DEFAULT_AGE_RANGE",
    "DEFAULT_ALGORITHM_VERSION",
    "DEFAULT_PLATFORM",
    "AI_ALGORITHM_VERSION",
    "AI_CONTEXT_TEMPLATE",
    "AI_MAX_OPPORTUNITIES",
    "AI_MAX_CORRELATIONS",
    "AI_KEYWORD_CORRELATIONS",
    "AI_AGE_RANGE",
    "AI_BEHAVIORS",
    "AI_CONTENT_PREFERENCES",
    "AI_KEYWORD_CATEGORY",
    "AI_PROCESSING_TIME",
    "BASIC_ALGORITHM_VERSION",
    "BASIC_REASONING",
    "BASIC_MAX_CORRELATIONS",
    "BASIC_BEHAVIORS",
    "BASIC_PROCESSING_TIME",
    "PROFILE_INTEREST_COUNT",
]
