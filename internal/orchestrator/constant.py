"""Constants for the cultural arbitrage pipeline."""

PIPELINE_VERSION = "1.0.0"

# Pipeline stages, in order
STAGE_THEME_EXPANSION = "theme_expansion"
STAGE_TASTE_CORRELATION = "taste_correlation"
STAGE_SOCIAL_ANALYSIS = "social_analysis"
STAGE_ASSET_DISCOVERY = "asset_discovery"
STAGE_SCORING_FILTERING = "scoring_filtering"
STAGE_AI_SUMMARY = "ai_summary"

# Option values
RISK_TOLERANCE_LOW = "low"
RISK_TOLERANCE_MEDIUM = "medium"
RISK_TOLERANCE_HIGH = "high"
RISK_TOLERANCES = (RISK_TOLERANCE_LOW, RISK_TOLERANCE_MEDIUM, RISK_TOLERANCE_HIGH)
TIME_HORIZON_SHORT = "short"
TIME_HORIZON_MEDIUM = "medium"
TIME_HORIZON_LONG = "long"
TIME_HORIZONS = (TIME_HORIZON_SHORT, TIME_HORIZON_MEDIUM, TIME_HORIZON_LONG)

# Option defaults
DEFAULT_MAX_ASSETS = 20
DEFAULT_MIN_CONFIDENCE = 0.3

# Fan-out
SOCIAL_KEYWORD_COUNT = 3
DISCOVERY_LIMIT = 15
API_CALLS_PER_ASSET_BRANCH = 3
BRANCH_TOKENS = "tokens"
BRANCH_NFTS = "NFTs"

# Step 5 adjustments
SOCIAL_BOOST_MAX = 10
LOW_TOLERANCE_PENALTY = 0.7
HIGH_TOLERANCE_BOOST = 1.2

# Overall metrics
ASSET_SCORE_WEIGHT = 0.6
SOCIAL_SCORE_WEIGHT = 0.4
DEFAULT_SOCIAL_SCORE = 50
THEME_CONFIDENCE_WEIGHT = 0.4
ASSET_CONFIDENCE_WEIGHT = 0.4
SOCIAL_CONFIDENCE_WEIGHT = 0.2
DEFAULT_ASSET_CONFIDENCE = 0.3
SOCIAL_CONFIDENCE_PRESENT = 0.7
SOCIAL_CONFIDENCE_ABSENT = 0.4

# Recommendations
SUMMARY_ASSET_COUNT = 10
TOP_ASSET_COUNT = 5
FALLBACK_MARKET_TIMING = "Consider current market conditions before investing."
FALLBACK_ACTION_ITEMS = (
    "Review top asset recommendations",
    "Monitor social sentiment trends",
    "Consider portfolio allocation",
    "Set up price alerts",
)
SHORT_HORIZON_ACTIONS = (
    "Set tight stop-losses for short-term positions",
    "Monitor social sentiment closely for momentum shifts",
)
LONG_HORIZON_ACTIONS = (
    "Consider dollar-cost averaging for long-term positions",
    "Focus on fundamental value over short-term price action",
)
ALWAYS_ACTIONS = (
    "Diversify across multiple assets to manage risk",
    "Stay updated with cultural trends and social media discussions",
)

# Failure result
FAILED_DESCRIPTION = "Pipeline failed - partial results only"
FAILED_CONFIDENCE = 0.1
FAILED_CATEGORY = "general"
FAILED_SUMMARY = "Pipeline processing failed. Please try again later."
FAILED_MARKET_TIMING = "Unknown"
FAILED_RISK_ASSESSMENT = "High - Analysis incomplete"
FAILED_ACTION_ITEMS = ("Retry analysis", "Check system status")
UNKNOWN_ERROR = "Unknown error"

__all__ = [
    "PIPELINE_VERSION",
    "STAGE_THEME_EXPANSION",
    "STAGE_TASTE_CORRELATION",
    "STAGE_SOCIAL_ANALYSIS",
    "STAGE_ASSET_DISCOVERY",
    "STAGE_SCORING_FILTERING",
    "STAGE_AI_SUMMARY",
    "RISK_TOLERANCE_LOW",
    "RISK_TOLERANCE_MEDIUM",
    "RISK_TOLERANCE_HIGH",
    "RISK_TOLERANCES",
    "TIME_HORIZON_SHORT",
    "TIME_HORIZON_MEDIUM",
    "TIME_HORIZON_LONG",
    "TIME_HORIZONS",
    "DEFAULT_MAX_ASSETS",
    "DEFAULT_MIN_CONFIDENCE",
    "SOCIAL_KEYWORD_COUNT",
    "DISCOVERY_LIMIT",
    "API_CALLS_PER_ASSET_BRANCH",
    "BRANCH_TOKENS",
    "BRANCH_NFTS",
    "SOCIAL_BOOST_MAX",
    "LOW_TOLERANCE_PENALTY",
    "HIGH_TOLERANCE_BOOST",
    "ASSET_SCORE_WEIGHT",
    "SOCIAL_SCORE_WEIGHT",
    "DEFAULT_SOCIAL_SCORE",
    "THEME_CONFIDENCE_WEIGHT",
    "ASSET_CONFIDENCE_WEIGHT",
    "SOCIAL_CONFIDENCE_WEIGHT",
    "DEFAULT_ASSET_CONFIDENCE",
    "SOCIAL_CONFIDENCE_PRESENT",
    "SOCIAL_CONFIDENCE_ABSENT",
    "SUMMARY_ASSET_COUNT",
    "TOP_ASSET_COUNT",
    "FALLBACK_MARKET_TIMING",
    "FALLBACK_ACTION_ITEMS",
    "SHORT_HORIZON_ACTIONS",
    "LONG_HORIZON_ACTIONS",
    "ALWAYS_ACTIONS",
    "FAILED_DESCRIPTION",
    "FAILED_CONFIDENCE",
    "FAILED_CATEGORY",
    "FAILED_SUMMARY",
    "FAILED_MARKET_TIMING",
    "FAILED_RISK_ASSESSMENT",
    "FAILED_ACTION_ITEMS",
    "UNKNOWN_ERROR",
]
