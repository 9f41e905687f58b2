"""Constants for asset normalisation and scoring."""

ASSET_TYPE_TOKEN = "token"
ASSET_TYPE_NFT = "nft_collection"

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"
RISK_EXTREME = "extreme"
RISK_LEVELS = (RISK_LOW, RISK_MEDIUM, RISK_HIGH, RISK_EXTREME)

# Upper bounds (exclusive) of the risk buckets
RISK_LOW_MAX = 25
RISK_MEDIUM_MAX = 50
RISK_HIGH_MAX = 80

# Normalisation
DESCRIPTION_MAX_LENGTH = 500
DEFAULT_CURRENCY = "USD"
DEFAULT_BLOCKCHAIN = "ethereum"
DEFAULT_TOKEN_CATEGORY = "general"
NFT_CATEGORY = "nft"
UNKNOWN_TOKEN = "Unknown Token"
UNKNOWN_COLLECTION = "Unknown Collection"
OPENSEA_COLLECTION_URL = "https://opensea.io/collection/{slug}"
TWITTER_URL = "https://twitter.com/{handle}"

# Cultural scoring
THEME_MATCH_BONUS = 40
KEYWORD_MATCH_BONUS = 5
MULTI_KEYWORD_BONUS = 10
MULTI_KEYWORD_THRESHOLD = 2
CATEGORY_MATCH_BONUS = 30
KEYWORD_DENSITY_CAP = 25

CULTURAL_WEIGHT = 0.6
MARKET_WEIGHT = 0.4
THEME_MATCH_WEIGHT = 0.4
NARRATIVE_STRENGTH_WEIGHT = 0.3
SOCIAL_BUZZ_WEIGHT = 0.2
VIRAL_POTENTIAL_WEIGHT = 0.1
MOMENTUM_WEIGHT = 0.3
LIQUIDITY_WEIGHT = 0.3
COMMUNITY_WEIGHT = 0.3
STABILITY_WEIGHT = 0.1

# Risk points
LOW_LIQUIDITY_THRESHOLD = 20
HIGH_VOLATILITY_THRESHOLD = 70
SMALL_MARKET_CAP_USD = 10_000_000
WEAK_COMMUNITY_THRESHOLD = 30
NEW_ASSET_DAYS = 30
LOW_LIQUIDITY_POINTS = 25
HIGH_VOLATILITY_POINTS = 20
SMALL_MARKET_CAP_POINTS = 15
UNVERIFIED_POINTS = 20
WEAK_COMMUNITY_POINTS = 10
NEW_ASSET_POINTS = 15

RISK_FACTOR_LOW_LIQUIDITY = "Low liquidity"
RISK_FACTOR_HIGH_VOLATILITY = "High volatility"
RISK_FACTOR_SMALL_MARKET_CAP = "Small market cap"
RISK_FACTOR_UNVERIFIED = "Unverified asset"
RISK_FACTOR_WEAK_COMMUNITY = "Weak community"
RISK_FACTOR_NEW_ASSET = "Very new asset"
RISK_FACTOR_SCORING_FAILED = "Scoring failed"

# Confidence
BASE_CONFIDENCE = 0.5
COMPLETENESS_BONUS = 0.1
CONSISTENCY_WEIGHT = 0.1
MIN_CONFIDENCE = 0.1
LONG_DESCRIPTION_CHARS = 50

# Conservative record used when scoring throws
FAILED_RELEVANCE = 0
FAILED_CONFIDENCE = 0.1
FAILED_VOLATILITY = 50
FAILED_RISK_SCORE = 100
FAILED_REASONING = "Asset scoring failed - manual review required"

# Reasoning
STRONG_THEME_THRESHOLD = 60
ACTIVE_SOCIAL_THRESHOLD = 50
STRONG_MOMENTUM_THRESHOLD = 60
GOOD_LIQUIDITY_THRESHOLD = 70
MODERATE_RELEVANCE_THRESHOLD = 50
REASON_VERIFIED = "Verified asset"
REASON_MODERATE = "Moderate cultural and market alignment"
REASON_LIMITED = "Limited alignment with cultural theme"

SOURCE_COINGECKO = "CoinGecko"
SOURCE_OPENSEA = "OpenSea"
SOURCE_TWITTER = "Twitter"

__all__ = [
    "ASSET_TYPE_TOKEN",
    "ASSET_TYPE_NFT",
    "RISK_LOW",
    "RISK_MEDIUM",
    "RISK_HIGH",
    "RISK_EXTREME",
    "RISK_LEVELS",
    "RISK_LOW_MAX",
    "RISK_MEDIUM_MAX",
    "RISK_HIGH_MAX",
    "DESCRIPTION_MAX_LENGTH",
    "DEFAULT_CURRENCY",
    "DEFAULT_BLOCKCHAIN",
    "DEFAULT_TOKEN_CATEGORY",
    "NFT_CATEGORY",
    "UNKNOWN_TOKEN",
    "UNKNOWN_COLLECTION",
    "OPENSEA_COLLECTION_URL",
    "TWITTER_URL",
    "THEME_MATCH_BONUS",
    "KEYWORD_MATCH_BONUS",
    "MULTI_KEYWORD_BONUS",
    "MULTI_KEYWORD_THRESHOLD",
    "CATEGORY_MATCH_BONUS",
    "KEYWORD_DENSITY_CAP",
    "CULTURAL_WEIGHT",
    "MARKET_WEIGHT",
    "THEME_MATCH_WEIGHT",
    "NARRATIVE_STRENGTH_WEIGHT",
    "SOCIAL_BUZZ_WEIGHT",
    "VIRAL_POTENTIAL_WEIGHT",
    "MOMENTUM_WEIGHT",
    "LIQUIDITY_WEIGHT",
    "COMMUNITY_WEIGHT",
    "STABILITY_WEIGHT",
    "LOW_LIQUIDITY_THRESHOLD",
    "HIGH_VOLATILITY_THRESHOLD",
    "SMALL_MARKET_CAP_USD",
    "WEAK_COMMUNITY_THRESHOLD",
    "NEW_ASSET_DAYS",
    "LOW_LIQUIDITY_POINTS",
    "HIGH_VOLATILITY_POINTS",
    "SMALL_MARKET_CAP_POINTS",
    "UNVERIFIED_POINTS",
    "WEAK_COMMUNITY_POINTS",
    "NEW_ASSET_POINTS",
    "RISK_FACTOR_LOW_LIQUIDITY",
    "RISK_FACTOR_HIGH_VOLATILITY",
    "RISK_FACTOR_SMALL_MARKET_CAP",
    "RISK_FACTOR_UNVERIFIED",
    "RISK_FACTOR_WEAK_COMMUNITY",
    "RISK_FACTOR_NEW_ASSET",
    "RISK_FACTOR_SCORING_FAILED",
    "BASE_CONFIDENCE",
    "COMPLETENESS_BONUS",
    "CONSISTENCY_WEIGHT",
    "MIN_CONFIDENCE",
    "LONG_DESCRIPTION_CHARS",
    "FAILED_RELEVANCE",
    "FAILED_CONFIDENCE",
    "FAILED_VOLATILITY",
    "FAILED_RISK_SCORE",
    "FAILED_REASONING",
    "STRONG_THEME_THRESHOLD",
    "ACTIVE_SOCIAL_THRESHOLD",
    "STRONG_MOMENTUM_THRESHOLD",
    "GOOD_LIQUIDITY_THRESHOLD",
    "MODERATE_RELEVANCE_THRESHOLD",
    "REASON_VERIFIED",
    "REASON_MODERATE",
    "REASON_LIMITED",
    "SOURCE_COINGECKO",
    "SOURCE_OPENSEA",
    "SOURCE_TWITTER",
]
