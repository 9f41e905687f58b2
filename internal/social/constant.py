"""Constants for the social adapter."""

SERVICE_NAME = "SocialService"
TWITTER_SERVICE_NAME = "Twitter"
FARCASTER_SERVICE_NAME = "Farcaster"

# Endpoints
TWITTER_TRENDS_PATH = "/trends/place.json"
TWITTER_SEARCH_PATH = "/tweets/search/recent"
FARCASTER_SEARCH_PATH = "/casts/search"
FARCASTER_TRENDING_PATH = "/casts/trending"
TWEET_URL = "https://twitter.com/i/web/status/{id}"
GLOBAL_LOCATION = "global"
GLOBAL_WOEID = "1"

# Request parameters
TWEET_FIELDS = "created_at,author_id,public_metrics,context_annotations"
USER_FIELDS = "name,username,verified,public_metrics"
MAX_TWITTER_RESULTS = 100
MAX_FARCASTER_RESULTS = 100
DEFAULT_MENTION_COUNT = 20
DEFAULT_CAST_LIMIT = 50
ANALYSIS_MENTION_COUNT = 100
ANALYSIS_CAST_LIMIT = 50
INFLUENCER_SAMPLE_SIZE = 50
DEFAULT_INFLUENCER_LIMIT = 10

PLATFORM_TWITTER = "twitter"
PLATFORM_FARCASTER = "farcaster"
PLATFORM_BOTH = "both"
VALID_PLATFORMS = (PLATFORM_TWITTER, PLATFORM_FARCASTER, PLATFORM_BOTH)

# Sentiment
SENTIMENT_POSITIVE = "positive"
SENTIMENT_NEGATIVE = "negative"
SENTIMENT_NEUTRAL = "neutral"
SENTIMENT_SCORES = {SENTIMENT_POSITIVE: 1, SENTIMENT_NEGATIVE: -1, SENTIMENT_NEUTRAL: 0}
DEFAULT_POSITIVE_WORDS = ("good", "great", "amazing", "love", "awesome", "fantastic", "bullish", "moon", "rocket")
DEFAULT_NEGATIVE_WORDS = ("bad", "terrible", "hate", "awful", "scam", "dump", "bearish", "crash", "rekt")

# Momentum
MOMENTUM_RISING = "rising"
MOMENTUM_STABLE = "stable"
MOMENTUM_DECLINING = "declining"
RECENT_WINDOW_HOURS = 6
RISING_RATIO = 0.4
DECLINING_RATIO = 0.2

# Analysis thresholds
TOP_INFLUENCER_FOLLOWERS = 10_000
HIGH_INFLUENCER_FOLLOWERS = 50_000
TOP_INFLUENCERS_COUNT = 5
TOP_CHANNELS_COUNT = 5
HIGH_ENGAGEMENT_RATIO = 0.02
FARCASTER_BASE_RELEVANCE = 50

# Fallback data
FALLBACK_TWITTER_TRENDS = (
    ("AI", "AI", 50000),
    ("crypto", "crypto", 30000),
    ("NFTs", "NFT", 20000),
    ("web3", "web3", 15000),
    ("blockchain", "blockchain", 12000),
)
FALLBACK_CAST_HASH = "fallback1"
FALLBACK_CAST_CONTENT = "Excited about the future of decentralized social media!"
FALLBACK_CAST_USERNAME = "cryptouser"
FALLBACK_CAST_DISPLAY_NAME = "Crypto User"
FALLBACK_CAST_FID = 1234
FALLBACK_CAST_FOLLOWERS = 500
FALLBACK_CAST_FOLLOWING = 200
FALLBACK_CAST_REACTIONS = (10, 3, 2)
FALLBACK_CAST_CHANNEL = "crypto"

__all__ = [
    "SERVICE_NAME",
    "TWITTER_SERVICE_NAME",
    "FARCASTER_SERVICE_NAME",
    "TWITTER_TRENDS_PATH",
    "TWITTER_SEARCH_PATH",
    "FARCASTER_SEARCH_PATH",
    "FARCASTER_TRENDING_PATH",
    "TWEET_URL",
    "GLOBAL_LOCATION",
    "GLOBAL_WOEID",
    "TWEET_FIELDS",
    "USER_FIELDS",
    "MAX_TWITTER_RESULTS",
    "MAX_FARCASTER_RESULTS",
    "DEFAULT_MENTION_COUNT",
    "DEFAULT_CAST_LIMIT",
    "ANALYSIS_MENTION_COUNT",
    "ANALYSIS_CAST_LIMIT",
    "INFLUENCER_SAMPLE_SIZE",
    "DEFAULT_INFLUENCER_LIMIT",
    "PLATFORM_TWITTER",
    "PLATFORM_FARCASTER",
    "PLATFORM_BOTH",
    "VALID_PLATFORMS",
    "SENTIMENT_POSITIVE",
    "SENTIMENT_NEGATIVE",
    "SENTIMENT_NEUTRAL",
    "SENTIMENT_SCORES",
    "DEFAULT_POSITIVE_WORDS",
    "DEFAULT_NEGATIVE_WORDS",
    "MOMENTUM_RISING",
    "MOMENTUM_STABLE",
    "MOMENTUM_DECLINING",
    "RECENT_WINDOW_HOURS",
    "RISING_RATIO",
    "DECLINING_RATIO",
    "TOP_INFLUENCER_FOLLOWERS",
    "HIGH_INFLUENCER_FOLLOWERS",
    "TOP_INFLUENCERS_COUNT",
    "TOP_CHANNELS_COUNT",
    "HIGH_ENGAGEMENT_RATIO",
    "FARCASTER_BASE_RELEVANCE",
    "FALLBACK_TWITTER_TRENDS",
    "FALLBACK_CAST_HASH",
    "FALLBACK_CAST_CONTENT",
    "FALLBACK_CAST_USERNAME",
    "FALLBACK_CAST_DISPLAY_NAME",
    "FALLBACK_CAST_FID",
    "FALLBACK_CAST_FOLLOWERS",
    "FALLBACK_CAST_FOLLOWING",
    "FALLBACK_CAST_REACTIONS",
    "FALLBACK_CAST_CHANNEL",
]
