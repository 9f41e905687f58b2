"""Constants for the NFT marketplace adapter."""

SERVICE_NAME = "OpenSeaService"
API_KEY_HEADER = "X-API-KEY"

# Endpoints
COLLECTION_PATH = "/collections/{slug}"
COLLECTION_STATS_PATH = "/collections/{slug}/stats"
COLLECTIONS_PATH = "/collections"
COLLECTION_NFTS_PATH = "/collections/{slug}/nfts"
OPENSEA_COLLECTION_URL = "https://opensea.io/collection/{slug}"

# Request limits
MAX_SEARCH_LIMIT = 100
MAX_ASSETS_LIMIT = 200
DEFAULT_SEARCH_LIMIT = 20
DEFAULT_ASSETS_LIMIT = 20
DEFAULT_FIND_LIMIT = 15
TRENDING_REQUEST_LIMIT = 20
SORT_PRICE = "price"
SORT_RARITY = "rarity"
SORT_LISTED_AT = "listed_at"
VALID_SORTS = (SORT_PRICE, SORT_RARITY, SORT_LISTED_AT)

# find_relevant_nfts fan-out
SEARCH_KEYWORD_LIMIT = 3
SEARCH_RESULTS_PER_KEYWORD = 5
TRENDING_LIMIT = 10
TOP_ASSETS_COUNT = 5
TOP_ASSETS_MIN_RELEVANCE = 50

# Relevance floors and boosts
KEYWORD_MATCH_FLOOR = 25
TRENDING_MATCH_FLOOR = 20
TRENDING_BOOST = 15

# Match scoring
NAME_MATCH_BONUS = 35
DESCRIPTION_MATCH_BONUS = 25
NARRATIVE_KEYWORD = 60
NARRATIVE_DEFAULT = 30
UTILITY_VERIFIED = 20
UTILITY_UNVERIFIED = 10
AESTHETIC_TERMS = ("art", "design", "aesthetic", "style", "visual", "creative", "artistic")
LIQUIDITY_WEIGHT = 0.25
MOMENTUM_WEIGHT = 0.2
AESTHETIC_WEIGHT = 0.3
NARRATIVE_WEIGHT = 0.25

# Reasoning thresholds
STRONG_DAILY_CHANGE_PCT = 10
HIGH_DAILY_VOLUME_ETH = 50
STRONG_COMMUNITY_OWNERS = 1000
DEFAULT_REASONING = "General cultural relevance detected"

# Verification states
STATUS_VERIFIED = "verified"
STATUS_SAFELISTED = "safelisted"
STATUS_UNVERIFIED = "unverified"

# Normalisation defaults
DEFAULT_BLOCKCHAIN = "ethereum"
DEFAULT_SYMBOL = "ETH"
UNKNOWN_COLLECTION = "Unknown Collection"
DESCRIPTION_TEMPLATE = "{name} is an NFT collection with unique digital assets."
CONTRACT_ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
WEI_PER_ETH = 10**18

__all__ = [
    "SERVICE_NAME",
    "API_KEY_HEADER",
    "COLLECTION_PATH",
    "COLLECTION_STATS_PATH",
    "COLLECTIONS_PATH",
    "COLLECTION_NFTS_PATH",
    "OPENSEA_COLLECTION_URL",
    "MAX_SEARCH_LIMIT",
    "MAX_ASSETS_LIMIT",
    "DEFAULT_SEARCH_LIMIT",
    "DEFAULT_ASSETS_LIMIT",
    "DEFAULT_FIND_LIMIT",
    "TRENDING_REQUEST_LIMIT",
    "SORT_PRICE",
    "SORT_RARITY",
    "SORT_LISTED_AT",
    "VALID_SORTS",
    "SEARCH_KEYWORD_LIMIT",
    "SEARCH_RESULTS_PER_KEYWORD",
    "TRENDING_LIMIT",
    "TOP_ASSETS_COUNT",
    "TOP_ASSETS_MIN_RELEVANCE",
    "KEYWORD_MATCH_FLOOR",
    "TRENDING_MATCH_FLOOR",
    "TRENDING_BOOST",
    "NAME_MATCH_BONUS",
    "DESCRIPTION_MATCH_BONUS",
    "NARRATIVE_KEYWORD",
    "NARRATIVE_DEFAULT",
    "UTILITY_VERIFIED",
    "UTILITY_UNVERIFIED",
    "AESTHETIC_TERMS",
    "LIQUIDITY_WEIGHT",
    "MOMENTUM_WEIGHT",
    "AESTHETIC_WEIGHT",
    "NARRATIVE_WEIGHT",
    "STRONG_DAILY_CHANGE_PCT",
    "HIGH_DAILY_VOLUME_ETH",
    "STRONG_COMMUNITY_OWNERS",
    "DEFAULT_REASONING",
    "STATUS_VERIFIED",
    "STATUS_SAFELISTED",
    "STATUS_UNVERIFIED",
    "DEFAULT_BLOCKCHAIN",
    "DEFAULT_SYMBOL",
    "UNKNOWN_COLLECTION",
    "DESCRIPTION_TEMPLATE",
    "CONTRACT_ADDRESS_PATTERN",
    "WEI_PER_ETH",
]
