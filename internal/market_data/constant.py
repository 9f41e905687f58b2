"""Constants for the token market-data adapter."""

SERVICE_NAME = "CoinGeckoService"
API_KEY_HEADER = "x-cg-demo-api-key"

# Endpoints
COIN_PATH = "/coins/{token_id}"
SIMPLE_PRICE_PATH = "/simple/price"
TRENDING_PATH = "/search/trending"
SEARCH_PATH = "/search"

DEFAULT_VS_CURRENCY = "usd"
DEFAULT_SEARCH_LIMIT = 10
DEFAULT_FIND_LIMIT = 20
UNRANKED_MARKET_CAP_RANK = 999999

# find_relevant_tokens fan-out
SEARCH_KEYWORD_LIMIT = 5
SEARCH_RESULTS_PER_KEYWORD = 5
TRENDING_LIMIT = 10

# Relevance floors and boosts
KEYWORD_MATCH_FLOOR = 30
TRENDING_MATCH_FLOOR = 25
TRENDING_BOOST = 10

# Match scoring
NAME_MATCH_BONUS = 30
SYMBOL_MATCH_BONUS = 25
NARRATIVE_MATCH_KEYWORD = 50
NARRATIVE_MATCH_DEFAULT = 20
LIQUIDITY_WEIGHT = 0.2
MOMENTUM_WEIGHT = 0.3
NARRATIVE_WEIGHT = 0.4

# Reasoning thresholds
STRONG_MOMENTUM_PCT = 5
HIGH_VOLUME_USD = 10_000_000
ESTABLISHED_MARKET_CAP_USD = 100_000_000
DEFAULT_REASONING = "General market correlation detected"

__all__ = [
    "SERVICE_NAME",
    "API_KEY_HEADER",
    "COIN_PATH",
    "SIMPLE_PRICE_PATH",
    "TRENDING_PATH",
    "SEARCH_PATH",
    "DEFAULT_VS_CURRENCY",
    "DEFAULT_SEARCH_LIMIT",
    "DEFAULT_FIND_LIMIT",
    "UNRANKED_MARKET_CAP_RANK",
    "SEARCH_KEYWORD_LIMIT",
    "SEARCH_RESULTS_PER_KEYWORD",
    "TRENDING_LIMIT",
    "KEYWORD_MATCH_FLOOR",
    "TRENDING_MATCH_FLOOR",
    "TRENDING_BOOST",
    "NAME_MATCH_BONUS",
    "SYMBOL_MATCH_BONUS",
    "NARRATIVE_MATCH_KEYWORD",
    "NARRATIVE_MATCH_DEFAULT",
    "LIQUIDITY_WEIGHT",
    "MOMENTUM_WEIGHT",
    "NARRATIVE_WEIGHT",
    "STRONG_MOMENTUM_PCT",
    "HIGH_VOLUME_USD",
    "ESTABLISHED_MARKET_CAP_USD",
    "DEFAULT_REASONING",
]
