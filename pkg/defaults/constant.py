# Token price buckets: (market cap floor, low price, high price), checked in order
TOKEN_PRICE_BUCKETS = (
    (1_000_000_000, 10.0, 1000.0),
    (100_000_000, 1.0, 100.0),
    (1_000_000, 0.01, 10.0),
    (0, 0.0001, 1.0),
)

MAX_SOCIAL_MENTIONS = 1000

# NFT collection fallbacks
NFT_SUPPLY_MIN = 1000
NFT_SUPPLY_MAX = 9999
NFT_VOLUME_24H_MAX = 100.0
NFT_CHANGE_24H_SPAN = 20.0
NFT_SALES_24H_MAX = 49
NFT_OWNERS_MIN = 100
NFT_OWNERS_MAX = 2099
NFT_MAX_AGE_DAYS = 365

__all__ = [
    "TOKEN_PRICE_BUCKETS",
    "MAX_SOCIAL_MENTIONS",
    "NFT_SUPPLY_MIN",
    "NFT_SUPPLY_MAX",
    "NFT_VOLUME_24H_MAX",
    "NFT_CHANGE_24H_SPAN",
    "NFT_SALES_24H_MAX",
    "NFT_OWNERS_MIN",
    "NFT_OWNERS_MAX",
    "NFT_MAX_AGE_DAYS",
]
