import random
from datetime import datetime, timedelta
from typing import Optional

from .constant import *
from .interface import IDefaultsFiller


class RandomDefaultsFiller(IDefaultsFiller):
    """Pseudo-random plausible values. Pass ``seed`` for reproducible output."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)

    def token_price(self, market_cap: float) -> float:
        for floor, low, high in TOKEN_PRICE_BUCKETS:
            if market_cap > floor or floor == 0:
                return round(self.rng.uniform(low, high), 6)
        return 0.0

    def social_mentions(self) -> int:
        return self.rng.randrange(MAX_SOCIAL_MENTIONS)

    def nft_total_supply(self) -> int:
        return self.rng.randint(NFT_SUPPLY_MIN, NFT_SUPPLY_MAX)

    def nft_volume_24h(self) -> float:
        return self.rng.random() * NFT_VOLUME_24H_MAX

    def nft_change_24h(self) -> float:
        return (self.rng.random() - 0.5) * NFT_CHANGE_24H_SPAN

    def nft_sales_24h(self) -> int:
        return self.rng.randint(0, NFT_SALES_24H_MAX)

    def nft_owners(self) -> int:
        return self.rng.randint(NFT_OWNERS_MIN, NFT_OWNERS_MAX)

    def created_date(self, now: datetime) -> datetime:
        return now - timedelta(days=self.rng.random() * NFT_MAX_AGE_DAYS)


class StrictDefaultsFiller(IDefaultsFiller):
    """Zero values: missing upstream data is reported as missing."""

    def token_price(self, market_cap: float) -> float:
        return 0.0

    def social_mentions(self) -> int:
        return 0

    def nft_total_supply(self) -> int:
        return 0

    def nft_volume_24h(self) -> float:
        return 0.0

    def nft_change_24h(self) -> float:
        return 0.0

    def nft_sales_24h(self) -> int:
        return 0

    def nft_owners(self) -> int:
        return 0

    def created_date(self, now: datetime) -> Optional[datetime]:
        return None


def new_defaults_filler(enabled: bool, seed: Optional[int] = None) -> IDefaultsFiller:
    """Random filler when enabled, strict filler otherwise."""
    if enabled:
        return RandomDefaultsFiller(seed=seed)
    return StrictDefaultsFiller()


__all__ = [
    "RandomDefaultsFiller",
    "StrictDefaultsFiller",
    "new_defaults_filler",
]
