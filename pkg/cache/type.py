from dataclasses import dataclass
from typing import Any

from .constant import *


@dataclass
class CacheConfig:
    """Configuration for the in-memory cache.

    Attributes:
        ttl_short: Seconds for the "short" TTL class (default: 300)
        ttl_medium: Seconds for the "medium" TTL class (default: 1800)
        ttl_long: Seconds for the "long" TTL class (default: 3600)
        max_size: Entry count that triggers eviction (default: 1000)
        sweep_interval: Seconds between background expiry sweeps (default: 300)
    """

    ttl_short: int = DEFAULT_TTL_SHORT
    ttl_medium: int = DEFAULT_TTL_MEDIUM
    ttl_long: int = DEFAULT_TTL_LONG
    max_size: int = DEFAULT_MAX_SIZE
    sweep_interval: float = DEFAULT_SWEEP_INTERVAL

    def __post_init__(self):
        """Validate configuration."""
        if self.ttl_short <= 0 or self.ttl_medium <= 0 or self.ttl_long <= 0:
            raise ValueError(ERROR_INVALID_TTL)
        if not (self.ttl_short <= self.ttl_medium <= self.ttl_long):
            raise ValueError(ERROR_INVALID_TTL_ORDER)
        if self.max_size <= 0:
            raise ValueError(ERROR_INVALID_MAX_SIZE)
        if self.sweep_interval <= 0:
            raise ValueError(ERROR_INVALID_SWEEP_INTERVAL)


@dataclass
class CacheEntry:
    """A stored value with its insertion time and lifetime in seconds."""

    value: Any
    stored_at: float
    ttl: float

    def is_expired(self, now: float) -> bool:
        return now - self.stored_at > self.ttl


__all__ = [
    "CacheConfig",
    "CacheEntry",
]
