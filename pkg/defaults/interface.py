"""Interface for synthetic value generation.

Adapters never surface a missing number to callers; they ask a defaults
filler instead. The random implementation reproduces plausible-looking
values, the strict one returns zeros and leaves dates unset so missing upstream
data stays visible.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IDefaultsFiller(Protocol):
    """Protocol for filling gaps in provider payloads."""

    def token_price(self, market_cap: float) -> float:
        """Price for a token whose payload carries none."""
        ...

    def social_mentions(self) -> int:
        """Mention count for an asset with no social data."""
        ...

    def nft_total_supply(self) -> int: ...

    def nft_volume_24h(self) -> float: ...

    def nft_change_24h(self) -> float: ...

    def nft_sales_24h(self) -> int: ...

    def nft_owners(self) -> int: ...

    def created_date(self, now: datetime) -> Optional[datetime]:
        """Creation timestamp for a record with none, or None to leave it unset."""
        ...


__all__ = ["IDefaultsFiller"]
