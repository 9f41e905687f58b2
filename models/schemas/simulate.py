"""Portfolio simulation request schemas."""

from typing import Any, List, Literal

from pydantic import Field, field_validator

from internal.simulation.type import BacktestAsset
from models.schemas.base import CamelModel


class SimulateOptions(CamelModel):
    max_assets: int = Field(default=10, gt=0, le=20)
    include_nfts: bool = Field(default=True, alias="includeNFTs")
    include_tokens: bool = True
    rebalance_frequency: Literal["never", "monthly", "quarterly"] = "quarterly"
    use_cache: bool = True

    @field_validator("rebalance_frequency", mode="before")
    @classmethod
    def lower_frequency(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class SimulateRequest(CamelModel):
    """Body of POST /api/simulate.

    A blank vibe falls back to "trend". Enum fields are case-insensitive and
    the portfolio size may arrive as a numeric string.
    """
    vibe: str = Field(default="trend", max_length=200)
    portfolio_size: float = Field(gt=0, le=1_000_000, description="Portfolio size in USD")
    risk_tolerance: Literal["conservative", "moderate", "aggressive"] = "moderate"
    time_horizon: Literal["1m", "3m", "6m", "1y", "2y"] = "6m"
    options: SimulateOptions = Field(default_factory=SimulateOptions)

    @field_validator("vibe", mode="before")
    @classmethod
    def default_vibe(cls, value: Any) -> Any:
        if value is None:
            return "trend"
        if isinstance(value, str):
            return value.strip() or "trend"
        return value

    @field_validator("risk_tolerance", "time_horizon", mode="before")
    @classmethod
    def lower_enum(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class BacktestAssetModel(CamelModel):
    id: str
    type: Literal["token", "nft_collection"]
    allocation: float = Field(ge=0, le=100)

    def to_asset(self) -> BacktestAsset:
        return BacktestAsset(id=self.id, type=self.type, allocation=self.allocation)


class BacktestRequest(CamelModel):
    """Body of POST /api/simulate/backtest."""
    assets: List[BacktestAssetModel] = Field(min_length=1, max_length=10)
    start_date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    end_date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    initial_value: float = Field(gt=0, le=1_000_000)
