from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constant import *


@dataclass
class Config:
    """Simulation configuration.

    Attributes:
        seed: Seed for the correlation matrix and backtest series, None for
            a fresh sequence per process
    """

    seed: Optional[int] = None


@dataclass
class PortfolioAsset:
    id: str
    type: str
    allocation: float
    entry_price: Optional[float] = None
    quantity: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "allocation": self.allocation,
            "entryPrice": self.entry_price,
            "quantity": self.quantity,
        }


@dataclass
class Portfolio:
    assets: List[PortfolioAsset] = field(default_factory=list)
    total_allocation: float = TOTAL_ALLOCATION
    risk_score: int = 0
    diversification_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "assets": [a.to_dict() for a in self.assets],
            "totalAllocation": self.total_allocation,
            "riskScore": self.risk_score,
            "diversificationScore": self.diversification_score,
        }


@dataclass
class Projections:
    timeframe: str
    expected_return: float
    volatility: float
    sharpe_ratio: float
    max_drawdown: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timeframe": self.timeframe,
            "expectedReturn": self.expected_return,
            "volatility": self.volatility,
            "sharpeRatio": self.sharpe_ratio,
            "maxDrawdown": self.max_drawdown,
        }


@dataclass
class RiskMetrics:
    var_95: float
    correlation_matrix: List[List[float]] = field(default_factory=list)
    sector_exposure: Dict[str, float] = field(default_factory=dict)
    liquidity_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "var95": self.var_95,
            "correlationMatrix": [list(row) for row in self.correlation_matrix],
            "sectorExposure": dict(self.sector_exposure),
            "liquidityScore": self.liquidity_score,
        }


@dataclass
class SimulationRecommendations:
    rebalancing: List[str] = field(default_factory=list)
    risk_mitigation: List[str] = field(default_factory=list)
    opportunities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rebalancing": list(self.rebalancing),
            "riskMitigation": list(self.risk_mitigation),
            "opportunities": list(self.opportunities),
        }


@dataclass
class SimulationResult:
    """Heuristic portfolio illustration built from scored assets."""

    portfolio: Portfolio
    projections: Projections
    risk_metrics: RiskMetrics
    recommendations: SimulationRecommendations

    def to_dict(self) -> Dict[str, Any]:
        return {
            "portfolio": self.portfolio.to_dict(),
            "projections": self.projections.to_dict(),
            "riskMetrics": self.risk_metrics.to_dict(),
            "recommendations": self.recommendations.to_dict(),
        }


@dataclass
class BacktestAsset:
    id: str
    type: str
    allocation: float


@dataclass
class BacktestPoint:
    date: str
    value: float
    return_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "value": self.value, "return": self.return_pct}


@dataclass
class BacktestSummary:
    start_date: str
    end_date: str
    initial_value: float
    final_value: float
    total_return: float
    annualized_return: float
    volatility: float
    sharpe_ratio: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
            "initialValue": self.initial_value,
            "finalValue": self.final_value,
            "totalReturn": self.total_return,
            "annualizedReturn": self.annualized_return,
            "volatility": self.volatility,
            "sharpeRatio": self.sharpe_ratio,
        }


@dataclass
class AssetPerformance:
    id: str
    type: str
    allocation: float
    return_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "allocation": self.allocation,
            "return": self.return_pct,
        }


@dataclass
class BacktestResult:
    """Synthetic daily series for a fixed allocation."""

    summary: BacktestSummary
    time_series: List[BacktestPoint] = field(default_factory=list)
    asset_performance: List[AssetPerformance] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "timeSeries": [p.to_dict() for p in self.time_series],
            "assetPerformance": [a.to_dict() for a in self.asset_performance],
        }
