from typing import List, Protocol, runtime_checkable

from internal.scoring.type import ScoredAsset

from .type import BacktestAsset, BacktestResult, SimulationResult


@runtime_checkable
class ISimulator(Protocol):
    """Portfolio illustration and synthetic backtesting."""

    def build_portfolio(
        self,
        assets: List[ScoredAsset],
        portfolio_size: float,
        risk_tolerance: str,
        time_horizon: str,
    ) -> SimulationResult: ...

    def run_backtest(
        self,
        assets: List[BacktestAsset],
        start_date: str,
        end_date: str,
        initial_value: float,
    ) -> BacktestResult: ...


__all__ = ["ISimulator"]
