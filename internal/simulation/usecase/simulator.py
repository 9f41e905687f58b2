import random
from typing import List, Optional

from pkg.logger.logger import Logger
from internal.scoring.type import ScoredAsset
from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..interface import ISimulator
from ..type import (
    BacktestAsset,
    BacktestResult,
    Config,
    Portfolio,
    Projections,
    RiskMetrics,
    SimulationResult,
)
from .helpers import (
    allocate,
    asset_performance,
    average_risk,
    backtest_summary,
    correlation_matrix,
    daily_series,
    diversification,
    liquidity_score,
    parse_date,
    recommendations,
    round2,
    select_assets,
    sector_exposure,
    time_multiplier,
    validate_backtest,
    validate_simulation,
)


class Simulator(ISimulator):
    """Builds illustrative portfolios and synthetic backtests.

    Projections are closed-form heuristics over the assets' risk buckets,
    not forecasts. All randomness flows through one ``random.Random`` so a
    seeded simulator replays the same matrices and series.
    """

    def __init__(self, config: Config, rng: Optional[random.Random] = None, logger: Optional[Logger] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.logger = logger

    def build_portfolio(
        self,
        assets: List[ScoredAsset],
        portfolio_size: float,
        risk_tolerance: str = DEFAULT_TOLERANCE,
        time_horizon: str = DEFAULT_HORIZON,
    ) -> SimulationResult:
        validate_simulation(portfolio_size, risk_tolerance, time_horizon)

        selected = select_assets(assets, risk_tolerance)
        positions = allocate(selected, portfolio_size, risk_tolerance)

        avg_risk = average_risk(selected)
        diversification_score = diversification(len(selected))
        risk_mult = RISK_MULTIPLIER[risk_tolerance]
        expected_return = (BASE_RETURN + avg_risk * RETURN_RISK_PREMIUM) * risk_mult * time_multiplier(time_horizon)
        volatility = (BASE_VOLATILITY + avg_risk * VOLATILITY_RISK_FACTOR) * risk_mult

        result = SimulationResult(
            portfolio=Portfolio(
                assets=positions,
                total_allocation=TOTAL_ALLOCATION if positions else 0.0,
                risk_score=round_half_up(avg_risk),
                diversification_score=diversification_score,
            ),
            projections=Projections(
                timeframe=time_horizon,
                expected_return=round2(expected_return),
                volatility=round2(volatility),
                sharpe_ratio=round2(expected_return / volatility),
                max_drawdown=round2(volatility * DRAWDOWN_FACTOR),
            ),
            risk_metrics=RiskMetrics(
                var_95=round2(portfolio_size * VAR_95_FACTOR),
                correlation_matrix=correlation_matrix(len(selected), self.rng),
                sector_exposure=sector_exposure(positions),
                liquidity_score=liquidity_score(selected),
            ),
            recommendations=recommendations(
                selected, positions, avg_risk, diversification_score, risk_tolerance, time_horizon
            ),
        )

        if self.logger:
            self.logger.info(
                "[Simulator] Portfolio built",
                extra={
                    "candidates": len(assets),
                    "selected": len(selected),
                    "risk_tolerance": risk_tolerance,
                    "time_horizon": time_horizon,
                    "risk_score": result.portfolio.risk_score,
                },
            )
        return result

    def run_backtest(
        self,
        assets: List[BacktestAsset],
        start_date: str,
        end_date: str,
        initial_value: float,
    ) -> BacktestResult:
        days = validate_backtest(assets, start_date, end_date, initial_value)

        points, final_value = daily_series(parse_date(start_date, "startDate"), days, initial_value, self.rng)
        result = BacktestResult(
            summary=backtest_summary(start_date, end_date, initial_value, final_value, points),
            time_series=points,
            asset_performance=asset_performance(assets, self.rng),
        )

        if self.logger:
            self.logger.info(
                "[Simulator] Backtest completed",
                extra={"assets": len(assets), "days": days, "total_return": result.summary.total_return},
            )
        return result


__all__ = ["Simulator"]
