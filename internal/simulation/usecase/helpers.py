"""Closed-form portfolio heuristics and synthetic backtest math."""

import math
import random
import re
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple

from internal.orchestrator.constant import TIME_HORIZON_LONG, TIME_HORIZON_MEDIUM, TIME_HORIZON_SHORT
from internal.orchestrator.type import PipelineOptions
from internal.scoring.type import ScoredAsset
from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..errors import ErrInvalidBacktest, ErrInvalidSimulation
from ..type import (
    AssetPerformance,
    BacktestAsset,
    BacktestPoint,
    BacktestSummary,
    PortfolioAsset,
    SimulationRecommendations,
)


def round2(value: float) -> float:
    return round_half_up(value * 100) / 100


def is_monthly(time_horizon: str) -> bool:
    return MONTH_SUFFIX in time_horizon


def pipeline_time_horizon(time_horizon: str) -> str:
    if is_monthly(time_horizon):
        return TIME_HORIZON_SHORT
    if time_horizon == HORIZON_ONE_YEAR:
        return TIME_HORIZON_MEDIUM
    return TIME_HORIZON_LONG


def pipeline_options(
    risk_tolerance: str,
    time_horizon: str,
    max_assets: int = DEFAULT_SIMULATION_MAX_ASSETS,
    include_nfts: bool = True,
    include_tokens: bool = True,
    use_cache: bool = True,
) -> PipelineOptions:
    """Map simulation parameters onto the pipeline's options."""
    return PipelineOptions(
        use_cache=use_cache,
        max_assets=max_assets,
        include_nfts=include_nfts,
        include_tokens=include_tokens,
        risk_tolerance=PIPELINE_RISK_TOLERANCE[risk_tolerance],
        time_horizon=pipeline_time_horizon(time_horizon),
        min_confidence=PIPELINE_MIN_CONFIDENCE[risk_tolerance],
    )


def validate_simulation(portfolio_size: float, risk_tolerance: str, time_horizon: str) -> None:
    if risk_tolerance not in TOLERANCES:
        raise ErrInvalidSimulation(f"risk tolerance must be one of {', '.join(TOLERANCES)}")
    if time_horizon not in HORIZONS:
        raise ErrInvalidSimulation(f"time horizon must be one of {', '.join(HORIZONS)}")
    if not 0 < portfolio_size <= MAX_PORTFOLIO_SIZE:
        raise ErrInvalidSimulation("portfolio size must be positive and at most 1,000,000")


def select_assets(assets: List[ScoredAsset], risk_tolerance: str) -> List[ScoredAsset]:
    """Filter by tolerance, then keep the first 5/8/10 in ranking order."""
    if risk_tolerance == TOLERANCE_CONSERVATIVE:
        eligible = [a for a in assets if a.risk_level in CONSERVATIVE_RISK_LEVELS]
    elif risk_tolerance == TOLERANCE_AGGRESSIVE:
        eligible = list(assets)
    else:
        eligible = [a for a in assets if a.risk_level != EXCLUDED_MODERATE_RISK_LEVEL]
    return eligible[: CANDIDATE_CAP[risk_tolerance]]


def entry_price(asset: ScoredAsset) -> Optional[float]:
    inner = asset.asset
    current = inner.price.current if inner.price is not None else None
    return current or inner.floor_price or None


def allocate(assets: List[ScoredAsset], portfolio_size: float, risk_tolerance: str) -> List[PortfolioAsset]:
    """Relevance-weighted allocation, capped per asset, normalized to exactly 100.

    Rounding residue is folded into the largest position.
    """
    if not assets:
        return []

    cap = ALLOCATION_CAP[risk_tolerance]
    total_score = sum(a.relevance_score for a in assets)

    positions = []
    for asset in assets:
        if total_score > 0:
            base = asset.relevance_score / total_score * TOTAL_ALLOCATION
        else:
            base = TOTAL_ALLOCATION / len(assets)
        base = min(base, cap)
        price = entry_price(asset)
        current = asset.asset.price.current if asset.asset.price is not None else None
        positions.append(
            PortfolioAsset(
                id=asset.id,
                type=asset.type,
                allocation=round2(base),
                entry_price=price,
                quantity=portfolio_size * (base / 100) / current if current else 0.0,
            )
        )

    total = sum(p.allocation for p in positions)
    for position in positions:
        position.allocation = round2(position.allocation / total * TOTAL_ALLOCATION)

    residue = round2(TOTAL_ALLOCATION - sum(p.allocation for p in positions))
    if residue:
        largest = max(positions, key=lambda p: p.allocation)
        largest.allocation = round2(largest.allocation + residue)
    return positions


def risk_value(level: str) -> int:
    return RISK_LEVEL_VALUES.get(level, UNKNOWN_RISK_VALUE)


def average_risk(assets: List[ScoredAsset]) -> float:
    if not assets:
        return 0.0
    return sum(risk_value(a.risk_level) for a in assets) / len(assets)


def diversification(count: int) -> int:
    return min(MAX_DIVERSIFICATION, count * DIVERSIFICATION_PER_ASSET)


def time_multiplier(time_horizon: str) -> float:
    if is_monthly(time_horizon):
        return MONTHS_TIME_MULTIPLIER
    if time_horizon == HORIZON_ONE_YEAR:
        return ONE_YEAR_TIME_MULTIPLIER
    return LONG_TIME_MULTIPLIER


def correlation_matrix(size: int, rng: random.Random) -> List[List[float]]:
    """Symmetric matrix with unit diagonal and pairwise values in [0.2, 0.8]."""
    matrix = [[1.0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            value = round2(rng.random() * CORRELATION_SPAN + CORRELATION_MIN)
            matrix[i][j] = value
            matrix[j][i] = value
    return matrix


def sector_exposure(positions: List[PortfolioAsset]) -> Dict[str, float]:
    sectors: Dict[str, float] = {}
    for position in positions:
        sector = SECTOR_TOKEN if position.type == ASSET_TYPE_TOKEN else SECTOR_NFT
        sectors[sector] = round2(sectors.get(sector, 0.0) + position.allocation)
    return sectors


def liquidity_score(assets: List[ScoredAsset]) -> int:
    if not assets:
        return 0
    total = sum(a.scores.market.liquidity or DEFAULT_LIQUIDITY for a in assets)
    return round_half_up(total / len(assets))


def recommendations(
    assets: List[ScoredAsset],
    positions: List[PortfolioAsset],
    risk_score: float,
    diversification_score: float,
    risk_tolerance: str,
    time_horizon: str,
) -> SimulationRecommendations:
    rebalancing = []
    if any(p.allocation > CONCENTRATION_THRESHOLD for p in positions):
        rebalancing.append(REBALANCE_CONCENTRATION)
    if risk_tolerance == TOLERANCE_CONSERVATIVE and len(positions) < MIN_CONSERVATIVE_ASSETS:
        rebalancing.append(REBALANCE_DIVERSIFY)
    rebalancing.append(REBALANCE_SCHEDULE)

    mitigation = []
    if risk_score > HIGH_RISK_THRESHOLD:
        mitigation.extend(MITIGATION_HIGH_RISK)
    if diversification_score < LOW_DIVERSIFICATION_THRESHOLD:
        mitigation.append(MITIGATION_DIVERSIFY)
    mitigation.extend(MITIGATION_ALWAYS)

    opportunities = []
    momentum = [a.name for a in assets if a.scores.market.momentum > HIGH_MOMENTUM_THRESHOLD]
    if momentum:
        opportunities.append(f"Monitor high-momentum assets: {', '.join(momentum[:HIGH_MOMENTUM_LISTED])}")
    opportunities.append(OPPORTUNITY_SHORT if is_monthly(time_horizon) else OPPORTUNITY_LONG)
    opportunities.append(OPPORTUNITY_ALWAYS)

    return SimulationRecommendations(
        rebalancing=rebalancing,
        risk_mitigation=mitigation,
        opportunities=opportunities,
    )


def parse_date(value: str, label: str) -> date:
    if not isinstance(value, str) or not re.match(DATE_PATTERN, value):
        raise ErrInvalidBacktest(f"{label} must use the YYYY-MM-DD format")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise ErrInvalidBacktest(f"{label} is not a valid date: {e}")


def validate_backtest(
    assets: List[BacktestAsset], start_date: str, end_date: str, initial_value: float
) -> int:
    """Check a backtest request and return its length in days."""
    if not MIN_BACKTEST_ASSETS <= len(assets) <= MAX_BACKTEST_ASSETS:
        raise ErrInvalidBacktest("a backtest needs between 1 and 10 assets")
    for asset in assets:
        if asset.type not in ASSET_TYPES:
            raise ErrInvalidBacktest(f"asset {asset.id} has unsupported type {asset.type}")
        if not 0 <= asset.allocation <= TOTAL_ALLOCATION:
            raise ErrInvalidBacktest(f"asset {asset.id} allocation must be between 0 and 100")
    if not 0 < initial_value <= MAX_INITIAL_VALUE:
        raise ErrInvalidBacktest("initial value must be positive and at most 1,000,000")

    start = parse_date(start_date, "startDate")
    end = parse_date(end_date, "endDate")
    days = (end - start).days
    if days <= 0:
        raise ErrInvalidBacktest("endDate must be after startDate")
    return days


def daily_series(
    start: date, days: int, initial_value: float, rng: random.Random
) -> Tuple[List[BacktestPoint], float]:
    """Compound a biased uniform daily return, (u - 0.45) * 0.05, for each day.

    Returns the rounded series and the unrounded final value.
    """
    value = initial_value
    points = []
    for i in range(days):
        daily_return = (rng.random() - DAILY_RETURN_BIAS) * DAILY_RETURN_SCALE
        value *= 1 + daily_return
        points.append(
            BacktestPoint(
                date=(start + timedelta(days=i)).strftime(DATE_FORMAT),
                value=round2(value),
                return_pct=round_half_up(daily_return * 10000) / 100,
            )
        )
    return points, value


def backtest_summary(
    start_date: str,
    end_date: str,
    initial_value: float,
    final_value: float,
    points: List[BacktestPoint],
) -> BacktestSummary:
    days = len(points)
    total_return = (final_value - initial_value) / initial_value * 100
    volatility = math.sqrt(sum(p.return_pct ** 2 for p in points) / days) * math.sqrt(TRADING_DAYS_PER_YEAR)
    annualized = (final_value / initial_value) ** (DAYS_PER_YEAR / days) - 1

    return BacktestSummary(
        start_date=start_date,
        end_date=end_date,
        initial_value=initial_value,
        final_value=round2(final_value),
        total_return=round2(total_return),
        annualized_return=round_half_up(annualized * 10000) / 100,
        volatility=round2(volatility),
        sharpe_ratio=round2(total_return / volatility) if volatility else 0.0,
    )


def asset_performance(assets: List[BacktestAsset], rng: random.Random) -> List[AssetPerformance]:
    return [
        AssetPerformance(
            id=a.id,
            type=a.type,
            allocation=a.allocation,
            return_pct=round2(rng.random() * ASSET_RETURN_SPAN + ASSET_RETURN_MIN),
        )
        for a in assets
    ]
