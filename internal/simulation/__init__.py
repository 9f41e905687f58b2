"""Simulation Domain: portfolio illustration and synthetic backtests."""

from .constant import *
from .errors import ErrInvalidBacktest, ErrInvalidSimulation
from .interface import ISimulator
from .type import (
    Config,
    PortfolioAsset,
    Portfolio,
    Projections,
    RiskMetrics,
    SimulationRecommendations,
    SimulationResult,
    BacktestAsset,
    BacktestPoint,
    BacktestSummary,
    AssetPerformance,
    BacktestResult,
)
from .usecase.new import New as NewSimulator
from .usecase.helpers import pipeline_options

__all__ = [
    "ErrInvalidBacktest",
    "ErrInvalidSimulation",
    "ISimulator",
    "Config",
    "PortfolioAsset",
    "Portfolio",
    "Projections",
    "RiskMetrics",
    "SimulationRecommendations",
    "SimulationResult",
    "BacktestAsset",
    "BacktestPoint",
    "BacktestSummary",
    "AssetPerformance",
    "BacktestResult",
    "NewSimulator",
    "pipeline_options",
    "TOLERANCES",
    "HORIZONS",
]
