"""Orchestrator Domain: the cultural arbitrage pipeline."""

from .constant import *
from .interface import IOrchestrator
from .type import (
    Config,
    PipelineOptions,
    ProcessingInfo,
    Recommendations,
    ResultMetadata,
    TrendResult,
)
from .usecase.new import New as NewOrchestrator

__all__ = [
    "IOrchestrator",
    "Config",
    "PipelineOptions",
    "ProcessingInfo",
    "Recommendations",
    "ResultMetadata",
    "TrendResult",
    "NewOrchestrator",
    "PIPELINE_VERSION",
    "RISK_TOLERANCES",
    "TIME_HORIZONS",
]
