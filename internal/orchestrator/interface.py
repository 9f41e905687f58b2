from typing import Optional, Protocol, runtime_checkable

from .type import PipelineOptions, TrendResult


@runtime_checkable
class IOrchestrator(Protocol):
    """Runs the full cultural arbitrage pipeline for a vibe."""

    async def process_full_pipeline(
        self, vibe: str, options: Optional[PipelineOptions] = None
    ) -> TrendResult: ...


__all__ = ["IOrchestrator"]
