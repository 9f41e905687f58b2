from typing import Any, List, Optional, Protocol, runtime_checkable

from .type import (
    ErrorResponse,
    MarketContext,
    NormalizedAsset,
    NormalizedResponse,
    ScoredAsset,
    ScoringContext,
)


@runtime_checkable
class IScorer(Protocol):
    """Normalizes provider records and scores them against a cultural query."""

    def normalize_batch(self, records: List[Any], source: str) -> List[NormalizedAsset]: ...

    def score_asset(
        self,
        asset: NormalizedAsset,
        context: ScoringContext,
        market: Optional[MarketContext] = None,
    ) -> ScoredAsset: ...

    def score_batch(
        self,
        assets: List[NormalizedAsset],
        context: ScoringContext,
        market: Optional[MarketContext] = None,
    ) -> List[ScoredAsset]: ...

    def wrap_success(
        self,
        data: Any,
        source: str,
        cached: bool = False,
        processing_time: float = 0,
        confidence: float = 1.0,
    ) -> NormalizedResponse: ...

    def wrap_error(
        self,
        error: Any,
        code: str,
        source: str,
        retryable: bool = True,
        request_id: Optional[str] = None,
    ) -> ErrorResponse: ...


__all__ = ["IScorer"]
