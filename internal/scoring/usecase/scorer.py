"""Asset scorer."""

import time
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from pkg.logger.logger import Logger

from ..constant import *
from ..errors import ErrNormalizationFailed, ErrUnknownSource
from ..interface import IScorer
from ..type import (
    AssetScores,
    CulturalScores,
    ErrorResponse,
    MarketContext,
    MarketScores,
    NormalizedAsset,
    NormalizedResponse,
    ResponseMetadata,
    RiskAssessment,
    ScoredAsset,
    ScoringContext,
)
from .helpers import (
    confidence_score,
    cultural_scores,
    market_scores,
    reasoning,
    relevance_score,
    risk_assessment,
    sources,
)
from .normalizer import normalize_collection, normalize_token

SOURCE_KIND_COINGECKO = "coingecko"
SOURCE_KIND_OPENSEA = "opensea"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def failed_score(asset: NormalizedAsset, now: datetime) -> ScoredAsset:
    """Conservative record substituted when scoring an asset throws."""
    return ScoredAsset(
        asset=asset,
        scores=AssetScores(
            relevance=FAILED_RELEVANCE,
            confidence=FAILED_CONFIDENCE,
            cultural=CulturalScores(),
            market=MarketScores(volatility=FAILED_VOLATILITY),
            risk=RiskAssessment(
                level=RISK_EXTREME,
                score=FAILED_RISK_SCORE,
                factors=[RISK_FACTOR_SCORING_FAILED],
            ),
        ),
        reasoning=FAILED_REASONING,
        sources=[],
        last_updated=now.isoformat(),
    )


class Scorer(IScorer):
    """Scores NormalizedAssets on cultural fit, market health and risk.

    Scoring is deterministic for a fixed clock: the only time dependency
    is the asset-age risk factor.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utcnow,
        logger: Optional[Logger] = None,
    ):
        self.clock = clock
        self.logger = logger

    def normalize_batch(self, records: List[Any], source: str) -> List[NormalizedAsset]:
        """Normalize provider records, skipping the ones that fail.

        Raises:
            ErrUnknownSource: If ``source`` is neither coingecko nor opensea
        """
        if source == SOURCE_KIND_COINGECKO:
            normalize = normalize_token
        elif source == SOURCE_KIND_OPENSEA:
            normalize = normalize_collection
        else:
            raise ErrUnknownSource(f"unsupported source: {source}")

        assets = []
        for record in records:
            try:
                assets.append(normalize(record))
            except ErrNormalizationFailed as e:
                if self.logger:
                    self.logger.warning(
                        f"[Scorer] Failed to normalize {source} asset",
                        extra={"error": str(e)},
                    )
        return assets

    def score_asset(
        self,
        asset: NormalizedAsset,
        context: ScoringContext,
        market: Optional[MarketContext] = None,
    ) -> ScoredAsset:
        now = self.clock()
        start = time.perf_counter()
        try:
            cultural = cultural_scores(asset, context)
            market_result = market_scores(asset, market)
            risk = risk_assessment(asset, market_result, now)
            relevance = relevance_score(cultural, market_result)
            confidence = confidence_score(asset, cultural, market_result)
        except Exception as e:
            if self.logger:
                self.logger.error(
                    "[Scorer] Failed to score asset",
                    extra={"asset_id": asset.id, "asset_name": asset.name, "error": str(e)},
                )
            return failed_score(asset, now)

        if self.logger:
            self.logger.debug(
                f"[Scorer] Asset scored: {asset.name}",
                extra={
                    "asset_id": asset.id,
                    "relevance": relevance,
                    "confidence": confidence,
                    "elapsed_ms": round((time.perf_counter() - start) * 1000, 3),
                },
            )

        return ScoredAsset(
            asset=asset,
            scores=AssetScores(
                relevance=relevance,
                confidence=confidence,
                cultural=cultural,
                market=market_result,
                risk=risk,
            ),
            reasoning=reasoning(asset, cultural, market_result, relevance),
            sources=sources(asset),
            last_updated=now.isoformat(),
        )

    def score_batch(
        self,
        assets: List[NormalizedAsset],
        context: ScoringContext,
        market: Optional[MarketContext] = None,
    ) -> List[ScoredAsset]:
        return [self.score_asset(asset, context, market) for asset in assets]

    def wrap_success(
        self,
        data: Any,
        source: str,
        cached: bool = False,
        processing_time: float = 0,
        confidence: float = 1.0,
    ) -> NormalizedResponse:
        return NormalizedResponse(
            data=data,
            metadata=ResponseMetadata(
                source=source,
                timestamp=self.clock().isoformat(),
                cached=cached,
                processing_time=processing_time,
                confidence=confidence,
            ),
        )

    def wrap_error(
        self,
        error: Any,
        code: str,
        source: str,
        retryable: bool = True,
        request_id: Optional[str] = None,
    ) -> ErrorResponse:
        message = str(error)
        if self.logger:
            self.logger.error(
                f"[Scorer] Response error from {source}",
                extra={"code": code, "retryable": retryable, "request_id": request_id or ""},
            )
        return ErrorResponse(
            code=code,
            message=message,
            source=source,
            retryable=retryable,
            timestamp=self.clock().isoformat(),
            request_id=request_id or "",
        )


__all__ = ["Scorer", "failed_score", "SOURCE_KIND_COINGECKO", "SOURCE_KIND_OPENSEA"]
