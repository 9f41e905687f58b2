"""Cultural arbitrage pipeline."""

import asyncio
import time
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from pkg.cache.cache import CacheKeys
from pkg.cache.interface import ICache
from pkg.logger.logger import Logger
from internal.market_data.interface import IMarketData
from internal.marketplace.interface import IMarketplace
from internal.scoring.interface import IScorer
from internal.scoring.type import MarketContext, ScoredAsset, ScoringContext
from internal.social.interface import ISocial
from internal.social.type import SocialTrendAnalysis
from internal.taste.interface import ITaste
from internal.taste.type import TasteRecommendation
from internal.theme_expansion.interface import IThemeExpansion
from internal.theme_expansion.type import ThemeExpansion

from ..constant import *
from ..interface import IOrchestrator
from ..type import (
    Config,
    PipelineOptions,
    ProcessingInfo,
    Recommendations,
    ResultMetadata,
    TrendResult,
)
from .helpers import (
    action_items,
    collection_asset,
    extract_social_metrics,
    failed_result,
    fallback_recommendations,
    overall_confidence,
    overall_score,
    score_and_filter,
    token_asset,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Run:
    """Mutable bookkeeping for a single pipeline run."""

    def __init__(self):
        self.start = time.perf_counter()
        self.pipeline: List[str] = []
        self.errors: List[str] = []
        self.api_calls = 0

    def enter(self, stage: str) -> None:
        self.pipeline.append(stage)

    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.start) * 1000)


class OrchestratorUseCase(IOrchestrator):
    """Runs theme expansion, taste correlation, social analysis, asset
    discovery, scoring and summary for a vibe.

    Steps run strictly in order. Social analysis and asset discovery fan out
    concurrently and record failed branches in ``processing.errors``. Any
    exception from a sequential step ends the run with a zeroed result, so
    callers always receive a TrendResult.
    """

    def __init__(
        self,
        config: Config,
        theme_expansion: IThemeExpansion,
        taste: ITaste,
        social: ISocial,
        market_data: IMarketData,
        marketplace: IMarketplace,
        scorer: IScorer,
        cache: Optional[ICache] = None,
        clock: Callable[[], datetime] = _utcnow,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.theme_expansion = theme_expansion
        self.taste = taste
        self.social = social
        self.market_data = market_data
        self.marketplace = marketplace
        self.scorer = scorer
        self.cache = cache
        self.clock = clock
        self.logger = logger

    async def process_full_pipeline(
        self, vibe: str, options: Optional[PipelineOptions] = None
    ) -> TrendResult:
        options = options or PipelineOptions()
        cache_key = CacheKeys.full_pipeline(vibe)

        if options.use_cache and self.cache is not None:
            cached = await self.cache.get(cache_key)
            if cached is not None:
                if self.logger:
                    self.logger.info("[Orchestrator] Pipeline cache hit", extra={"vibe": vibe})
                return replace(cached, processing=replace(cached.processing, cached=cached.processing.cached + 1))

        run = _Run()
        try:
            result = await self._execute(vibe, options, run)
        except Exception as e:
            if self.logger:
                self.logger.error(
                    "[Orchestrator] Pipeline failed",
                    extra={"vibe": vibe, "stage": run.pipeline[-1] if run.pipeline else None, "error": str(e)},
                )
            result = failed_result(
                vibe,
                e,
                run.errors,
                run.pipeline,
                run.api_calls,
                run.elapsed_ms(),
                self.clock(),
                self.config.failure_ttl,
            )
            ttl = self.config.failure_ttl
        else:
            ttl = self.config.result_ttl

        if options.use_cache and self.cache is not None:
            await self.cache.set(cache_key, result, ttl)
        return result

    async def _execute(self, vibe: str, options: PipelineOptions, run: _Run) -> TrendResult:
        run.enter(STAGE_THEME_EXPANSION)
        expansion = await self.theme_expansion.expand_theme(vibe, use_cache=options.use_cache)
        run.api_calls += 1

        run.enter(STAGE_TASTE_CORRELATION)
        taste = await self.taste.get_taste_correlations(
            vibe, expansion.expanded_keywords, expansion.categories, use_cache=options.use_cache
        )
        run.api_calls += 1

        run.enter(STAGE_SOCIAL_ANALYSIS)
        social_analysis = await self._analyze_social(vibe, expansion, options, run)

        run.enter(STAGE_ASSET_DISCOVERY)
        discovered = await self._discover_assets(vibe, expansion, taste, social_analysis, options, run)

        run.enter(STAGE_SCORING_FILTERING)
        assets = score_and_filter(discovered, social_analysis, expansion.confidence, options)

        run.enter(STAGE_AI_SUMMARY)
        recommendations = await self._recommend(vibe, expansion, assets, social_analysis, options)
        run.api_calls += 1

        now = self.clock()
        result = TrendResult(
            original_vibe=vibe,
            theme_expansion=expansion,
            taste_profile=taste,
            social_analysis=social_analysis,
            asset_matches=assets,
            overall_score=overall_score(assets, social_analysis),
            confidence=overall_confidence(expansion, assets, social_analysis),
            processing=ProcessingInfo(
                total_time=run.elapsed_ms(),
                api_calls=run.api_calls,
                cached=0,
                errors=list(run.errors),
            ),
            recommendations=recommendations,
            metadata=ResultMetadata(
                generated_at=now.isoformat(),
                expires_at=(now + timedelta(seconds=self.config.result_ttl)).isoformat(),
                pipeline=list(run.pipeline),
            ),
        )

        if self.logger:
            self.logger.info(
                "[Orchestrator] Pipeline completed",
                extra={
                    "vibe": vibe,
                    "assets": len(assets),
                    "overall_score": result.overall_score,
                    "confidence": result.confidence,
                    "api_calls": run.api_calls,
                    "errors": len(run.errors),
                    "elapsed_ms": result.processing.total_time,
                },
            )
        return result

    async def _analyze_social(
        self, vibe: str, expansion: ThemeExpansion, options: PipelineOptions, run: _Run
    ) -> Dict[str, SocialTrendAnalysis]:
        keywords = [vibe, *expansion.expanded_keywords[:SOCIAL_KEYWORD_COUNT]]
        run.api_calls += len(keywords)

        if options.enable_parallel_processing:
            outcomes = await asyncio.gather(
                *(self.social.analyze_social_trend(k) for k in keywords), return_exceptions=True
            )
            settled = list(zip(keywords, outcomes))
        else:
            settled = []
            for keyword in keywords:
                try:
                    settled.append((keyword, await self.social.analyze_social_trend(keyword)))
                except Exception as e:
                    settled.append((keyword, e))

        analysis: Dict[str, SocialTrendAnalysis] = {}
        for keyword, outcome in settled:
            if isinstance(outcome, BaseException):
                run.errors.append(f"Social analysis failed for keyword {keyword}: {outcome}")
                if self.logger:
                    self.logger.warning(
                        "[Orchestrator] Social branch failed", extra={"keyword": keyword, "error": str(outcome)}
                    )
                continue
            analysis[keyword] = outcome
        return analysis

    async def _discover_assets(
        self,
        vibe: str,
        expansion: ThemeExpansion,
        taste: TasteRecommendation,
        social_analysis: Dict[str, SocialTrendAnalysis],
        options: PipelineOptions,
        run: _Run,
    ) -> List[ScoredAsset]:
        keywords = [*expansion.expanded_keywords, *(r.item for r in taste.recommendations)]
        context = ScoringContext(
            keywords=expansion.expanded_keywords,
            theme=vibe,
            categories=taste.taste_profile.categories or expansion.categories,
        )

        branches: List[Tuple[str, Awaitable[List[ScoredAsset]]]] = []
        if options.include_tokens:
            branches.append((BRANCH_TOKENS, self._discover_tokens(keywords, context, social_analysis)))
        if options.include_nfts:
            branches.append((BRANCH_NFTS, self._discover_nfts(keywords, context, social_analysis)))

        outcomes = await asyncio.gather(*(coro for _, coro in branches), return_exceptions=True)
        run.api_calls += len(branches) * API_CALLS_PER_ASSET_BRANCH

        assets: List[ScoredAsset] = []
        for (label, _), outcome in zip(branches, outcomes):
            if isinstance(outcome, BaseException):
                run.errors.append(f"Asset discovery failed for {label}: {outcome}")
                if self.logger:
                    self.logger.warning(
                        "[Orchestrator] Asset branch failed", extra={"branch": label, "error": str(outcome)}
                    )
                continue
            assets.extend(outcome)
        return assets

    async def _discover_tokens(
        self,
        keywords: List[str],
        context: ScoringContext,
        social_analysis: Dict[str, SocialTrendAnalysis],
    ) -> List[ScoredAsset]:
        matches = await self.market_data.find_relevant_tokens(keywords, DISCOVERY_LIMIT)
        scored = []
        for match in matches:
            asset = token_asset(match)
            metrics = extract_social_metrics(asset.name, asset.symbol or "", social_analysis)
            result = self.scorer.score_asset(
                asset,
                replace(context, social_metrics=metrics),
                MarketContext(trending=match.cultural_alignment.trending_score > 0),
            )
            scored.append(replace(result, social_metrics=metrics, time_horizon=TIME_HORIZON_MEDIUM))
        return scored

    async def _discover_nfts(
        self,
        keywords: List[str],
        context: ScoringContext,
        social_analysis: Dict[str, SocialTrendAnalysis],
    ) -> List[ScoredAsset]:
        matches = await self.marketplace.find_relevant_nfts(keywords, DISCOVERY_LIMIT)
        scored = []
        for match in matches:
            asset = collection_asset(match)
            metrics = extract_social_metrics(asset.name, "", social_analysis)
            result = self.scorer.score_asset(asset, replace(context, social_metrics=metrics), MarketContext())
            scored.append(replace(result, social_metrics=metrics, time_horizon=TIME_HORIZON_LONG))
        return scored

    async def _recommend(
        self,
        vibe: str,
        expansion: ThemeExpansion,
        assets: List[ScoredAsset],
        social_analysis: Dict[str, SocialTrendAnalysis],
        options: PipelineOptions,
    ) -> Recommendations:
        try:
            summary = await self.theme_expansion.summarize_asset_opportunities(
                [a.to_dict() for a in assets[:SUMMARY_ASSET_COUNT]], vibe
            )
        except Exception as e:
            if self.logger:
                self.logger.warning(
                    "[Orchestrator] Summary generation failed, using fallback", extra={"error": str(e)}
                )
            return fallback_recommendations(vibe, expansion, assets, options.risk_tolerance)

        return Recommendations(
            summary=summary.summary,
            top_assets=assets[:TOP_ASSET_COUNT],
            market_timing=summary.market_timing,
            risk_assessment=summary.risk_assessment,
            action_items=action_items(assets, social_analysis, options.time_horizon),
        )


__all__ = ["OrchestratorUseCase"]
