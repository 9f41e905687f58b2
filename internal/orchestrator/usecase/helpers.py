"""Pure helpers for the pipeline: asset assembly, step 5 adjustments, metrics."""

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from internal.market_data.type import TokenMatch
from internal.marketplace.type import NFTMatch
from internal.scoring.errors import ErrNormalizationFailed
from internal.scoring.type import (
    AssetImages,
    AssetLinks,
    AssetMetadata,
    NormalizedAsset,
    PriceInfo,
    ScoredAsset,
    SocialMetrics,
    SupplyInfo,
    VolumeInfo,
)
from internal.marketplace.constant import STATUS_VERIFIED
from internal.scoring.constant import (
    ASSET_TYPE_NFT,
    ASSET_TYPE_TOKEN,
    DEFAULT_BLOCKCHAIN,
    DEFAULT_TOKEN_CATEGORY,
    NFT_CATEGORY,
    OPENSEA_COLLECTION_URL,
    RISK_HIGH,
    RISK_LOW,
)
from internal.scoring.usecase.helpers import clamp, round_half_up
from internal.scoring.usecase.normalizer import normalize_collection, normalize_token
from internal.social.constant import MOMENTUM_RISING
from internal.social.type import SocialTrendAnalysis
from internal.taste.type import Demographics, TasteMetadata, TasteProfile, TasteRecommendation
from internal.theme_expansion.type import CulturalContext, ThemeExpansion

from ..constant import *
from ..type import PipelineOptions, ProcessingInfo, Recommendations, ResultMetadata, TrendResult


def extract_social_metrics(
    name: str, symbol: str, social_analysis: Dict[str, SocialTrendAnalysis]
) -> Optional[SocialMetrics]:
    """Aggregate the analyses whose keyword appears in the asset name or symbol."""
    name = name.lower()
    symbol = (symbol or "").lower()
    relevant = [
        analysis
        for keyword, analysis in social_analysis.items()
        if keyword and (keyword.lower() in name or (symbol and keyword.lower() in symbol))
    ]
    if not relevant:
        return None

    return SocialMetrics(
        mentions=sum(a.twitter.mention_count + a.farcaster.cast_count for a in relevant),
        engagement=sum(a.farcaster.engagement_score * a.farcaster.cast_count for a in relevant),
        sentiment=sum(a.twitter.sentiment_score for a in relevant) / len(relevant),
        trending_score=max(a.overall_score for a in relevant),
        viral_potential=max(a.viral_potential for a in relevant),
    )


def token_asset(match: TokenMatch) -> NormalizedAsset:
    """NormalizedAsset for a token match, carrying the adapter's filled-in values."""
    token = match.token
    try:
        asset = normalize_token(token.raw)
    except ErrNormalizationFailed:
        asset = NormalizedAsset(
            id=token.id,
            type=ASSET_TYPE_TOKEN,
            name=token.name,
            symbol=token.symbol,
            price=PriceInfo(
                current=token.current_price,
                change_24h=token.price_change_24h,
                change_percent_24h=token.price_change_percent_24h,
            ),
            volume=VolumeInfo(volume_24h=token.volume_24h),
            market_cap=token.market_cap,
            supply=SupplyInfo(
                circulating=token.circulating_supply,
                total=token.total_supply,
                max=token.max_supply,
            ),
            metadata=AssetMetadata(blockchain=DEFAULT_BLOCKCHAIN, category=DEFAULT_TOKEN_CATEGORY, verified=True),
        )

    if asset.price is not None and (token.price_imputed or not asset.price.current):
        asset.price.current = token.current_price
    if not asset.description:
        asset.description = f"{token.name} ({token.symbol}) - Market Cap: ${token.market_cap / 1_000_000:.1f}M"
    return asset


def collection_asset(match: NFTMatch) -> NormalizedAsset:
    """NormalizedAsset for an NFT match, carrying the adapter's filled-in values."""
    collection = match.collection
    stats = match.stats
    stats_payload = {
        "floor_price": stats.floor_price,
        "one_day_volume": stats.volume.get("1d", 0.0),
        "total_volume": stats.total_volume,
        "total_supply": stats.total_supply,
    }
    try:
        asset = normalize_collection(collection.raw, stats_payload)
    except ErrNormalizationFailed:
        asset = NormalizedAsset(
            id=collection.slug,
            type=ASSET_TYPE_NFT,
            name=collection.name,
            volume=VolumeInfo(volume_24h=0.0, volume_total=collection.volume_total),
            supply=SupplyInfo(total=0.0),
            metadata=AssetMetadata(
                blockchain=collection.blockchain,
                contract_address=collection.contract_address or None,
                verified=collection.verification_status == STATUS_VERIFIED,
                category=NFT_CATEGORY,
            ),
            links=AssetLinks(opensea=OPENSEA_COLLECTION_URL.format(slug=collection.slug)),
            images=AssetImages(),
        )

    links = collection.social_links
    asset.id = collection.slug
    asset.name = collection.name
    asset.description = asset.description or collection.description
    asset.floor_price = asset.floor_price or collection.floor_price
    if asset.volume is not None and not asset.volume.volume_24h:
        asset.volume.volume_24h = collection.volume_24h
    if asset.supply is not None and not asset.supply.total:
        asset.supply.total = float(collection.total_supply)
    asset.metadata.created_date = asset.metadata.created_date or collection.created_date or None
    asset.links.website = asset.links.website or links.website or None
    asset.links.twitter = asset.links.twitter or links.twitter
    asset.links.discord = asset.links.discord or links.discord or None
    asset.images.thumbnail = asset.images.thumbnail or collection.image_url or None
    return asset


def average_social_score(social_analysis: Dict[str, SocialTrendAnalysis]) -> float:
    scores = [a.overall_score for a in social_analysis.values()]
    return sum(scores) / max(1, len(scores))


def adjust_asset(
    scored: ScoredAsset,
    avg_social_score: float,
    theme_confidence: float,
    risk_tolerance: str,
) -> ScoredAsset:
    """Social boost, theme-confidence blend and risk-tolerance multiplier.

    Low tolerance penalizes high-risk assets and high tolerance boosts
    low-risk ones. Only those two exact pairings are adjusted.
    """
    relevance = scored.scores.relevance + avg_social_score / 100 * SOCIAL_BOOST_MAX
    confidence = (scored.scores.confidence + theme_confidence) / 2

    level = scored.scores.risk.level
    if risk_tolerance == RISK_TOLERANCE_LOW and level == RISK_HIGH:
        relevance *= LOW_TOLERANCE_PENALTY
    elif risk_tolerance == RISK_TOLERANCE_HIGH and level == RISK_LOW:
        relevance *= HIGH_TOLERANCE_BOOST

    scores = replace(
        scored.scores,
        relevance=round(clamp(relevance), 2),
        confidence=round(clamp(confidence, 0.0, 1.0), 4),
    )
    return replace(scored, scores=scores)


def score_and_filter(
    assets: List[ScoredAsset],
    social_analysis: Dict[str, SocialTrendAnalysis],
    theme_confidence: float,
    options: PipelineOptions,
) -> List[ScoredAsset]:
    avg_social = average_social_score(social_analysis)
    adjusted = [adjust_asset(a, avg_social, theme_confidence, options.risk_tolerance) for a in assets]
    kept = [a for a in adjusted if a.scores.confidence >= options.min_confidence]
    kept.sort(key=lambda a: a.scores.relevance, reverse=True)
    return kept[: options.max_assets]


def overall_score(assets: List[ScoredAsset], social_analysis: Dict[str, SocialTrendAnalysis]) -> int:
    if not assets:
        return 0
    avg_asset = sum(a.scores.relevance for a in assets) / len(assets)
    avg_social = (
        sum(a.overall_score for a in social_analysis.values()) / len(social_analysis)
        if social_analysis
        else DEFAULT_SOCIAL_SCORE
    )
    return round_half_up(avg_asset * ASSET_SCORE_WEIGHT + avg_social * SOCIAL_SCORE_WEIGHT)


def overall_confidence(
    expansion: ThemeExpansion,
    assets: List[ScoredAsset],
    social_analysis: Dict[str, SocialTrendAnalysis],
) -> float:
    avg_asset = (
        sum(a.scores.confidence for a in assets) / len(assets) if assets else DEFAULT_ASSET_CONFIDENCE
    )
    social = SOCIAL_CONFIDENCE_PRESENT if social_analysis else SOCIAL_CONFIDENCE_ABSENT
    value = (
        expansion.confidence * THEME_CONFIDENCE_WEIGHT
        + avg_asset * ASSET_CONFIDENCE_WEIGHT
        + social * SOCIAL_CONFIDENCE_WEIGHT
    )
    return round(clamp(value, 0.0, 1.0), 4)


def action_items(
    assets: List[ScoredAsset],
    social_analysis: Dict[str, SocialTrendAnalysis],
    time_horizon: str,
) -> List[str]:
    items = []
    if assets:
        top = assets[0]
        items.append(f"Research {top.name} further (highest relevance score: {top.relevance_score})")

    rising = [k for k, a in social_analysis.items() if a.momentum == MOMENTUM_RISING]
    if rising:
        items.append(f"Monitor rising trends: {', '.join(rising)}")

    if time_horizon == TIME_HORIZON_SHORT:
        items.extend(SHORT_HORIZON_ACTIONS)
    else:
        items.extend(LONG_HORIZON_ACTIONS)
    items.extend(ALWAYS_ACTIONS)
    return items


def fallback_recommendations(
    vibe: str, expansion: ThemeExpansion, assets: List[ScoredAsset], risk_tolerance: str
) -> Recommendations:
    return Recommendations(
        summary=(
            f'Analysis of "{vibe}" reveals {len(assets)} relevant opportunities '
            f"across {', '.join(expansion.categories)} categories."
        ),
        top_assets=assets[:TOP_ASSET_COUNT],
        market_timing=FALLBACK_MARKET_TIMING,
        risk_assessment=f"{risk_tolerance} risk tolerance recommended for this analysis.",
        action_items=list(FALLBACK_ACTION_ITEMS),
    )


def failed_result(
    vibe: str,
    error: BaseException,
    errors: List[str],
    pipeline: List[str],
    api_calls: int,
    total_time: int,
    now: datetime,
    ttl: int,
) -> TrendResult:
    """Zeroed TrendResult for a run that died in a sequential step."""
    return TrendResult(
        original_vibe=vibe,
        theme_expansion=ThemeExpansion(
            original_theme=vibe,
            expanded_keywords=[vibe],
            categories=[FAILED_CATEGORY],
            cultural_context=CulturalContext(description=FAILED_DESCRIPTION),
            related_trends=[],
            confidence=FAILED_CONFIDENCE,
        ),
        taste_profile=TasteRecommendation(
            recommendations=[],
            taste_profile=TasteProfile(keywords=[vibe], demographics=Demographics()),
            metadata=TasteMetadata(),
        ),
        social_analysis={},
        asset_matches=[],
        overall_score=0,
        confidence=0,
        processing=ProcessingInfo(
            total_time=total_time,
            api_calls=api_calls,
            cached=0,
            errors=[str(error) or UNKNOWN_ERROR, *errors],
        ),
        recommendations=Recommendations(
            summary=FAILED_SUMMARY,
            top_assets=[],
            market_timing=FAILED_MARKET_TIMING,
            risk_assessment=FAILED_RISK_ASSESSMENT,
            action_items=list(FAILED_ACTION_ITEMS),
        ),
        metadata=ResultMetadata(
            generated_at=now.isoformat(),
            expires_at=(now + timedelta(seconds=ttl)).isoformat(),
            pipeline=list(pipeline),
        ),
    )


__all__ = [
    "extract_social_metrics",
    "token_asset",
    "collection_asset",
    "average_social_score",
    "adjust_asset",
    "score_and_filter",
    "overall_score",
    "overall_confidence",
    "action_items",
    "fallback_recommendations",
    "failed_result",
]
