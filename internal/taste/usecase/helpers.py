"""Normalisation and synthetic fallbacks for taste correlation."""

from typing import Any, Dict, List

from internal.theme_expansion.type import CulturalAnalysis
from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..type import (
    BrandAffinities,
    BrandAffinity,
    Demographics,
    Influencer,
    InfluencerCorrelations,
    TasteCorrelation,
    TasteMetadata,
    TasteProfile,
    TasteRecommendation,
)


def _pct(value: Any) -> int:
    """Round a 0..1 provider score to 0..100, treating anything non-numeric or zero as 0.5."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        value = DEFAULT_SCORE
    return round_half_up((value or DEFAULT_SCORE) * 100)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _category_at(categories: List[str], index: int, default: str) -> str:
    if not categories:
        return default
    return categories[index % len(categories)] or default


def normalize_recommendation(raw: Dict[str, Any]) -> TasteRecommendation:
    recommendations = [
        TasteCorrelation(
            item=item.get("name") or item.get("title") or DEFAULT_ITEM,
            category=item.get("category") or DEFAULT_CATEGORY,
            relevance_score=_pct(item.get("score")),
            confidence_level=item.get("confidence") or DEFAULT_CORRELATION_CONFIDENCE,
            reasoning=item.get("explanation") or DEFAULT_REASONING,
            demographic_match=_pct(item.get("demographic_fit")),
            cultural_alignment=_pct(item.get("cultural_relevance")),
            trending_factor=_pct(item.get("trending_score")),
        )
        for item in raw.get("recommendations") or []
        if isinstance(item, dict)
    ]

    profile = _mapping(raw.get("profile"))
    demographics = _mapping(profile.get("demographics"))
    meta = _mapping(raw.get("metadata"))

    return TasteRecommendation(
        recommendations=recommendations,
        taste_profile=TasteProfile(
            keywords=list(profile.get("keywords") or []),
            categories=list(profile.get("categories") or []),
            demographics=Demographics(
                age_range=demographics.get("age_range") or DEFAULT_AGE_RANGE,
                interests=list(demographics.get("interests") or []),
                behaviors=list(demographics.get("behaviors") or []),
            ),
            cultural_affinities=list(profile.get("cultural_affinities") or []),
            brand_affinities=list(profile.get("brand_affinities") or []),
            content_preferences=list(profile.get("content_preferences") or []),
        ),
        metadata=TasteMetadata(
            total_analyzed=meta.get("total_analyzed") or len(recommendations),
            processing_time=meta.get("processing_time") or 0,
            algorithm_version=meta.get("version") or DEFAULT_ALGORITHM_VERSION,
        ),
    )


def normalize_influencers(raw: Dict[str, Any]) -> InfluencerCorrelations:
    influencers = [
        Influencer(
            handle=inf.get("handle") or inf.get("username") or "",
            platform=inf.get("platform") or DEFAULT_PLATFORM,
            relevance_score=_pct(inf.get("relevance")),
            follower_count=inf.get("followers") or 0,
            engagement_rate=inf.get("engagement_rate") or 0,
            cultural_alignment=_pct(inf.get("cultural_fit")),
        )
        for inf in raw.get("influencers") or []
        if isinstance(inf, dict)
    ]
    return InfluencerCorrelations(
        influencers=influencers,
        total_analyzed=raw.get("total_analyzed") or len(influencers),
    )


def normalize_brands(raw: Dict[str, Any]) -> BrandAffinities:
    brands = []
    for brand in raw.get("brands") or []:
        if not isinstance(brand, dict):
            continue
        presence = _mapping(brand.get("web_presence"))
        brands.append(
            BrandAffinity(
                name=brand.get("name") or DEFAULT_BRAND_NAME,
                sector=brand.get("sector") or DEFAULT_CATEGORY,
                affinity_score=_pct(brand.get("affinity")),
                reasoning=brand.get("reasoning") or DEFAULT_BRAND_REASONING,
                has_nfts=bool(presence.get("nft_activity")),
                has_crypto=bool(presence.get("crypto_activity")),
                social_engagement=presence.get("social_score") or 0,
            )
        )
    return BrandAffinities(brands=brands)


def analysis_to_recommendation(
    analysis: CulturalAnalysis,
    theme: str,
    keywords: List[str],
    categories: List[str],
) -> TasteRecommendation:
    """Build correlations from an LLM cultural analysis (second fallback tier)."""
    significance = analysis.cultural_significance or 75
    potential = analysis.trend_potential or 70

    recommendations: List[TasteCorrelation] = []
    for index, opportunity in enumerate(analysis.opportunities[:AI_MAX_OPPORTUNITIES]):
        recommendations.append(
            TasteCorrelation(
                item=opportunity,
                category=_category_at(categories, index, DEFAULT_CATEGORY),
                relevance_score=max(60, significance),
                confidence_level=0.8,
                reasoning=f"AI-identified cultural opportunity: {opportunity}",
                demographic_match=max(70, potential),
                cultural_alignment=significance,
                trending_factor=potential,
            )
        )

    for index, keyword in enumerate(keywords[:AI_KEYWORD_CORRELATIONS]):
        if len(recommendations) >= AI_MAX_CORRELATIONS:
            break
        recommendations.append(
            TasteCorrelation(
                item=f"{keyword} culture",
                category=_category_at(categories, index, AI_KEYWORD_CATEGORY),
                relevance_score=max(65, 85 - index * 5),
                confidence_level=0.75,
                reasoning=f"Core cultural keyword: {keyword}",
                demographic_match=75,
                cultural_alignment=80,
                trending_factor=max(60, 80 - index * 5),
            )
        )

    return TasteRecommendation(
        recommendations=recommendations,
        taste_profile=TasteProfile(
            keywords=list(keywords),
            categories=list(categories) or list(DEFAULT_CATEGORIES),
            demographics=Demographics(
                age_range=AI_AGE_RANGE,
                interests=keywords[:PROFILE_INTEREST_COUNT],
                behaviors=list(AI_BEHAVIORS),
            ),
            cultural_affinities=[theme],
            brand_affinities=[],
            content_preferences=list(categories) or list(AI_CONTENT_PREFERENCES),
        ),
        metadata=TasteMetadata(
            total_analyzed=len(recommendations),
            processing_time=AI_PROCESSING_TIME,
            algorithm_version=AI_ALGORITHM_VERSION,
        ),
    )


def basic_recommendation(
    theme: str, keywords: List[str], categories: List[str]
) -> TasteRecommendation:
    """Echo the keywords back as correlations (last fallback tier)."""
    recommendations = [
        TasteCorrelation(
            item=keyword,
            category=_category_at(categories, index, DEFAULT_CATEGORY),
            relevance_score=max(60, 90 - index * 5),
            confidence_level=0.6,
            reasoning=BASIC_REASONING,
            demographic_match=70,
            cultural_alignment=65,
            trending_factor=max(50, 80 - index * 3),
        )
        for index, keyword in enumerate(keywords[:BASIC_MAX_CORRELATIONS])
    ]

    return TasteRecommendation(
        recommendations=recommendations,
        taste_profile=TasteProfile(
            keywords=list(keywords),
            categories=list(categories),
            demographics=Demographics(
                age_range=DEFAULT_AGE_RANGE,
                interests=keywords[:PROFILE_INTEREST_COUNT],
                behaviors=list(BASIC_BEHAVIORS),
            ),
            cultural_affinities=[theme],
            brand_affinities=[],
            content_preferences=list(categories),
        ),
        metadata=TasteMetadata(
            total_analyzed=len(recommendations),
            processing_time=BASIC_PROCESSING_TIME,
            algorithm_version=BASIC_ALGORITHM_VERSION,
        ),
    )


__all__ = [
    "normalize_recommendation",
    "normalize_influencers",
    "normalize_brands",
    "analysis_to_recommendation",
    "basic_recommendation",
]
