"""Sub-score heuristics behind the scorer."""

import math
from datetime import datetime, timezone
from typing import List, Optional

from ..constant import *
from ..type import (
    CulturalScores,
    MarketContext,
    MarketScores,
    NormalizedAsset,
    RiskAssessment,
    ScoringContext,
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def risk_level(score: float) -> str:
    """Bucket a 0-100 risk score: low <25, medium <50, high <80, extreme otherwise."""
    if score < RISK_LOW_MAX:
        return RISK_LOW
    if score < RISK_MEDIUM_MAX:
        return RISK_MEDIUM
    if score < RISK_HIGH_MAX:
        return RISK_HIGH
    return RISK_EXTREME


def _keywords(keywords: List[str]) -> List[str]:
    return [k.lower() for k in keywords if k]


def theme_match(asset: NormalizedAsset, theme: str, keywords: List[str]) -> float:
    text = f"{asset.name} {asset.description}".lower()
    score = 0.0
    if theme and theme.lower() in text:
        score += THEME_MATCH_BONUS

    matches = sum(1 for k in _keywords(keywords) if k in text)
    score += matches * KEYWORD_MATCH_BONUS
    if matches > MULTI_KEYWORD_THRESHOLD:
        score += MULTI_KEYWORD_BONUS
    return min(100.0, score)


def estimate_social_buzz(asset: NormalizedAsset) -> float:
    """Proxy buzz from verification, links and volume when no social data exists."""
    buzz = 0.0
    if asset.metadata.verified:
        buzz += 20
    if asset.links.twitter:
        buzz += 15
    if asset.links.discord:
        buzz += 10
    if asset.links.website:
        buzz += 10

    volume = asset.volume_24h
    if volume and asset.type == ASSET_TYPE_TOKEN:
        buzz += min(30.0, volume / 50_000)
    if volume and asset.type == ASSET_TYPE_NFT:
        buzz += min(25.0, volume * 10)
    return min(100.0, buzz)


def narrative_strength(asset: NormalizedAsset, keywords: List[str], categories: Optional[List[str]]) -> float:
    strength = 0.0

    if categories:
        category = (asset.metadata.category or "").lower()
        if any(c.lower() in category for c in categories if c is not None):
            strength += CATEGORY_MATCH_BONUS

    if len(asset.description) > 100:
        strength += 10
    if len(asset.description) > 200:
        strength += 5

    words = asset.description.lower().split()
    density = sum(1 for k in _keywords(keywords) for word in words if k in word)
    strength += min(float(KEYWORD_DENSITY_CAP), density * 5)

    if asset.metadata.verified:
        strength += 15
    if asset.links.website and asset.links.twitter:
        strength += 10
    return min(100.0, strength)


def cultural_scores(asset: NormalizedAsset, context: ScoringContext) -> CulturalScores:
    theme = theme_match(asset, context.theme, context.keywords)

    social = context.social_metrics
    if social is not None:
        buzz = min(100.0, social.mentions * 2 + social.engagement / 100)
    else:
        buzz = estimate_social_buzz(asset)

    narrative = narrative_strength(asset, context.keywords, context.categories)
    viral = min(100.0, buzz * 0.4 + asset.volume_24h / 100_000 * 20 + theme * 0.4)

    return CulturalScores(
        theme_match=round_half_up(theme),
        social_buzz=round_half_up(buzz),
        narrative_strength=round_half_up(narrative),
        viral_potential=round_half_up(viral),
    )


def community_score(asset: NormalizedAsset) -> float:
    score = 0.0
    if asset.links.twitter:
        score += 25
    if asset.links.discord:
        score += 20
    if asset.links.website:
        score += 15
    if asset.metadata.verified:
        score += 20

    if asset.type == ASSET_TYPE_TOKEN and asset.market_cap:
        score += min(15.0, asset.market_cap / 10_000_000)
    if asset.type == ASSET_TYPE_NFT and asset.supply and asset.supply.total:
        score += min(10.0, asset.supply.total / 1000)
    return min(100.0, score)


def market_scores(asset: NormalizedAsset, context: Optional[MarketContext] = None) -> MarketScores:
    context = context or MarketContext()
    change = (asset.price.change_percent_24h if asset.price else None) or 0.0

    liquidity = context.liquidity or min(100.0, asset.volume_24h / 10_000)
    momentum = context.momentum or clamp((change * 2 if change > 0 else 0.0) + (20 if context.trending else 0))
    volatility = min(100.0, abs(change) * 2)

    return MarketScores(
        liquidity=round_half_up(clamp(liquidity)),
        momentum=round_half_up(clamp(momentum)),
        volatility=round_half_up(volatility),
        community=round_half_up(community_score(asset)),
    )


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def risk_assessment(asset: NormalizedAsset, market: MarketScores, now: datetime) -> RiskAssessment:
    factors = []
    score = 0

    if market.liquidity < LOW_LIQUIDITY_THRESHOLD:
        factors.append(RISK_FACTOR_LOW_LIQUIDITY)
        score += LOW_LIQUIDITY_POINTS
    if market.volatility > HIGH_VOLATILITY_THRESHOLD:
        factors.append(RISK_FACTOR_HIGH_VOLATILITY)
        score += HIGH_VOLATILITY_POINTS
    if asset.type == ASSET_TYPE_TOKEN and (asset.market_cap or 0) < SMALL_MARKET_CAP_USD:
        factors.append(RISK_FACTOR_SMALL_MARKET_CAP)
        score += SMALL_MARKET_CAP_POINTS
    if not asset.metadata.verified:
        factors.append(RISK_FACTOR_UNVERIFIED)
        score += UNVERIFIED_POINTS
    if market.community < WEAK_COMMUNITY_THRESHOLD:
        factors.append(RISK_FACTOR_WEAK_COMMUNITY)
        score += WEAK_COMMUNITY_POINTS

    created = _parse_date(asset.metadata.created_date)
    if created is not None and (now - created).total_seconds() / 86_400 < NEW_ASSET_DAYS:
        factors.append(RISK_FACTOR_NEW_ASSET)
        score += NEW_ASSET_POINTS

    score = min(100, score)
    return RiskAssessment(level=risk_level(score), score=score, factors=factors)


def relevance_score(cultural: CulturalScores, market: MarketScores) -> int:
    cultural_blend = (
        cultural.theme_match * THEME_MATCH_WEIGHT
        + cultural.narrative_strength * NARRATIVE_STRENGTH_WEIGHT
        + cultural.social_buzz * SOCIAL_BUZZ_WEIGHT
        + cultural.viral_potential * VIRAL_POTENTIAL_WEIGHT
    )
    market_blend = (
        market.momentum * MOMENTUM_WEIGHT
        + market.liquidity * LIQUIDITY_WEIGHT
        + market.community * COMMUNITY_WEIGHT
        + (100 - market.volatility) * STABILITY_WEIGHT
    )
    return round_half_up(clamp(cultural_blend * CULTURAL_WEIGHT + market_blend * MARKET_WEIGHT))


def score_spread(scores: List[float]) -> float:
    """Population standard deviation."""
    if not scores:
        return 0.0
    mean = sum(scores) / len(scores)
    return math.sqrt(sum((s - mean) ** 2 for s in scores) / len(scores))


def confidence_score(asset: NormalizedAsset, cultural: CulturalScores, market: MarketScores) -> float:
    confidence = BASE_CONFIDENCE
    if asset.price and asset.price.current:
        confidence += COMPLETENESS_BONUS
    if asset.volume_24h:
        confidence += COMPLETENESS_BONUS
    if asset.metadata.verified:
        confidence += COMPLETENESS_BONUS
    if len(asset.description) > LONG_DESCRIPTION_CHARS:
        confidence += COMPLETENESS_BONUS
    if asset.links.website or asset.links.twitter:
        confidence += COMPLETENESS_BONUS

    spread = score_spread(
        [cultural.theme_match, cultural.narrative_strength, market.liquidity, market.community]
    )
    confidence += (1 - spread / 100) * CONSISTENCY_WEIGHT
    return round(clamp(confidence, MIN_CONFIDENCE, 1.0), 4)


def reasoning(asset: NormalizedAsset, cultural: CulturalScores, market: MarketScores, relevance: float) -> str:
    reasons = []
    if cultural.theme_match > STRONG_THEME_THRESHOLD:
        reasons.append(f"Strong theme alignment ({cultural.theme_match}/100)")
    if cultural.social_buzz > ACTIVE_SOCIAL_THRESHOLD:
        reasons.append(f"Active social presence ({cultural.social_buzz}/100)")
    if market.momentum > STRONG_MOMENTUM_THRESHOLD:
        reasons.append(f"Strong market momentum ({market.momentum}/100)")
    if market.liquidity > GOOD_LIQUIDITY_THRESHOLD:
        reasons.append(f"Good liquidity ({market.liquidity}/100)")
    if market.volatility > HIGH_VOLATILITY_THRESHOLD:
        reasons.append(f"High volatility detected ({market.volatility}/100)")
    if asset.metadata.verified:
        reasons.append(REASON_VERIFIED)

    if not reasons:
        reasons.append(REASON_MODERATE if relevance > MODERATE_RELEVANCE_THRESHOLD else REASON_LIMITED)
    return ". ".join(reasons) + "."


def sources(asset: NormalizedAsset) -> List[str]:
    found = []
    if asset.type == ASSET_TYPE_TOKEN:
        found.append(SOURCE_COINGECKO)
    if asset.type == ASSET_TYPE_NFT:
        found.append(SOURCE_OPENSEA)
    if asset.links.twitter:
        found.append(SOURCE_TWITTER)
    return found


__all__ = [
    "round_half_up",
    "clamp",
    "risk_level",
    "theme_match",
    "estimate_social_buzz",
    "narrative_strength",
    "cultural_scores",
    "community_score",
    "market_scores",
    "risk_assessment",
    "relevance_score",
    "score_spread",
    "confidence_score",
    "reasoning",
    "sources",
]
