"""Normalisation and match scoring for token payloads."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pkg.defaults.interface import IDefaultsFiller
from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..type import (
    TokenCulturalAlignment,
    TokenInfo,
    TokenMarketMetrics,
    TokenMatch,
    TokenSearch,
    TrendingToken,
)


def _usd(block: Any) -> Any:
    return block.get("usd") if isinstance(block, dict) else None


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _items(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _num(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _optional_num(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def impute_price(market_cap: float, circulating_supply: float, defaults: IDefaultsFiller) -> float:
    """Price from market cap over circulating supply, else a filler value."""
    if market_cap > 0 and circulating_supply > 0:
        return market_cap / circulating_supply
    return defaults.token_price(market_cap)


def normalize_token_info(data: Dict[str, Any], defaults: IDefaultsFiller) -> TokenInfo:
    market = _mapping(data.get("market_data"))
    market_cap = _num(_usd(market.get("market_cap")))
    circulating = _num(market.get("circulating_supply"))

    price = _num(_usd(market.get("current_price")))
    imputed = False
    if price <= 0:
        price = impute_price(market_cap, circulating, defaults)
        imputed = True

    return TokenInfo(
        id=_text(data.get("id")),
        symbol=_text(data.get("symbol")).upper(),
        name=_text(data.get("name")),
        current_price=price,
        market_cap=market_cap,
        volume_24h=_num(_usd(market.get("total_volume"))),
        price_change_24h=_num(market.get("price_change_24h")),
        price_change_percent_24h=_num(market.get("price_change_percentage_24h")),
        circulating_supply=circulating,
        total_supply=_num(market.get("total_supply")),
        max_supply=_optional_num(market.get("max_supply")),
        ath=_num(_usd(market.get("ath"))),
        ath_date=_text(_usd(market.get("ath_date"))),
        atl=_num(_usd(market.get("atl"))),
        atl_date=_text(_usd(market.get("atl_date"))),
        last_updated=_text(market.get("last_updated")) or datetime.now(timezone.utc).isoformat(),
        price_imputed=imputed,
        raw=data,
    )


def normalize_trending(payload: Dict[str, Any]) -> List[TrendingToken]:
    trending = []
    for coin in _items(payload.get("coins")):
        item = coin.get("item") if isinstance(coin, dict) else None
        if not isinstance(item, dict) or not isinstance(item.get("id"), str) or not item["id"]:
            continue
        trending.append(
            TrendingToken(
                id=item["id"],
                symbol=_text(item.get("symbol")),
                name=_text(item.get("name")),
                thumb=item.get("thumb") or "",
                small=item.get("small") or "",
                large=item.get("large") or "",
                slug=item.get("slug") or "",
                price_btc=_num(item.get("price_btc")),
                score=_num(item.get("score")),
            )
        )
    return trending


def normalize_search(payload: Dict[str, Any], limit: int) -> List[TokenSearch]:
    results = []
    for coin in _items(payload.get("coins"))[:limit]:
        if not isinstance(coin, dict) or not isinstance(coin.get("id"), str) or not coin["id"]:
            continue
        results.append(
            TokenSearch(
                id=coin["id"],
                name=_text(coin.get("name")),
                symbol=_text(coin.get("symbol")),
                market_cap_rank=int(_num(coin.get("market_cap_rank"))) or UNRANKED_MARKET_CAP_RANK,
                thumb=coin.get("thumb") or "",
                large=coin.get("large") or "",
            )
        )
    return results


def token_reasoning(token: TokenInfo, keyword: str) -> str:
    reasons = []
    if keyword and (
        keyword.lower() in token.name.lower() or keyword.lower() in token.symbol.lower()
    ):
        reasons.append(f'Direct match with keyword "{keyword}"')
    if token.price_change_percent_24h > STRONG_MOMENTUM_PCT:
        reasons.append(f"Strong upward momentum (+{token.price_change_percent_24h:.1f}%)")
    if token.volume_24h > HIGH_VOLUME_USD:
        reasons.append("High trading volume indicates strong interest")
    if token.market_cap > ESTABLISHED_MARKET_CAP_USD:
        reasons.append("Established market presence")
    return ". ".join(reasons) if reasons else DEFAULT_REASONING


def create_token_match(
    token: TokenInfo,
    matched_keyword: str,
    keywords: List[str],
    social_mentions: int,
) -> TokenMatch:
    name = token.name.lower()
    symbol = token.symbol.lower()
    lowered = [k.lower() for k in keywords if k]

    relevance = 0.0
    if any(k in name for k in lowered):
        relevance += NAME_MATCH_BONUS
    if any(k in symbol for k in lowered):
        relevance += SYMBOL_MATCH_BONUS

    pct = token.price_change_percent_24h
    metrics = TokenMarketMetrics(
        liquidity_score=min(100.0, token.volume_24h / 1_000_000 * 10),
        volatility_score=min(100.0, abs(pct) * 2),
        momentum_score=min(100.0, pct * 3) if pct > 0 else 0.0,
        community_score=min(100.0, token.market_cap / 1_000_000 * 0.1),
    )
    alignment = TokenCulturalAlignment(
        social_mentions=social_mentions,
        trending_score=0,
        narrative_match=NARRATIVE_MATCH_KEYWORD if matched_keyword else NARRATIVE_MATCH_DEFAULT,
    )

    relevance += metrics.liquidity_score * LIQUIDITY_WEIGHT
    relevance += metrics.momentum_score * MOMENTUM_WEIGHT
    relevance += alignment.narrative_match * NARRATIVE_WEIGHT

    return TokenMatch(
        token=token,
        relevance_score=round_half_up(relevance),
        market_metrics=metrics,
        cultural_alignment=alignment,
        reasoning=token_reasoning(token, matched_keyword),
    )


def dedupe_matches(matches: List[TokenMatch]) -> List[TokenMatch]:
    """Keep the first match per token id."""
    seen = set()
    unique = []
    for match in matches:
        if match.token.id in seen:
            continue
        seen.add(match.token.id)
        unique.append(match)
    return unique


def extract_price(payload: Any, token_id: str, vs_currency: str) -> Optional[float]:
    if not isinstance(payload, dict):
        return None
    quote = payload.get(token_id)
    price = quote.get(vs_currency) if isinstance(quote, dict) else None
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return None
    return float(price)


__all__ = [
    "impute_price",
    "normalize_token_info",
    "normalize_trending",
    "normalize_search",
    "token_reasoning",
    "create_token_match",
    "dedupe_matches",
    "extract_price",
]
