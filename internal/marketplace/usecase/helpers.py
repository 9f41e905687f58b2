"""Normalisation and match scoring for marketplace payloads."""

import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pkg.defaults.interface import IDefaultsFiller
from internal.scoring.usecase.helpers import round_half_up

from ..constant import *
from ..type import (
    CollectionStats,
    NFTAsset,
    NFTCollection,
    NFTCulturalAlignment,
    NFTMarketMetrics,
    NFTMatch,
    NFTTrait,
    SocialLinks,
)

_CONTRACT_RE = re.compile(CONTRACT_ADDRESS_PATTERN)


def _num(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _first(stats: Dict[str, Any], *keys: str) -> float:
    for key in keys:
        value = _num(stats.get(key))
        if value:
            return value
    return 0.0


def is_contract_address(value: str) -> bool:
    return bool(value) and bool(_CONTRACT_RE.match(value))


def display_name(name: str, slug: str, contract_address: str) -> str:
    """Readable collection name when the payload's name is blank or a raw address."""
    if name and name.strip() and not is_contract_address(name):
        return name
    if slug and slug != contract_address and not is_contract_address(slug):
        words = slug.replace("-", " ").replace("_", " ").split(" ")
        return " ".join(w[:1].upper() + w[1:] for w in words)
    if contract_address:
        return f"Collection {contract_address[:6]}...{contract_address[-4:]}"
    return UNKNOWN_COLLECTION


def verification_status(value: Any) -> str:
    if value == STATUS_VERIFIED:
        return STATUS_VERIFIED
    if value == STATUS_SAFELISTED:
        return STATUS_SAFELISTED
    return STATUS_UNVERIFIED


def _iso(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else ""


def normalize_collection(
    data: Dict[str, Any],
    defaults: IDefaultsFiller,
    now: Optional[datetime] = None,
) -> NFTCollection:
    contracts = data.get("primary_asset_contracts") or data.get("contracts") or []
    primary = contracts[0] if isinstance(contracts, list) and contracts and isinstance(contracts[0], dict) else {}
    contract_address = _text(primary.get("address"))

    original_slug = _text(data.get("collection")) or _text(data.get("slug"))
    name = display_name(_text(data.get("name")), original_slug, contract_address)
    slug = original_slug if original_slug.strip() else ""
    if not slug:
        slug = contract_address or f"collection-{int(time.time() * 1000)}"

    stats = data.get("stats") if isinstance(data.get("stats"), dict) else {}
    floor = _num(stats.get("floor_price"))
    if floor == 0 and _num(stats.get("average_price")):
        floor = _num(stats.get("average_price")) * 0.8
    if floor == 0 and _num(stats.get("one_day_volume")) and _num(stats.get("one_day_sales")):
        floor = _num(stats["one_day_volume"]) / max(_num(stats["one_day_sales"]), 1) * 0.7

    now = now or datetime.now(timezone.utc)
    twitter = data.get("twitter_username")
    instagram = data.get("instagram_username")

    return NFTCollection(
        slug=slug,
        name=name,
        description=_text(data.get("description")) or DESCRIPTION_TEMPLATE.format(name=name),
        image_url=data.get("image_url") or data.get("featured_image_url") or "",
        banner_image_url=data.get("banner_image_url") or "",
        contract_address=contract_address,
        blockchain=primary.get("chain") or DEFAULT_BLOCKCHAIN,
        total_supply=int(_num(stats.get("total_supply")) or defaults.nft_total_supply()),
        floor_price=floor,
        floor_price_symbol=stats.get("floor_price_symbol") or DEFAULT_SYMBOL,
        volume_total=_num(stats.get("total_volume")),
        volume_24h=_num(stats.get("one_day_volume")) or defaults.nft_volume_24h(),
        change_24h=_num(stats.get("one_day_change")) or defaults.nft_change_24h(),
        average_price_24h=_num(stats.get("one_day_average_price")) or floor * 1.2,
        sales_count_24h=int(_num(stats.get("one_day_sales")) or defaults.nft_sales_24h()),
        owners_count=int(_num(stats.get("num_owners")) or defaults.nft_owners()),
        created_date=_text(data.get("created_date")) or _iso(defaults.created_date(now)),
        verification_status=verification_status(data.get("safelist_request_status")),
        social_links=SocialLinks(
            website=data.get("external_url") or "",
            discord=data.get("discord_url") or "",
            twitter=f"https://twitter.com/{twitter}" if twitter else "",
            instagram=f"https://instagram.com/{instagram}" if instagram else "",
        ),
        raw=data,
    )


def normalize_collection_stats(slug: str, payload: Any) -> CollectionStats:
    """Stats accept either the nested ``stats`` block or a flat body, in snake or camel case."""
    data = payload if isinstance(payload, dict) else {}
    stats = data.get("stats") if isinstance(data.get("stats"), dict) else data

    return CollectionStats(
        slug=slug,
        total_volume=_first(stats, "total_volume", "totalVolume"),
        total_sales=_first(stats, "total_sales", "totalSales"),
        total_supply=_first(stats, "total_supply", "totalSupply"),
        count=_first(stats, "count"),
        num_owners=_first(stats, "num_owners", "numOwners"),
        average_price=_first(stats, "average_price", "averagePrice"),
        num_reports=_first(stats, "num_reports", "numReports"),
        market_cap=_first(stats, "market_cap", "marketCap"),
        floor_price=_first(stats, "floor_price", "floorPrice"),
        floor_price_symbol=stats.get("floor_price_symbol") or stats.get("floorPriceSymbol") or DEFAULT_SYMBOL,
        volume={
            "1d": _first(stats, "one_day_volume", "oneDayVolume"),
            "7d": _first(stats, "seven_day_volume", "sevenDayVolume"),
            "30d": _first(stats, "thirty_day_volume", "thirtyDayVolume"),
        },
        change={
            "1d": _first(stats, "one_day_change", "oneDayChange"),
            "7d": _first(stats, "seven_day_change", "sevenDayChange"),
            "30d": _first(stats, "thirty_day_change", "thirtyDayChange"),
        },
        raw=stats,
    )


def normalize_asset(data: Dict[str, Any]) -> NFTAsset:
    identifier = data.get("identifier") or data.get("token_id") or ""
    last_sale = data.get("last_sale") if isinstance(data.get("last_sale"), dict) else None
    orders = data.get("orders") or []
    order = orders[0] if orders and isinstance(orders[0], dict) else None
    rarity = data.get("rarity") if isinstance(data.get("rarity"), dict) else {}

    asset = NFTAsset(
        token_id=str(identifier),
        name=data.get("name") or f"#{identifier}",
        description=data.get("description") or "",
        image_url=data.get("image_url") or data.get("display_image_url") or "",
        collection_slug=data.get("collection") or "",
        collection_name=data.get("collection_name") or "",
        contract_address=data.get("contract") or "",
        traits=[
            NFTTrait(
                trait_type=t.get("trait_type") or "",
                value=t.get("value"),
                display_type=t.get("display_type"),
            )
            for t in data.get("traits") or []
            if isinstance(t, dict)
        ],
        owner=data.get("owner") or "",
        permalink=data.get("permalink") or "",
        rarity_rank=rarity.get("rank"),
        rarity_score=rarity.get("score"),
    )
    if last_sale:
        asset.last_sale_price = _num(last_sale.get("total_price")) / WEI_PER_ETH
        asset.last_sale_currency = (last_sale.get("payment_token") or {}).get("symbol") or DEFAULT_SYMBOL
        asset.last_sale_date = last_sale.get("event_timestamp") or ""
    if order:
        asset.current_price = _num(order.get("current_price")) / WEI_PER_ETH
        asset.current_price_currency = (order.get("payment_token_contract") or {}).get("symbol") or DEFAULT_SYMBOL
    return asset


def nft_reasoning(collection: NFTCollection, stats: CollectionStats, keyword: str) -> str:
    reasons = []
    if keyword and keyword.lower() in collection.name.lower():
        reasons.append(f'Direct match with keyword "{keyword}"')
    if stats.change["1d"] > STRONG_DAILY_CHANGE_PCT:
        reasons.append(f"Strong daily momentum (+{stats.change['1d']:.1f}%)")
    if stats.volume["1d"] > HIGH_DAILY_VOLUME_ETH:
        reasons.append(f"High trading volume ({stats.volume['1d']:.1f} ETH daily)")
    if collection.verification_status == STATUS_VERIFIED:
        reasons.append("Verified collection with established reputation")
    if stats.num_owners > STRONG_COMMUNITY_OWNERS:
        reasons.append(f"Strong community ({int(stats.num_owners)} owners)")
    return ". ".join(reasons) if reasons else DEFAULT_REASONING


def aesthetic_match(collection: NFTCollection) -> float:
    score = 0.0
    text = f"{collection.name} {collection.description}".lower()
    if any(term in text for term in AESTHETIC_TERMS):
        score += 30
    if collection.verification_status == STATUS_VERIFIED:
        score += 20
    if collection.social_links.twitter or collection.social_links.discord:
        score += 15
    return min(100.0, score)


def social_buzz(collection: NFTCollection) -> float:
    links = collection.social_links
    score = 0.0
    if links.twitter:
        score += 25
    if links.discord:
        score += 25
    if links.instagram:
        score += 15
    if links.website:
        score += 10
    if collection.verification_status == STATUS_VERIFIED:
        score += 25
    return score


def create_nft_match(
    collection: NFTCollection,
    stats: CollectionStats,
    matched_keyword: str,
    keywords: List[str],
) -> NFTMatch:
    name = collection.name.lower()
    description = collection.description.lower()
    lowered = [k.lower() for k in keywords if k]

    relevance = 0.0
    if any(k in name for k in lowered):
        relevance += NAME_MATCH_BONUS
    if any(k in description for k in lowered):
        relevance += DESCRIPTION_MATCH_BONUS

    change_1d = stats.change["1d"]
    metrics = NFTMarketMetrics(
        liquidity_score=min(100.0, stats.volume["1d"] / 10_000 * 10),
        momentum_score=change_1d * 5 if change_1d > 0 else 0.0,
        community_score=min(100.0, stats.num_owners / 100 * 10),
        utility_score=UTILITY_VERIFIED if collection.verification_status == STATUS_VERIFIED else UTILITY_UNVERIFIED,
    )
    alignment = NFTCulturalAlignment(
        aesthetic_match=aesthetic_match(collection),
        narrative_relevance=NARRATIVE_KEYWORD if matched_keyword else NARRATIVE_DEFAULT,
        trending_factor=min(100.0, stats.volume["7d"] / 50_000 * 20),
        social_buzz=social_buzz(collection),
    )

    relevance += metrics.liquidity_score * LIQUIDITY_WEIGHT
    relevance += metrics.momentum_score * MOMENTUM_WEIGHT
    relevance += alignment.aesthetic_match * AESTHETIC_WEIGHT
    relevance += alignment.narrative_relevance * NARRATIVE_WEIGHT

    return NFTMatch(
        collection=collection,
        stats=stats,
        relevance_score=round_half_up(relevance),
        market_metrics=metrics,
        cultural_alignment=alignment,
        reasoning=nft_reasoning(collection, stats, matched_keyword),
    )


def dedupe_matches(matches: List[NFTMatch]) -> List[NFTMatch]:
    """Keep the first match per collection slug."""
    seen = set()
    unique = []
    for match in matches:
        if match.collection.slug in seen:
            continue
        seen.add(match.collection.slug)
        unique.append(match)
    return unique


__all__ = [
    "is_contract_address",
    "display_name",
    "verification_status",
    "normalize_collection",
    "normalize_collection_stats",
    "normalize_asset",
    "nft_reasoning",
    "aesthetic_match",
    "social_buzz",
    "create_nft_match",
    "dedupe_matches",
]
