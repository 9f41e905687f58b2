"""Provider record to NormalizedAsset conversion."""

import re
from typing import Any, Dict, Optional

from ..constant import *
from ..errors import ErrNormalizationFailed
from ..type import (
    AssetImages,
    AssetLinks,
    AssetMetadata,
    NormalizedAsset,
    PriceInfo,
    SupplyInfo,
    VolumeInfo,
)

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")


def clean_description(description: Optional[str]) -> str:
    """Strip HTML tags, collapse whitespace, cap at 500 characters."""
    if not description:
        return ""
    text = _TAG_RE.sub("", description)
    text = _SPACE_RE.sub(" ", text).strip()
    return text[:DESCRIPTION_MAX_LENGTH]


def _num(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _usd(block: Any) -> Optional[float]:
    return _num(block.get("usd")) if isinstance(block, dict) else None


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def normalize_token(data: Any) -> NormalizedAsset:
    """Normalize a CoinGecko ``/coins/{id}`` record.

    Raises:
        ErrNormalizationFailed: If the record is not a mapping with an id
    """
    if not isinstance(data, dict) or not data.get("id"):
        raise ErrNormalizationFailed("token record must be a mapping with an id")

    market = _dict(data.get("market_data"))
    links = _dict(data.get("links"))
    image = _dict(data.get("image"))
    homepage = links.get("homepage") or []
    categories = data.get("categories") or []
    twitter = links.get("twitter_screen_name")
    symbol = data.get("symbol")

    return NormalizedAsset(
        id=data["id"],
        type=ASSET_TYPE_TOKEN,
        name=data.get("name") or UNKNOWN_TOKEN,
        symbol=symbol.upper() if isinstance(symbol, str) else None,
        description=clean_description(_dict(data.get("description")).get("en")),
        price=PriceInfo(
            current=_usd(market.get("current_price")) or 0.0,
            currency=DEFAULT_CURRENCY,
            change_24h=_num(market.get("price_change_24h")),
            change_percent_24h=_num(market.get("price_change_percentage_24h")),
        ),
        volume=VolumeInfo(volume_24h=_usd(market.get("total_volume")) or 0.0),
        market_cap=_usd(market.get("market_cap")),
        supply=SupplyInfo(
            circulating=_num(market.get("circulating_supply")),
            total=_num(market.get("total_supply")),
            max=_num(market.get("max_supply")),
        ),
        metadata=AssetMetadata(
            blockchain=DEFAULT_BLOCKCHAIN,
            category=(categories[0] if categories and categories[0] else DEFAULT_TOKEN_CATEGORY),
            created_date=data.get("genesis_date"),
            verified=True,
        ),
        links=AssetLinks(
            website=homepage[0] if homepage and homepage[0] else None,
            twitter=TWITTER_URL.format(handle=twitter) if twitter else "",
        ),
        images=AssetImages(
            thumbnail=image.get("thumb"),
            small=image.get("small"),
            large=image.get("large"),
        ),
    )


def normalize_collection(data: Any, stats: Optional[Dict[str, Any]] = None) -> NormalizedAsset:
    """Normalize an OpenSea collection record.

    ``stats`` supplies snake_case stats when the record itself has none,
    as with collection listings.

    Raises:
        ErrNormalizationFailed: If the record is not a mapping with a slug
    """
    if not isinstance(data, dict):
        raise ErrNormalizationFailed("collection record must be a mapping")
    slug = data.get("collection") or data.get("slug")
    if not slug:
        raise ErrNormalizationFailed("collection record has no slug")

    block = _dict(data.get("stats")) or _dict(stats)
    contracts = data.get("primary_asset_contracts") or []
    primary = _dict(contracts[0]) if contracts else {}
    twitter = data.get("twitter_username")

    return NormalizedAsset(
        id=slug,
        type=ASSET_TYPE_NFT,
        name=data.get("name") or UNKNOWN_COLLECTION,
        description=clean_description(data.get("description")),
        floor_price=_num(block.get("floor_price")) or 0.0,
        volume=VolumeInfo(
            volume_24h=_num(block.get("one_day_volume")) or 0.0,
            volume_total=_num(block.get("total_volume")) or 0.0,
        ),
        supply=SupplyInfo(total=_num(block.get("total_supply")) or 0.0),
        metadata=AssetMetadata(
            blockchain=primary.get("asset_contract_type") or DEFAULT_BLOCKCHAIN,
            contract_address=primary.get("address"),
            created_date=data.get("created_date"),
            verified=data.get("safelist_request_status") == "verified",
            category=NFT_CATEGORY,
        ),
        links=AssetLinks(
            website=data.get("external_url"),
            twitter=TWITTER_URL.format(handle=twitter) if twitter else "",
            discord=data.get("discord_url"),
            opensea=OPENSEA_COLLECTION_URL.format(slug=slug),
        ),
        images=AssetImages(
            thumbnail=data.get("image_url"),
            small=data.get("featured_image_url"),
            large=data.get("banner_image_url"),
        ),
    )


__all__ = ["clean_description", "normalize_token", "normalize_collection"]
