"""Asset discovery API routes."""

import asyncio
import math
import time
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from core.constants import HealthStatus
from core.logger import logger
from internal.api.dependencies import get_market_data, get_marketplace, get_social
from internal.market_data.interface import IMarketData
from internal.marketplace.interface import IMarketplace
from internal.scoring.usecase.helpers import round_half_up
from internal.social.interface import ISocial
from models.schemas.assets import AssetsRequest, NFTDiscoveryRequest, TokenDiscoveryRequest
from models.schemas.base import ApiResponse

router = APIRouter()

MARKET_DATA_SERVICE = "MarketDataService"
MARKETPLACE_SERVICE = "MarketplaceService"
SOCIAL_SERVICE = "SocialService"


def _tagged(matches: List[Any], asset_type: str, source: str, min_score: float) -> List[Dict[str, Any]]:
    return [
        {**m.to_dict(), "type": asset_type, "source": source}
        for m in matches
        if m.relevance_score >= min_score
    ]


@router.post("", response_model=ApiResponse)
async def discover_assets(
    body: AssetsRequest,
    market_data: IMarketData = Depends(get_market_data),
    marketplace: IMarketplace = Depends(get_marketplace),
    social: ISocial = Depends(get_social),
):
    """Token and NFT matches for a keyword set, with optional social context."""
    start = time.perf_counter()
    options = body.options
    per_type = math.ceil(options.limit / 2)

    branches = {}
    if body.includes("tokens"):
        branches["tokens"] = market_data.find_relevant_tokens(body.keywords, per_type)
    if body.includes("nfts"):
        branches["nfts"] = marketplace.find_relevant_nfts(body.keywords, per_type)
    if options.include_social_data:
        branches["social"] = social.analyze_social_trend(body.keywords[0])

    outcomes = await asyncio.gather(*branches.values(), return_exceptions=True)

    settled = {}
    for name, outcome in zip(branches, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning(f"Asset discovery branch {name} failed: {outcome}")
            continue
        settled[name] = outcome

    tokens = _tagged(settled.get("tokens", []), "token", "coingecko", options.min_relevance_score)
    nfts = _tagged(settled.get("nfts", []), "nft_collection", "opensea", options.min_relevance_score)
    social_analysis = settled.get("social")

    combined = sorted(tokens + nfts, key=lambda a: a["relevanceScore"], reverse=True)[: options.limit]
    average = round_half_up(sum(a["relevanceScore"] for a in combined) / len(combined)) if combined else 0

    services = [MARKET_DATA_SERVICE, MARKETPLACE_SERVICE]
    if options.include_social_data:
        services.append(SOCIAL_SERVICE)

    return ApiResponse(
        data={
            "assets": combined,
            "socialAnalysis": social_analysis.to_dict() if social_analysis is not None else None,
            "summary": {
                "totalFound": len(combined),
                "tokenCount": len(tokens),
                "nftCount": len(nfts),
                "averageRelevanceScore": average,
            },
        },
        message="Asset discovery completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "cached": options.use_cache,
            "services": services,
            "keywordCount": len(body.keywords),
            "assetTypes": ", ".join(body.asset_types),
        },
    )


@router.post("/tokens", response_model=ApiResponse)
async def discover_tokens(body: TokenDiscoveryRequest, market_data: IMarketData = Depends(get_market_data)):
    start = time.perf_counter()
    matches = await market_data.find_relevant_tokens(body.keywords, body.limit)
    return ApiResponse(
        data=[m.to_dict() for m in matches],
        message="Token discovery completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "cached": body.use_cache,
            "service": MARKET_DATA_SERVICE,
            "keywordCount": len(body.keywords),
            "resultCount": len(matches),
        },
    )


@router.post("/nfts", response_model=ApiResponse)
async def discover_nfts(body: NFTDiscoveryRequest, marketplace: IMarketplace = Depends(get_marketplace)):
    start = time.perf_counter()
    matches = await marketplace.find_relevant_nfts(body.keywords, body.limit)
    return ApiResponse(
        data=[m.to_dict() for m in matches],
        message="NFT discovery completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "cached": body.use_cache,
            "service": MARKETPLACE_SERVICE,
            "keywordCount": len(body.keywords),
            "resultCount": len(matches),
        },
    )


@router.get("/trending", response_model=ApiResponse)
async def trending_assets(
    limit: int = Query(default=20, gt=0, le=100),
    include_tokens: bool = Query(default=True, alias="includeTokens"),
    include_nfts: bool = Query(default=True, alias="includeNFTs"),
    market_data: IMarketData = Depends(get_market_data),
    marketplace: IMarketplace = Depends(get_marketplace),
):
    """Trending tokens and collections, each capped at half the limit."""
    start = time.perf_counter()
    per_type = math.ceil(limit / 2)

    tokens = (await market_data.get_trending_tokens())[:per_type] if include_tokens else []
    nfts = (await marketplace.get_trending_collections())[:per_type] if include_nfts else []

    services = []
    if include_tokens:
        services.append(MARKET_DATA_SERVICE)
    if include_nfts:
        services.append(MARKETPLACE_SERVICE)

    return ApiResponse(
        data={
            "tokens": [t.to_dict() for t in tokens],
            "nfts": [c.to_dict() for c in nfts],
            "summary": {
                "totalCount": len(tokens) + len(nfts),
                "tokenCount": len(tokens),
                "nftCount": len(nfts),
            },
        },
        message="Trending assets retrieved successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "services": services,
            "limit": limit,
            "includeTokens": include_tokens,
            "includeNFTs": include_nfts,
        },
    )


@router.get("/health", response_model=ApiResponse)
async def assets_health(
    market_data: IMarketData = Depends(get_market_data),
    marketplace: IMarketplace = Depends(get_marketplace),
):
    """Probe both discovery adapters with their trending endpoints."""
    checks = {"CoinGecko": market_data.get_trending_tokens(), "OpenSea": marketplace.get_trending_collections()}
    outcomes = await asyncio.gather(*checks.values(), return_exceptions=True)

    services = [
        {
            "service": name,
            "status": (HealthStatus.UNHEALTHY if isinstance(outcome, BaseException) else HealthStatus.HEALTHY).value,
        }
        for name, outcome in zip(checks, outcomes)
    ]
    all_healthy = all(s["status"] == HealthStatus.HEALTHY.value for s in services)

    envelope = ApiResponse(
        data={
            "status": (HealthStatus.HEALTHY if all_healthy else HealthStatus.DEGRADED).value,
            "services": services,
        },
        message="Asset services health check completed",
        meta={"servicesChecked": len(services), "allHealthy": all_healthy},
    )
    return JSONResponse(status_code=200 if all_healthy else 503, content=envelope.model_dump())
