"""Taste correlation API routes."""

import time

from fastapi import APIRouter, Depends

from core.constants import ErrorCode, HealthStatus
from core.errors import AppError
from core.logger import logger
from internal.api.dependencies import get_taste
from internal.taste.interface import ITaste
from models.schemas.base import ApiResponse, utc_timestamp
from models.schemas.taste import BrandsRequest, InfluencersRequest, TasteRequest

router = APIRouter()

SERVICE = "TasteService"


@router.post("", response_model=ApiResponse)
async def taste_correlations(body: TasteRequest, taste: ITaste = Depends(get_taste)):
    """Taste-graph correlations for a theme and its keywords."""
    start = time.perf_counter()
    try:
        recommendation = await taste.get_taste_correlations(
            body.cultural_theme,
            body.keywords,
            body.categories,
            use_cache=body.options.use_cache,
            limit=body.options.limit,
        )
    except Exception as e:
        logger.error(f"Taste correlation failed: {e}", extra={"theme": body.cultural_theme})
        raise AppError(
            str(e) or "Taste correlation analysis failed",
            status_code=500,
            code=ErrorCode.TASTE_ANALYSIS_ERROR.value,
            details={"culturalTheme": body.cultural_theme, "keywords": body.keywords},
        )

    return ApiResponse(
        data=recommendation.to_dict(),
        message="Taste correlation analysis completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "cached": body.options.use_cache,
            "service": SERVICE,
            "keywordCount": len(body.keywords),
            "categoryCount": len(body.categories),
        },
    )


@router.post("/influencers", response_model=ApiResponse)
async def influencer_correlations(body: InfluencersRequest, taste: ITaste = Depends(get_taste)):
    start = time.perf_counter()
    try:
        correlations = await taste.get_influencer_correlations(
            body.taste_profile.to_profile(), list(body.platforms)
        )
    except Exception as e:
        logger.error(f"Influencer correlation failed: {e}")
        raise AppError(
            str(e) or "Influencer correlation analysis failed",
            status_code=500,
            code=ErrorCode.INFLUENCER_ANALYSIS_ERROR.value,
            details={"platforms": list(body.platforms)},
        )

    return ApiResponse(
        data=correlations.to_dict(),
        message="Influencer correlation analysis completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "platforms": list(body.platforms),
            "service": SERVICE,
        },
    )


@router.post("/brands", response_model=ApiResponse)
async def brand_affinities(body: BrandsRequest, taste: ITaste = Depends(get_taste)):
    start = time.perf_counter()
    try:
        affinities = await taste.get_brand_affinities(body.taste_profile.to_profile(), body.sectors)
    except Exception as e:
        logger.error(f"Brand affinity analysis failed: {e}")
        raise AppError(
            str(e) or "Brand affinity analysis failed",
            status_code=500,
            code=ErrorCode.BRAND_ANALYSIS_ERROR.value,
            details={"sectors": body.sectors},
        )

    return ApiResponse(
        data=affinities.to_dict(),
        message="Brand affinity analysis completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "sectors": body.sectors,
            "service": SERVICE,
        },
    )


@router.get("/health", response_model=ApiResponse)
async def taste_health(taste: ITaste = Depends(get_taste)):
    return ApiResponse(
        data={"status": HealthStatus.HEALTHY.value, "service": SERVICE, "timestamp": utc_timestamp()},
        message="Taste service is operational",
        meta={"service": SERVICE, "testSuccessful": True},
    )
