"""Theme expansion API routes."""

import time

from fastapi import APIRouter, Depends

from core.constants import ErrorCode, HealthStatus
from core.errors import AppError
from core.logger import logger
from internal.api.dependencies import get_theme_expansion
from internal.theme_expansion.interface import IThemeExpansion
from models.schemas.base import ApiResponse
from models.schemas.expand import CulturalAnalysisRequest, ExpandRequest

router = APIRouter()

SERVICE = "ThemeExpansionService"


@router.post("", response_model=ApiResponse)
async def expand_theme(
    body: ExpandRequest,
    theme_expansion: IThemeExpansion = Depends(get_theme_expansion),
):
    """Expand a cultural theme into keywords, categories and context."""
    start = time.perf_counter()
    try:
        expansion = await theme_expansion.expand_theme(
            body.theme,
            use_cache=body.options.use_cache,
            max_tokens=body.options.max_tokens,
            temperature=body.options.temperature,
        )
    except Exception as e:
        logger.error(f"Theme expansion failed: {e}", extra={"theme": body.theme})
        raise AppError(
            str(e) or "Theme expansion failed",
            status_code=500,
            code=ErrorCode.EXPANSION_ERROR.value,
            details={"theme": body.theme},
        )

    return ApiResponse(
        data=expansion.to_dict(),
        message="Theme expansion completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "cached": body.options.use_cache,
            "service": SERVICE,
        },
    )


@router.post("/cultural-analysis", response_model=ApiResponse)
async def cultural_analysis(
    body: CulturalAnalysisRequest,
    theme_expansion: IThemeExpansion = Depends(get_theme_expansion),
):
    """Narrative analysis of a keyword set."""
    start = time.perf_counter()
    try:
        analysis = await theme_expansion.generate_cultural_analysis(body.keywords, body.context)
    except Exception as e:
        logger.error(f"Cultural analysis failed: {e}", extra={"keywords": len(body.keywords)})
        raise AppError(
            str(e) or "Cultural analysis failed",
            status_code=500,
            code=ErrorCode.ANALYSIS_ERROR.value,
            details={"keywords": body.keywords},
        )

    return ApiResponse(
        data=analysis.to_dict(),
        message="Cultural analysis completed successfully",
        meta={
            "processingTime": int((time.perf_counter() - start) * 1000),
            "keywordCount": len(body.keywords),
            "service": SERVICE,
        },
    )


@router.get("/health", response_model=ApiResponse)
async def expand_health(theme_expansion: IThemeExpansion = Depends(get_theme_expansion)):
    """Reports unavailable without LLM credentials; makes no completion call."""
    if not theme_expansion.is_configured:
        raise AppError(
            "Expansion service health check failed",
            status_code=503,
            code=ErrorCode.SERVICE_UNAVAILABLE.value,
            details={"error": "LLM client is not configured", "service": SERVICE},
        )
    return ApiResponse(
        data={"status": HealthStatus.HEALTHY.value},
        message="Expansion service is operational",
        meta={"service": SERVICE, "configured": True},
    )
