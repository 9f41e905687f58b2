"""Health check API routes."""

import platform
import time
from typing import Any, Dict

from fastapi import APIRouter, Request

from core.config import settings
from core.constants import HealthStatus
from core.validation import list_fallback_providers
from models.schemas.base import utc_timestamp

router = APIRouter()

PROVIDERS = ("llm", "qloo", "coingecko", "opensea", "twitter", "farcaster")
COMPONENTS = (
    "cache",
    "theme_expansion",
    "taste",
    "market_data",
    "marketplace",
    "social",
    "orchestrator",
    "simulator",
)


def _uptime(request: Request) -> float:
    started_at = getattr(request.app.state, "started_at", None)
    return round(time.time() - started_at, 3) if started_at else 0.0


@router.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": HealthStatus.HEALTHY.value,
        "timestamp": utc_timestamp(),
        "uptime": _uptime(request),
        "version": settings.service_version,
        "environment": settings.environment,
        "service": settings.service_name,
    }


@router.get("/health/detailed")
async def detailed_health_check(request: Request) -> Dict[str, Any]:
    """Detailed health check with component and provider status.

    Missing components make the service unhealthy. Providers without
    credentials only degrade it, since their adapters fall back.
    """
    state = request.app.state
    components = {
        name: "ready" if getattr(state, name, None) is not None else "missing" for name in COMPONENTS
    }
    fallback = set(list_fallback_providers(settings))
    providers = {name: "not_configured" if name in fallback else "configured" for name in PROVIDERS}

    if "missing" in components.values():
        overall = HealthStatus.UNHEALTHY
    elif fallback:
        overall = HealthStatus.DEGRADED
    else:
        overall = HealthStatus.HEALTHY

    cache = getattr(state, "cache", None)
    return {
        "status": overall.value,
        "timestamp": utc_timestamp(),
        "service": {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
            "uptime": _uptime(request),
        },
        "system": {
            "platform": platform.system().lower(),
            "arch": platform.machine(),
            "pythonVersion": platform.python_version(),
        },
        "components": components,
        "dependencies": {
            "externalApis": providers,
            "cache": cache.stats() if cache is not None else None,
        },
    }
