"""Dependency injection for API endpoints.

Provides FastAPI dependencies for the adapters, the orchestrator and the
simulator. All of them are built once during application startup and
stored on ``app.state``.
"""

from typing import Any

from fastapi import Request, HTTPException, status  # type: ignore

from internal.market_data.interface import IMarketData
from internal.marketplace.interface import IMarketplace
from internal.orchestrator.interface import IOrchestrator
from internal.simulation.interface import ISimulator
from internal.social.interface import ISocial
from internal.taste.interface import ITaste
from internal.theme_expansion.interface import IThemeExpansion
from pkg.cache.interface import ICache


def _from_state(request: Request, name: str, label: str) -> Any:
    instance = getattr(request.app.state, name, None)
    if instance is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} is not available. The service may still be starting up or failed to initialize.",
        )
    return instance


def get_theme_expansion(request: Request) -> IThemeExpansion:
    """Theme expansion adapter.

    Raises:
        HTTPException: 503 if the adapter is not initialized
    """
    return _from_state(request, "theme_expansion", "Theme expansion service")


def get_taste(request: Request) -> ITaste:
    return _from_state(request, "taste", "Taste service")


def get_market_data(request: Request) -> IMarketData:
    return _from_state(request, "market_data", "Market data service")


def get_marketplace(request: Request) -> IMarketplace:
    return _from_state(request, "marketplace", "Marketplace service")


def get_social(request: Request) -> ISocial:
    return _from_state(request, "social", "Social service")


def get_orchestrator(request: Request) -> IOrchestrator:
    """Pipeline orchestrator.

    Raises:
        HTTPException: 503 if the orchestrator is not initialized
    """
    return _from_state(request, "orchestrator", "Orchestration service")


def get_simulator(request: Request) -> ISimulator:
    return _from_state(request, "simulator", "Simulation service")


def get_cache(request: Request) -> ICache:
    return _from_state(request, "cache", "Cache")
