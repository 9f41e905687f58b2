"""Factory function for creating the taste adapter."""

from typing import Optional

from pkg.cache.interface import ICache
from pkg.http.interface import IHttpClient
from pkg.logger.logger import Logger
from internal.theme_expansion.interface import IThemeExpansion

from ..type import Config
from .taste import TasteUseCase


def New(
    config: Config,
    client: Optional[IHttpClient] = None,
    theme_expansion: Optional[IThemeExpansion] = None,
    cache: Optional[ICache] = None,
    logger: Optional[Logger] = None,
) -> TasteUseCase:
    """Create a new taste adapter.

    Args:
        config: Adapter configuration
        client: HTTP client for the taste API, None runs fallback-only
        theme_expansion: LLM adapter used by the AI fallback tier (optional)
        cache: Cache for correlations (optional)
        logger: Logger instance (optional)
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return TasteUseCase(
        config=config,
        client=client,
        theme_expansion=theme_expansion,
        cache=cache,
        logger=logger,
    )


__all__ = ["New"]
