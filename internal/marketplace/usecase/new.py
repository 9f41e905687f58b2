"""Factory function for creating the marketplace adapter."""

from typing import Optional

from pkg.cache.interface import ICache
from pkg.defaults.interface import IDefaultsFiller
from pkg.http.interface import IHttpClient
from pkg.logger.logger import Logger

from ..type import Config
from .marketplace import MarketplaceUseCase


def New(
    config: Config,
    client: Optional[IHttpClient] = None,
    cache: Optional[ICache] = None,
    defaults: Optional[IDefaultsFiller] = None,
    logger: Optional[Logger] = None,
) -> MarketplaceUseCase:
    """Create a new marketplace adapter.

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return MarketplaceUseCase(
        config=config, client=client, cache=cache, defaults=defaults, logger=logger
    )


__all__ = ["New"]
