"""Factory function for creating the theme expansion adapter."""

from typing import Optional

from pkg.cache.interface import ICache
from pkg.llm.interface import ILLMClient
from pkg.logger.logger import Logger

from ..type import Config
from .theme_expansion import ThemeExpansionUseCase


def New(
    config: Config,
    llm: ILLMClient,
    cache: Optional[ICache] = None,
    logger: Optional[Logger] = None,
) -> ThemeExpansionUseCase:
    """Create a new theme expansion adapter.

    Args:
        config: Adapter configuration
        llm: LLM completion client
        cache: Cache for expansions (optional)
        logger: Logger instance (optional)

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return ThemeExpansionUseCase(config=config, llm=llm, cache=cache, logger=logger)


__all__ = ["New"]
