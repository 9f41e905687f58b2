"""Factory function for creating the pipeline orchestrator."""

from typing import Optional

from pkg.cache.interface import ICache
from pkg.logger.logger import Logger
from internal.market_data.interface import IMarketData
from internal.marketplace.interface import IMarketplace
from internal.scoring.interface import IScorer
from internal.social.interface import ISocial
from internal.taste.interface import ITaste
from internal.theme_expansion.interface import IThemeExpansion

from ..type import Config
from .orchestrator import OrchestratorUseCase


def New(
    config: Config,
    theme_expansion: IThemeExpansion,
    taste: ITaste,
    social: ISocial,
    market_data: IMarketData,
    marketplace: IMarketplace,
    scorer: IScorer,
    cache: Optional[ICache] = None,
    logger: Optional[Logger] = None,
) -> OrchestratorUseCase:
    """Create a new orchestrator.

    Raises:
        ValueError: If config is invalid or a collaborator is missing
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    collaborators = {
        "theme_expansion": theme_expansion,
        "taste": taste,
        "social": social,
        "market_data": market_data,
        "marketplace": marketplace,
        "scorer": scorer,
    }
    for name, value in collaborators.items():
        if value is None:
            raise ValueError(f"{name} is required")

    return OrchestratorUseCase(
        config=config,
        theme_expansion=theme_expansion,
        taste=taste,
        social=social,
        market_data=market_data,
        marketplace=marketplace,
        scorer=scorer,
        cache=cache,
        logger=logger,
    )


__all__ = ["New"]
