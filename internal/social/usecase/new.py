"""Factory function for creating the social adapter."""

from typing import Optional

from pkg.cache.interface import ICache
from pkg.http.interface import IHttpClient
from pkg.logger.logger import Logger

from ..type import Config
from .lexicon import load_lexicon
from .social import SocialUseCase


def New(
    config: Config,
    twitter: Optional[IHttpClient] = None,
    farcaster: Optional[IHttpClient] = None,
    cache: Optional[ICache] = None,
    logger: Optional[Logger] = None,
) -> SocialUseCase:
    """Create a new social adapter.

    The sentiment lexicon is read from ``config.lexicon_path`` when set.

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return SocialUseCase(
        config=config,
        twitter=twitter,
        farcaster=farcaster,
        cache=cache,
        lexicon=load_lexicon(config.lexicon_path, logger),
        logger=logger,
    )


__all__ = ["New"]
