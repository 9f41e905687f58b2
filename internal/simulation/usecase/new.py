"""Factory function for creating the portfolio simulator."""

from typing import Optional

from pkg.logger.logger import Logger

from ..type import Config
from .simulator import Simulator


def New(config: Config, logger: Optional[Logger] = None) -> Simulator:
    """Create a new simulator.

    Raises:
        ValueError: If config is invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    return Simulator(config=config, logger=logger)


__all__ = ["New"]
