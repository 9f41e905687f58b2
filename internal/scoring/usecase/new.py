"""Factory function for creating the scorer."""

from typing import Optional

from pkg.logger.logger import Logger

from .scorer import Scorer


def New(logger: Optional[Logger] = None) -> Scorer:
    """Create a new scorer using the wall clock."""
    return Scorer(logger=logger)


__all__ = ["New"]
