"""Simulation domain errors."""


class ErrInvalidSimulation(Exception):
    """Portfolio parameters are outside the accepted ranges."""

    pass


class ErrInvalidBacktest(Exception):
    """Backtest request failed validation."""

    pass


__all__ = ["ErrInvalidSimulation", "ErrInvalidBacktest"]
