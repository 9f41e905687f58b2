"""Scoring domain errors."""


class ErrNormalizationFailed(Exception):
    """Raw provider record could not be turned into a NormalizedAsset."""

    pass


class ErrUnknownSource(Exception):
    """Batch normalisation was asked for an unsupported provider."""

    pass


__all__ = ["ErrNormalizationFailed", "ErrUnknownSource"]
