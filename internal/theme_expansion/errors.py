"""Module-specific errors for theme expansion."""


class ErrNotConfigured(Exception):
    """Raised when no LLM credentials are configured."""

    pass


class ErrExpansionFailed(Exception):
    """Raised when the LLM request itself fails."""

    pass


class ErrInvalidInput(Exception):
    """Raised when the theme or keywords are empty."""

    pass


__all__ = [
    "ErrNotConfigured",
    "ErrExpansionFailed",
    "ErrInvalidInput",
]
