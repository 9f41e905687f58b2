"""Module-specific errors for taste correlation."""


class ErrInvalidInput(Exception):
    """Raised when the theme or keyword list is empty."""

    pass


__all__ = ["ErrInvalidInput"]
