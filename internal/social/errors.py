"""Social domain errors."""


class ErrLexiconInvalid(Exception):
    """Sentiment lexicon file is malformed."""

    pass


__all__ = ["ErrLexiconInvalid"]
