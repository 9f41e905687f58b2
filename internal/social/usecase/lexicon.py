"""Sentiment lexicon loading."""

import os
from typing import Any, Optional

import yaml  # type: ignore

from pkg.logger.logger import Logger

from ..errors import ErrLexiconInvalid
from ..type import SentimentLexicon


def parse_lexicon(data: Any) -> SentimentLexicon:
    """Build a lexicon from parsed YAML.

    Expected format::

        positive: [good, great, ...]
        negative: [bad, scam, ...]

    Raises:
        ErrLexiconInvalid: If either list is missing or not a list of strings
    """
    if not isinstance(data, dict):
        raise ErrLexiconInvalid("lexicon must be a mapping")

    words = {}
    for key in ("positive", "negative"):
        values = data.get(key)
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ErrLexiconInvalid(f"'{key}' must be a list of strings")
        words[key] = tuple(v.lower() for v in values if v.strip())

    return SentimentLexicon(positive=words["positive"], negative=words["negative"])


def load_lexicon(path: Optional[str], logger: Optional[Logger] = None) -> SentimentLexicon:
    """Load the lexicon from YAML, falling back to the built-in word lists."""
    if not path:
        return SentimentLexicon()

    if not os.path.exists(path):
        if logger:
            logger.warning(f"[SentimentLexicon] File not found: {path}. Using built-in lists.")
        return SentimentLexicon()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        lexicon = parse_lexicon(data)
    except yaml.YAMLError as e:
        if logger:
            logger.error(f"[SentimentLexicon] Malformed YAML in {path}: {e}. Using built-in lists.")
        return SentimentLexicon()
    except ErrLexiconInvalid as e:
        if logger:
            logger.error(f"[SentimentLexicon] Invalid lexicon in {path}: {e}. Using built-in lists.")
        return SentimentLexicon()

    if logger:
        logger.info(
            f"[SentimentLexicon] Loaded from {path}: "
            f"{len(lexicon.positive)} positive, {len(lexicon.negative)} negative"
        )
    return lexicon


__all__ = ["parse_lexicon", "load_lexicon"]
