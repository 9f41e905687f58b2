from .new import New
from .scorer import Scorer, failed_score
from .normalizer import clean_description, normalize_collection, normalize_token
from .helpers import risk_level

__all__ = [
    "New",
    "Scorer",
    "failed_score",
    "clean_description",
    "normalize_collection",
    "normalize_token",
    "risk_level",
]
