from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from fuzzy_align.models import DEFAULT_WEIGHTS, ScoringWeights
from fuzzy_align.search import compute_match_length, fuzzy_match

try:
    __version__ = version("fuzzy-align")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "__version__",
    "compute_match_length",
    "fuzzy_match",
]
