"""Range searchers over fixed, pre-ordered collections."""

from .base_search import AbstractMatchResult, ArraySearcher
from .binary_range import BinaryRangeSearcher, MatchResult
from .linear_range import LinearMatchResult, LinearRangeSearcher

__all__ = [
    "AbstractMatchResult",
    "ArraySearcher",
    "BinaryRangeSearcher",
    "MatchResult",
    "LinearRangeSearcher",
    "LinearMatchResult",
]
