"""autorange: binary range search over sorted collections, with prefix autocomplete."""

__version__ = "0.1.0"

from .autocomplete import Autocomplete
from .exceptions import AutorangeError, ConfigError, InvalidArgumentError
from .search import BinaryRangeSearcher, LinearRangeSearcher, MatchResult
from .terms import Term

__all__ = [
    "Autocomplete",
    "BinaryRangeSearcher",
    "LinearRangeSearcher",
    "MatchResult",
    "Term",
    "AutorangeError",
    "ConfigError",
    "InvalidArgumentError",
]
