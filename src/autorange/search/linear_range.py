"""Linear-scan searcher with the same contract as `BinaryRangeSearcher`.

Checks every item on each query, so it needs no ordering precondition.
Handy as a baseline for very small collections and as an oracle in tests.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import List, Optional

from autorange.exceptions import InvalidArgumentError

from .base_search import (
    AbstractMatchResult,
    ArraySearcher,
    Comparator,
    Matcher,
    T,
    U,
    validate_function,
    validate_items,
)

logger = logging.getLogger(__name__)


class LinearMatchResult(AbstractMatchResult[T]):
    """Result that owns the list of matching items."""

    def __init__(self, matches: List[T]) -> None:
        self._matches = matches

    def count(self) -> int:
        return len(self._matches)

    def unsorted(self) -> List[T]:
        return list(self._matches)

    def __repr__(self) -> str:
        return f"LinearMatchResult(count={len(self._matches)})"


class LinearRangeSearcher(ArraySearcher[T, U]):
    def __init__(self, items: List[T], matcher: Matcher[T, U]) -> None:
        self._items: List[T] = validate_items(items)
        validate_function(matcher, "matcher")
        self._matcher = matcher

    @classmethod
    def for_unsorted_array(
        cls,
        items: List[T],
        sort_using: Comparator[T],
        match_using: Matcher[T, U],
    ) -> "LinearRangeSearcher[T, U]":
        # Sorted anyway so results come back in the same order as the binary searcher's
        validate_items(items)
        validate_function(sort_using, "sort_using")
        validate_function(match_using, "match_using")
        items.sort(key=cmp_to_key(sort_using))
        return cls(items, match_using)

    def find_all_matches(self, query: Optional[U]) -> LinearMatchResult[T]:
        if query is None:
            raise InvalidArgumentError("query must not be None")
        matches = [item for item in self._items if self._matcher(item, query) == 0]
        logger.debug("Linear scan found %d matches for %r", len(matches), query)
        return LinearMatchResult(matches)
