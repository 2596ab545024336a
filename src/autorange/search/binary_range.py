"""Range searcher that finds a block of matching items with two binary searches.

The backing list is sorted once so that, for any query the caller will use,
the match function yields all negative values, then all zeros, then all
positive values across the list. For example, with a lexicographic sort and
"item is prefixed by query" as the match function::

    sorted items:          aaa   abc   ba   bzb   cdef
    match against "b":      -1    -1    0     0      1

`find_all_matches("b")` then locates `[2, 4)` in O(log n).
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


class MatchResult(AbstractMatchResult[T]):
    """Read-only view of `items[start:end]` in a searcher's backing list."""

    __slots__ = ("_items", "_start", "_end")

    def __init__(self, items: List[T], start: int = 0, end: int = 0) -> None:
        if not 0 <= start <= end <= len(items):
            raise InvalidArgumentError(
                f"invalid range [{start}, {end}) for {len(items)} items"
            )
        self._items = items
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def count(self) -> int:
        return self._end - self._start

    def unsorted(self) -> List[T]:
        return self._items[self._start : self._end]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchResult):
            return NotImplemented
        return (
            self._items is other._items
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._items), self._start, self._end))

    def __repr__(self) -> str:
        return f"MatchResult(start={self._start}, end={self._end})"


class BinaryRangeSearcher(ArraySearcher[T, U]):
    """Searcher over a list sorted once at construction time.

    The list passed in is taken over by the searcher: it may be sorted in
    place and must not be modified by the caller afterwards. Use
    `for_unsorted_array` to sort it, or construct directly (or through
    `for_sorted_array`) when the caller already guarantees the order
    described in the module docstring.

    Instances never mutate their list after construction, so concurrent
    read-only queries are safe.
    """

    def __init__(self, items: List[T], matcher: Matcher[T, U]) -> None:
        self._items: List[T] = validate_items(items)
        validate_function(matcher, "matcher")
        self._matcher = matcher
        logger.debug("Built BinaryRangeSearcher over %d items", len(self._items))

    @classmethod
    def for_unsorted_array(
        cls,
        items: List[T],
        sort_using: Comparator[T],
        match_using: Matcher[T, U],
    ) -> "BinaryRangeSearcher[T, U]":
        """Sort `items` in place with `sort_using` and build a searcher on it.

        Requires that sorting with `sort_using` puts the list in an order where
        `match_using(item, query)` is negative, then zero, then positive for
        every query the caller will use.

        Raises `InvalidArgumentError` if `items` is None or contains None, or
        if either function is None.
        """
        validate_items(items)
        validate_function(sort_using, "sort_using")
        validate_function(match_using, "match_using")
        items.sort(key=cmp_to_key(sort_using))
        return cls(items, match_using)

    @classmethod
    def for_sorted_array(
        cls, items: List[T], match_using: Matcher[T, U]
    ) -> "BinaryRangeSearcher[T, U]":
        """Build a searcher on a list the caller has already ordered."""
        return cls(items, match_using)

    @property
    def items(self) -> List[T]:
        """Return a copy of the backing list in its sorted order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def find_all_matches(self, query: Optional[U]) -> MatchResult[T]:
        if query is None:
            raise InvalidArgumentError("query must not be None")
        if not self._items:
            return MatchResult(self._items)

        last = len(self._items) - 1
        start = self._first_match(query, 0, last)
        if start is None:
            logger.debug("No matches for %r", query)
            return MatchResult(self._items)
        end = self._end_of_matches(query, start, last)
        logger.debug("Matches for %r span [%d, %d)", query, start, end)
        return MatchResult(self._items, start, end)

    def _match(self, index: int, query: U) -> int:
        return self._matcher(self._items[index], query)

    def _first_match(self, query: U, low: int, high: int) -> Optional[int]:
        """Return the first index in `[low, high]` matching with 0, or None."""
        seen = False
        while low != high:
            mid = (low + high) // 2
            result = self._match(mid, query)
            if result == 0:
                seen = True
                high = mid
            elif result < 0:
                low = mid + 1
            else:
                high = mid
        if seen or self._match(high, query) == 0:
            return high
        return None

    def _end_of_matches(self, query: U, low: int, high: int) -> int:
        """Return the index one past the last match, searching from `low`."""
        while low != high:
            mid = (low + high) // 2
            if self._match(mid, query) == 0:
                low = mid + 1
            else:
                high = mid
        if self._match(high, query) == 0:
            return high + 1
        return high
