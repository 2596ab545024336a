"""Abstract range-search interface over a fixed collection of items.

A searcher is built once from a list and a three-way match function, then
answers `find_all_matches(query)` with a result describing every item that
matches the query with `0`.
"""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from autorange.exceptions import InvalidArgumentError

T = TypeVar("T")
U = TypeVar("U")

Comparator = Callable[[T, T], int]
Matcher = Callable[[T, U], int]


def validate_items(items: Any) -> List[Any]:
    """Return `items` unchanged if it is a list without None elements."""
    if items is None:
        raise InvalidArgumentError("items must not be None")
    if not isinstance(items, list):
        raise InvalidArgumentError(f"items must be a list, got {type(items).__name__}")
    for i, item in enumerate(items):
        if item is None:
            raise InvalidArgumentError(f"items[{i}] is None")
    return items


def validate_function(fn: Any, name: str) -> None:
    if fn is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not callable(fn):
        raise InvalidArgumentError(f"{name} must be callable")


class AbstractMatchResult(ABC, Generic[T]):
    """Matches found by a searcher for a single query.

    Subclasses only supply `count()` and `unsorted()`; ordering helpers are
    built on top of those.
    """

    @abstractmethod
    def count(self) -> int:
        """Return the number of matching items."""

    @abstractmethod
    def unsorted(self) -> List[T]:
        """Return a new list holding the matching items.

        The order is whatever the searcher's backing order is; it does not
        reflect any ranking.
        """
        raise NotImplementedError

    def sorted(self, comparator: Comparator[T]) -> List[T]:
        """Return the matching items ordered by `comparator`."""
        validate_function(comparator, "comparator")
        matches = self.unsorted()
        matches.sort(key=cmp_to_key(comparator))
        return matches

    def top(self, limit: int, comparator: Comparator[T]) -> List[T]:
        """Return at most `limit` matching items, smallest first by `comparator`."""
        if limit is None or limit < 0:
            raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit!r}")
        validate_function(comparator, "comparator")
        if limit == 0:
            return []
        return heapq.nsmallest(limit, self.unsorted(), key=cmp_to_key(comparator))

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[T]:
        return iter(self.unsorted())


class ArraySearcher(ABC, Generic[T, U]):
    """Abstract interface for searchers over a fixed list of items."""

    @abstractmethod
    def find_all_matches(self, query: Optional[U]) -> AbstractMatchResult[T]:
        """Return every item whose match value against `query` is 0.

        Raises `InvalidArgumentError` if `query` is None. A query without
        matches yields an empty result, not an error.
        """
        raise NotImplementedError
