"""Weighted query terms used for autocomplete ranking.

A `Term` pairs a query string with a non-negative weight. The module-level
functions wrap the term's comparison methods so they can be handed straight
to a searcher as its comparator and matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from autorange.exceptions import InvalidArgumentError


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _require_term(other: Any) -> "Term":
    if other is None:
        raise InvalidArgumentError("cannot compare a term with None")
    if not isinstance(other, Term):
        raise InvalidArgumentError(f"expected a Term, got {type(other).__name__}")
    return other


@dataclass(frozen=True, slots=True)
class Term:
    """An immutable query string with a non-negative weight.

    Attributes
    ----------
    query: str
        The text offered as a completion.
    weight: int
        Popularity of the query; higher weights rank first.
    """

    query: str
    weight: int

    def __post_init__(self) -> None:
        if not isinstance(self.query, str):
            raise InvalidArgumentError("query must be a string")
        # bool is an int subclass but never a meaningful weight
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise InvalidArgumentError("weight must be an integer")
        if self.weight < 0:
            raise InvalidArgumentError(f"weight must be non-negative, got {self.weight}")

    def query_order(self, other: Term) -> int:
        """Compare lexicographically by query string."""
        return _compare(self.query, _require_term(other).query)

    def reverse_weight_order(self, other: Term) -> int:
        """Compare by weight, heaviest first."""
        return _sign(_require_term(other).weight - self.weight)

    def matches_prefix(self, prefix: Optional[str]) -> int:
        """Classify this term against `prefix`.

        Returns 0 if the query starts with `prefix`, otherwise the sign of
        comparing the query with `prefix`. Over a list sorted by
        `query_order` this yields negatives, then zeros, then positives.
        """
        if prefix is None:
            raise InvalidArgumentError("prefix must not be None")
        if self.query.startswith(prefix):
            return 0
        return _compare(self.query, prefix)


def query_order(a: Term, b: Term) -> int:
    return _require_term(a).query_order(b)


def reverse_weight_order(a: Term, b: Term) -> int:
    return _require_term(a).reverse_weight_order(b)


def matches_prefix(term: Term, prefix: str) -> int:
    return _require_term(term).matches_prefix(prefix)


def weight_then_query_order(a: Term, b: Term) -> int:
    """Heaviest first, ties broken lexicographically by query."""
    return reverse_weight_order(a, b) or query_order(a, b)
