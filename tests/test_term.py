from typing import Any

import pytest

from autorange.exceptions import InvalidArgumentError
from autorange.terms import (
    Term,
    matches_prefix,
    query_order,
    reverse_weight_order,
    weight_then_query_order,
)


@pytest.mark.parametrize("query, weight", [(None, 1), ("a", -1), ("a", 1.5), ("a", True), (3, 1)])
def test_invalid_terms_rejected(query: Any, weight: Any) -> None:
    with pytest.raises(InvalidArgumentError):
        Term(query, weight)


def test_term_is_immutable() -> None:
    term = Term("abc", 0)
    with pytest.raises(AttributeError):
        term.weight = 5  # type: ignore[misc]
    assert term == Term("abc", 0)


def test_query_order() -> None:
    assert Term("apple", 1).query_order(Term("banana", 1)) < 0
    assert Term("banana", 1).query_order(Term("apple", 9)) > 0
    assert query_order(Term("same", 1), Term("same", 2)) == 0


def test_reverse_weight_order() -> None:
    assert Term("a", 10).reverse_weight_order(Term("b", 1)) < 0
    assert Term("a", 1).reverse_weight_order(Term("b", 10)) > 0
    assert reverse_weight_order(Term("a", 5), Term("b", 5)) == 0


def test_comparisons_reject_none() -> None:
    with pytest.raises(InvalidArgumentError):
        Term("a", 1).query_order(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        reverse_weight_order(Term("a", 1), None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        Term("a", 1).matches_prefix(None)


@pytest.mark.parametrize(
    "query, prefix, expected",
    [
        ("band", "ban", 0),
        ("ban", "ban", 0),
        ("anything", "", 0),
        ("apple", "ban", -1),
        ("ba", "ban", -1),
        ("cat", "ban", 1),
        ("bz", "ban", 1),
    ],
)
def test_matches_prefix(query: str, prefix: str, expected: int) -> None:
    assert matches_prefix(Term(query, 0), prefix) == expected


def test_weight_then_query_order_breaks_ties_by_query() -> None:
    assert weight_then_query_order(Term("b", 5), Term("a", 5)) > 0
    assert weight_then_query_order(Term("b", 6), Term("a", 5)) < 0
