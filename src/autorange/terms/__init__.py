"""Weighted query terms and their comparator functions."""

from .term import (
    Term,
    matches_prefix,
    query_order,
    reverse_weight_order,
    weight_then_query_order,
)

__all__ = [
    "Term",
    "query_order",
    "reverse_weight_order",
    "matches_prefix",
    "weight_then_query_order",
]
