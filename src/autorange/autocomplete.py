"""Prefix autocomplete over a fixed set of weighted terms.

Wires `Term` comparators into a `BinaryRangeSearcher`: terms are ordered by
query string so every prefix selects a contiguous block, and the block is
ranked by descending weight on the way out.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from autorange.config import Settings, load_settings
from autorange.exceptions import InvalidArgumentError
from autorange.search.binary_range import BinaryRangeSearcher, MatchResult
from autorange.terms import Term, matches_prefix, query_order, weight_then_query_order

logger = logging.getLogger(__name__)


class Autocomplete:
    """Search-as-you-type lookup over weighted terms.

    The terms are copied on construction, so the caller's sequence is left
    untouched and may be reused.
    """

    def __init__(self, terms: Iterable[Term], settings: Optional[Settings] = None) -> None:
        if terms is None:
            raise InvalidArgumentError("terms must not be None")
        self.settings = settings or load_settings()
        self._searcher: BinaryRangeSearcher[Term, str] = BinaryRangeSearcher.for_unsorted_array(
            list(terms), query_order, matches_prefix
        )
        logger.info("Autocomplete ready with %d terms", len(self._searcher))

    def _find(self, prefix: Optional[str]) -> MatchResult[Term]:
        if prefix is None:
            raise InvalidArgumentError("prefix must not be None")
        return self._searcher.find_all_matches(prefix)

    def count_matches(self, prefix: str) -> int:
        return self._find(prefix).count()

    def all_matches(self, prefix: str) -> List[Term]:
        """Return every term starting with `prefix`, heaviest first."""
        return self._find(prefix).sorted(weight_then_query_order)

    def top_matches(self, prefix: str, limit: Optional[int] = None) -> List[Term]:
        """Return the `limit` heaviest terms starting with `prefix`.

        `limit` defaults to `settings.autocomplete.default_limit`.
        """
        if limit is None:
            limit = self.settings.autocomplete.default_limit
        return self._find(prefix).top(limit, weight_then_query_order)
