"""Run a compiled query over a tree and keep the matches an evaluator accepts."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from tree_sitter import QueryCursor as _TSQueryCursor

from tsfilter.exceptions import QueryCompileError
from tsfilter.types.query import Capture, CompiledQuery, Node, QueryMatch

if TYPE_CHECKING:
    from tsfilter.predicates.evaluator import PredicateEvaluator

logger = logging.getLogger(__name__)


class QueryCursor:
    """Iterates the matches of one compiled query.

    Predicate forms were stripped from the text tree-sitter compiled, so the
    raw matches are unfiltered. Each one is passed through
    :meth:`PredicateEvaluator.filter_match`, which applies the registered
    predicates.
    """

    def __init__(self, query: CompiledQuery) -> None:
        if query.ts_query is None:
            raise QueryCompileError(f"{query.source}: query was not compiled for a tree-sitter language")
        self._query = query

    @property
    def query(self) -> CompiledQuery:
        return self._query

    def raw_matches(self, node: Node) -> Iterator[QueryMatch]:
        """Yield every match under *node* without predicate filtering."""
        cursor = _TSQueryCursor(self._query.ts_query)
        for pattern_index, captures in cursor.matches(node):
            yield self._convert(pattern_index, captures)

    def matches(self, node: Node, evaluator: PredicateEvaluator) -> Iterator[QueryMatch]:
        """Yield the matches under *node* that *evaluator* accepts."""
        for match in self.raw_matches(node):
            if evaluator.filter_match(match):
                yield match
            else:
                logger.debug("Rejected match of pattern %d in %s", match.pattern_index, self._query.source)

    def next_match(self, node: Node, evaluator: PredicateEvaluator) -> QueryMatch | None:
        """Return the first accepted match in document order, or ``None``."""
        return next(self.matches(node, evaluator), None)

    def _convert(self, pattern_index: int, captures: dict[str, list[Any]]) -> QueryMatch:
        converted: list[Capture] = []
        for name, nodes in captures.items():
            capture_id = self._query.capture_id(name)
            if capture_id is None:
                continue
            converted.extend(Capture(id=capture_id, node=node) for node in nodes)
        converted.sort(key=lambda capture: capture.node.start_byte)
        return QueryMatch(query=self._query, pattern_index=pattern_index, captures=tuple(converted))
