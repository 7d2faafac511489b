"""Built-in predicate implementations.

Each predicate is a ``check_*`` validator and a ``run_*`` evaluator,
registered under its query name in :data:`BUILTIN_OPERATIONS`.
"""

from __future__ import annotations

from tsfilter.constants.predicates import EQ_PREDICATE, IN_MESSAGE_MAP_PREDICATE, MATCH_PREDICATE
from tsfilter.predicates.operations.equality import check_eq, run_eq
from tsfilter.predicates.operations.message_map import check_in_message_map, run_in_message_map
from tsfilter.predicates.operations.regex import check_match, run_match
from tsfilter.predicates.registry import PredicateFunction, PredicateValidator

BUILTIN_OPERATIONS: dict[str, tuple[PredicateValidator, PredicateFunction]] = {
    EQ_PREDICATE: (check_eq, run_eq),
    MATCH_PREDICATE: (check_match, run_match),
    IN_MESSAGE_MAP_PREDICATE: (check_in_message_map, run_in_message_map),
}

__all__ = [
    "BUILTIN_OPERATIONS",
    "check_eq",
    "check_in_message_map",
    "check_match",
    "run_eq",
    "run_in_message_map",
    "run_match",
]
