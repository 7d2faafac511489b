"""Predicate evaluation engine: registry, argument resolution, evaluator.

Built-in predicate implementations live in :mod:`tsfilter.predicates.operations`
and are loaded when :func:`default_registry` is first called.
"""

from __future__ import annotations

from tsfilter.predicates.arguments import resolve_arguments
from tsfilter.predicates.cache import CacheStore
from tsfilter.predicates.evaluator import PredicateEvaluator
from tsfilter.predicates.registry import PredicateRegistry, default_registry
from tsfilter.predicates.validation import check_predicate, validate_query

__all__ = [
    "CacheStore",
    "PredicateEvaluator",
    "PredicateRegistry",
    "check_predicate",
    "default_registry",
    "resolve_arguments",
    "validate_query",
]
