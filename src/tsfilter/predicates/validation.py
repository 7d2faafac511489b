"""Collect-all validation for compiled query predicates.

Returns a list of :class:`ValidationError` instances rather than raising,
so callers can report every bad predicate of a query in one pass.
"""

from __future__ import annotations

from tsfilter.constants.predicates import UNKNOWN_PREDICATE
from tsfilter.constants.validation import PRED001, PRED002
from tsfilter.exceptions.validation import ValidationError
from tsfilter.predicates.registry import PredicateRegistry, default_registry
from tsfilter.types.query import CompiledQuery, PredicateSpec


def check_predicate(spec: PredicateSpec, registry: PredicateRegistry | None = None) -> str | None:
    """Validate one predicate against *registry* (built-ins by default)."""
    registry = registry if registry is not None else default_registry()
    validator = registry.validator_for(spec.name)
    if validator is None:
        return UNKNOWN_PREDICATE
    return validator(spec.arguments)


def validate_query(query: CompiledQuery, registry: PredicateRegistry | None = None) -> list[ValidationError]:
    """Validate every predicate of every pattern in *query*."""
    registry = registry if registry is not None else default_registry()
    errors: list[ValidationError] = []
    for pattern_index, pattern in enumerate(query.patterns):
        for spec in pattern.predicates:
            message = check_predicate(spec, registry)
            if message is None:
                continue
            unknown = spec.name not in registry
            errors.append(
                ValidationError(
                    code=PRED001 if unknown else PRED002,
                    path=query.source,
                    field=f"#{spec.name}",
                    message=message,
                    hint=f"known predicates: {', '.join(registry.names())}" if unknown else "",
                    pattern_index=pattern_index,
                )
            )
    return errors
