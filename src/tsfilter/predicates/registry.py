"""Central predicate registry.

Maps predicate names to a compile-time validator and a run-time evaluator.
Only registered predicates can be used in a compiled query.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tsfilter.types.query import Argument, QueryMatch

if TYPE_CHECKING:
    from tsfilter.predicates.evaluator import PredicateEvaluator

type PredicateValidator = Callable[[tuple[Argument, ...]], str | None]
type PredicateFunction = Callable[["PredicateEvaluator", QueryMatch, tuple[Argument, ...]], bool]


@dataclass(frozen=True)
class RegisteredPredicate:
    """Validator and evaluator pair for one predicate name."""

    name: str
    validator: PredicateValidator
    evaluator: PredicateFunction


class PredicateRegistry:
    """Name-keyed table of predicates, extensible without touching dispatch."""

    def __init__(self) -> None:
        self._entries: dict[str, RegisteredPredicate] = {}

    def register(self, name: str, validator: PredicateValidator, evaluator: PredicateFunction) -> None:
        """Register (or replace) the predicate called *name*."""
        self._entries[name] = RegisteredPredicate(name=name, validator=validator, evaluator=evaluator)

    def validator_for(self, name: str) -> PredicateValidator | None:
        entry = self._entries.get(name)
        return entry.validator if entry else None

    def evaluator_for(self, name: str) -> PredicateFunction | None:
        entry = self._entries.get(name)
        return entry.evaluator if entry else None

    def names(self) -> tuple[str, ...]:
        """Registered predicate names, sorted."""
        return tuple(sorted(self._entries))

    def copy(self) -> PredicateRegistry:
        """Return an independent registry with the same entries."""
        clone = PredicateRegistry()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def default_registry() -> PredicateRegistry:
    """Return a fresh registry holding the built-in predicates."""
    from tsfilter.predicates.operations import BUILTIN_OPERATIONS

    registry = PredicateRegistry()
    for name, (validator, evaluator) in BUILTIN_OPERATIONS.items():
        registry.register(name, validator, evaluator)
    return registry
