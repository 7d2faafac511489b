"""Tests for the predicate registry."""

from __future__ import annotations

from tsfilter.predicates import PredicateRegistry, default_registry
from tsfilter.predicates.operations import BUILTIN_OPERATIONS, check_eq, run_eq


def test_default_registry_holds_builtins() -> None:
    registry = default_registry()
    assert registry.names() == ("eq?", "in_message_map?", "match?")
    assert set(BUILTIN_OPERATIONS) == set(registry.names())
    assert registry.validator_for("eq?") is check_eq
    assert registry.evaluator_for("eq?") is run_eq


def test_unknown_name_has_no_functions() -> None:
    registry = default_registry()
    assert "foo?" not in registry
    assert registry.validator_for("foo?") is None
    assert registry.evaluator_for("foo?") is None


def test_default_registries_are_independent() -> None:
    first = default_registry()
    first.register("custom?", lambda args: None, lambda ctx, match, args: True)
    assert "custom?" in first
    assert "custom?" not in default_registry()


def test_register_replaces_existing_entry() -> None:
    registry = PredicateRegistry()
    registry.register("x?", lambda args: "first", lambda ctx, match, args: True)
    registry.register("x?", lambda args: "second", lambda ctx, match, args: True)
    validator = registry.validator_for("x?")
    assert validator is not None
    assert validator(()) == "second"
    assert len(registry) == 1


def test_copy_is_independent() -> None:
    registry = default_registry()
    clone = registry.copy()
    clone.register("extra?", lambda args: None, lambda ctx, match, args: True)
    assert "extra?" in clone
    assert "extra?" not in registry
    assert len(clone) == len(registry) + 1
