"""Frozen query, pattern and match structures consumed by the predicate engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """Subset of ``tree_sitter.Node`` the engine relies on."""

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...


@dataclass(frozen=True)
class CaptureRef:
    """Reference to a capture slot used as a predicate argument."""

    id: int
    name: str = ""

    def __str__(self) -> str:
        return f"@{self.name}" if self.name else f"@#{self.id}"


type Argument = str | CaptureRef


@dataclass(frozen=True)
class PredicateSpec:
    """A named predicate attached to a pattern, with its declared arguments."""

    name: str
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True)
class Pattern:
    """One top-level pattern of a compiled query."""

    predicates: tuple[PredicateSpec, ...] = ()


@dataclass(frozen=True)
class CompiledQuery:
    """Ordered patterns plus capture names indexed by capture id.

    *ts_query* holds the underlying ``tree_sitter.Query`` when the query was
    built by :func:`tsfilter.query.compile_query`.
    """

    patterns: tuple[Pattern, ...]
    capture_names: tuple[str, ...] = ()
    source: str = "<query>"
    ts_query: Any = field(default=None, compare=False, repr=False)

    def capture_id(self, name: str) -> int | None:
        """Return the id of capture *name*, or ``None`` if it is not defined."""
        try:
            return self.capture_names.index(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class Capture:
    """A node bound to a capture slot within one match."""

    id: int
    node: Node


@dataclass(frozen=True)
class QueryMatch:
    """One successful match of a pattern with its bound captures in match order."""

    query: CompiledQuery
    pattern_index: int
    captures: tuple[Capture, ...] = ()

    @property
    def pattern(self) -> Pattern:
        return self.query.patterns[self.pattern_index]

    def captures_named(self, name: str) -> list[Capture]:
        """Return every capture bound to the capture called *name*."""
        capture_id = self.query.capture_id(name)
        if capture_id is None:
            return []
        return [capture for capture in self.captures if capture.id == capture_id]
