"""Shared fixtures and fake tree nodes for tsfilter tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
import tree_sitter_cpp
from tree_sitter import Language, Parser

from tsfilter.types.query import Capture, CaptureRef, CompiledQuery, Pattern, PredicateSpec, QueryMatch


@dataclass(frozen=True)
class FakeNode:
    """Minimal stand-in for ``tree_sitter.Node``."""

    start_byte: int
    end_byte: int
    start_point: tuple[int, int]
    end_point: tuple[int, int]


def _point(source: str, offset: int) -> tuple[int, int]:
    before = source[:offset]
    row = before.count("\n")
    column = len(before) - (before.rfind("\n") + 1)
    return row, column


def _node(source: str, text: str, occurrence: int = 0) -> FakeNode:
    """Return a node spanning the *occurrence*-th appearance of *text* in ASCII *source*."""
    start = -1
    for _ in range(occurrence + 1):
        start = source.index(text, start + 1)
    end = start + len(text)
    return FakeNode(start, end, _point(source, start), _point(source, end))


def _query(*patterns: tuple[PredicateSpec, ...], capture_names: tuple[str, ...] = ("id",)) -> CompiledQuery:
    """Build a compiled query whose patterns carry the given predicates."""
    return CompiledQuery(patterns=tuple(Pattern(predicates=p) for p in patterns), capture_names=capture_names)


def _match(query: CompiledQuery, *captures: tuple[int, FakeNode], pattern_index: int = 0) -> QueryMatch:
    """Build a match binding each ``(capture_id, node)`` pair in order."""
    return QueryMatch(
        query=query,
        pattern_index=pattern_index,
        captures=tuple(Capture(id=capture_id, node=node) for capture_id, node in captures),
    )


def _ref(capture_id: int, name: str = "") -> CaptureRef:
    return CaptureRef(id=capture_id, name=name)


@pytest.fixture(scope="session")
def cpp_language() -> Language:
    """Return the tree-sitter C++ language."""
    return Language(tree_sitter_cpp.language())


@pytest.fixture
def parse_cpp(cpp_language: Language):
    """Return a function that parses C++ source and returns its root node."""
    parser = Parser(cpp_language)

    def _parse(source: str):
        return parser.parse(source.encode("utf-8")).root_node

    return _parse
