"""Compile tree-sitter query text into a :class:`CompiledQuery`."""

from __future__ import annotations

import logging

from tree_sitter import Language, Query, QueryError

from tsfilter.exceptions import QueryCompileError
from tsfilter.exceptions.validation import format_errors
from tsfilter.predicates.registry import PredicateRegistry
from tsfilter.predicates.validation import validate_query
from tsfilter.query.parser import RawCapture, RawPredicate, parse_query_text
from tsfilter.types.query import Argument, CaptureRef, CompiledQuery, Pattern, PredicateSpec

logger = logging.getLogger(__name__)


def compile_query(
    language: Language,
    text: str,
    *,
    registry: PredicateRegistry | None = None,
    source: str = "<query>",
) -> CompiledQuery:
    """Compile *text* for *language* and validate its predicates.

    Predicate forms are stripped from the text tree-sitter compiles and become
    :class:`PredicateSpec`s on their pattern instead.

    Raises QueryCompileError when tree-sitter rejects the query, when a
    predicate references an undefined capture, or when any predicate fails
    validation against *registry* (the built-ins by default).
    """
    parsed = parse_query_text(text)
    try:
        ts_query = Query(language, parsed.pattern_text)
    except QueryError as exc:
        raise QueryCompileError(f"{source}: {exc}") from exc

    capture_names = tuple(ts_query.capture_name(index) for index in range(ts_query.capture_count))
    raw_patterns = parsed.patterns
    if len(raw_patterns) != ts_query.pattern_count:
        raise QueryCompileError(
            f"{source}: found {len(raw_patterns)} patterns in query text, tree-sitter compiled {ts_query.pattern_count}"
        )

    patterns = tuple(
        Pattern(predicates=tuple(_convert_predicate(raw, capture_names, source) for raw in raw_predicates))
        for raw_predicates in raw_patterns
    )
    compiled = CompiledQuery(patterns=patterns, capture_names=capture_names, source=source, ts_query=ts_query)

    errors = validate_query(compiled, registry)
    if errors:
        raise QueryCompileError(format_errors(errors))

    logger.debug(
        "Compiled query %s: %d patterns, %d captures",
        source,
        len(patterns),
        len(capture_names),
    )
    return compiled


def _convert_predicate(raw: RawPredicate, capture_names: tuple[str, ...], source: str) -> PredicateSpec:
    arguments: list[Argument] = []
    for argument in raw.arguments:
        if isinstance(argument, RawCapture):
            if argument.name not in capture_names:
                raise QueryCompileError(f"{source}: #{raw.name} references undefined capture @{argument.name}")
            arguments.append(CaptureRef(id=capture_names.index(argument.name), name=argument.name))
        else:
            arguments.append(argument)
    return PredicateSpec(name=raw.name, arguments=tuple(arguments))
