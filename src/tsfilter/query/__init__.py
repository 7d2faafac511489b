"""Tree-sitter bridge: query compilation and filtered match iteration."""

from __future__ import annotations

from tsfilter.query.compiler import compile_query
from tsfilter.query.cursor import QueryCursor
from tsfilter.query.parser import ParsedQuery, RawCapture, RawPredicate, parse_predicates, parse_query_text

__all__ = [
    "ParsedQuery",
    "QueryCursor",
    "RawCapture",
    "RawPredicate",
    "compile_query",
    "parse_predicates",
    "parse_query_text",
]
