"""Built-in predicate names, diagnostic messages and the message-map query."""

from __future__ import annotations

from typing import Literal

EQ_PREDICATE: str = "eq?"
MATCH_PREDICATE: str = "match?"
IN_MESSAGE_MAP_PREDICATE: str = "in_message_map?"

# Compile-time error texts returned by validators.
UNKNOWN_PREDICATE: str = "Unknown predicate"
TOO_FEW_ARGUMENTS: str = "Too few arguments"
MISSING_REGEX: str = "Missing regex"
INVALID_REGEX: str = "Invalid Regex"
ARGUMENT_NOT_CAPTURE: str = "Argument is not a capture"
NON_CAPTURE_ARGUMENT: str = "Non-Capture Argument"

type UnknownPredicatePolicy = Literal["accept", "reject"]
VALID_UNKNOWN_PREDICATE_POLICIES: frozenset[str] = frozenset({"accept", "reject"})
DEFAULT_UNKNOWN_PREDICATE_POLICY: UnknownPredicatePolicy = "accept"

DEFAULT_BEGIN_MARKER: str = "BEGIN_MESSAGE_MAP"
DEFAULT_END_MARKER: str = "END_MESSAGE_MAP"
# Marker names are spliced into query text and must be plain identifiers.
MARKER_PATTERN: str = r"^[A-Za-z_][A-Za-z0-9_]*$"

# The idiom only exists in C++ (MFC) sources, so the query targets tree-sitter-cpp.
# ``{begin}`` and ``{end}`` are substituted with the configured marker names.
MESSAGE_MAP_QUERY_TEMPLATE: str = """
(
(expression_statement
    (call_expression
        function: (identifier) @begin (#eq? @begin "{begin}")
        arguments: (argument_list . (_) @class)))
.
(expression_statement)*
.
(expression_statement (call_expression
    function: (identifier) @end (#eq? @end "{end}")))
)
"""
