"""Tests for predicate extraction from query text."""

from __future__ import annotations

import pytest

from tsfilter.exceptions import QueryCompileError
from tsfilter.query.parser import RawCapture, RawPredicate, parse_predicates, parse_query_text


def test_trailing_predicate_attaches_to_preceding_pattern() -> None:
    patterns = parse_predicates('(identifier) @id (#eq? @id "Foo")')
    assert patterns == [[RawPredicate("eq?", (RawCapture("id"), "Foo"))]]


def test_predicates_are_grouped_per_top_level_pattern() -> None:
    text = """
    ; functions
    (function_definition
      declarator: (function_declarator declarator: (identifier) @name)
      (#match? "^on_" @name))

    (call_expression function: (identifier) @call) @expr

    [(string_literal) (raw_string_literal)] @str
    (#eq? @str "\\"x\\"")
    """
    patterns = parse_predicates(text)

    assert patterns == [
        [RawPredicate("match?", ("^on_", RawCapture("name")))],
        [],
        [RawPredicate("eq?", (RawCapture("str"), '"x"'))],
    ]


def test_grouped_siblings_form_one_pattern() -> None:
    text = """
    (
      (comment) @doc
      .
      (function_definition) @fn
      (#in_message_map? @doc @fn)
      (#eq? @doc "// hi")
    )
    """
    assert parse_predicates(text) == [
        [
            RawPredicate("in_message_map?", (RawCapture("doc"), RawCapture("fn"))),
            RawPredicate("eq?", (RawCapture("doc"), "// hi")),
        ]
    ]


def test_quantifiers_and_anchors_do_not_start_patterns() -> None:
    patterns = parse_predicates("(expression_statement)* . (identifier)? @x (comment)+")
    assert patterns == [[], [], []]


def test_directives_are_skipped() -> None:
    patterns = parse_predicates('((identifier) @x (#set! priority "105") (#eq? @x "a"))')
    assert patterns == [[RawPredicate("eq?", (RawCapture("x"), "a"))]]


def test_semicolon_inside_string_is_not_a_comment() -> None:
    patterns = parse_predicates('((identifier) @x (#eq? @x "a;b"))')
    assert patterns == [[RawPredicate("eq?", (RawCapture("x"), "a;b"))]]


def test_string_escapes() -> None:
    patterns = parse_predicates(r'((identifier) @x (#match? "a\tb\\n" @x))')
    assert patterns == [[RawPredicate("match?", ("a\tb\\n", RawCapture("x")))]]


def test_bare_identifier_arguments_are_literals() -> None:
    patterns = parse_predicates("((identifier) @x (#eq? @x foo))")
    assert patterns == [[RawPredicate("eq?", (RawCapture("x"), "foo"))]]


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("((identifier) @x", "unbalanced"),
        ("(identifier))", "unbalanced"),
        ('((identifier) @x (#eq? @x "open))', "unterminated string"),
        ('(#eq? @x "a") (identifier) @x', "precedes any pattern"),
        ("((identifier) @x (#eq? @x (nested)))", "unexpected"),
        ("((identifier) @ )", "empty name"),
    ],
)
def test_malformed_text_raises(text: str, message: str) -> None:
    with pytest.raises(QueryCompileError, match=message):
        parse_predicates(text)


def test_pattern_text_has_predicates_blanked() -> None:
    text = '(identifier) @id (#eq? @id "Foo")\n((comment) @c\n  (#set! kind "doc"))'
    parsed = parse_query_text(text)

    assert len(parsed.pattern_text) == len(text)
    assert "#" not in parsed.pattern_text
    assert parsed.pattern_text.split() == ["(identifier)", "@id", "((comment)", "@c", ")"]
    assert parsed.pattern_text.count("\n") == 2
    assert parsed.patterns == ((RawPredicate("eq?", (RawCapture("id"), "Foo")),), ())
