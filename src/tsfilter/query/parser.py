"""Split tree-sitter query text into patterns and predicate forms.

Predicates are evaluated by the registered predicate functions only, never
by the tree-sitter bindings, whose built-in text predicates use different
argument conventions. Each top-level pattern gets the list of
``(#name? ...)`` forms written inside it, or directly after it, in source
order, and the text handed to tree-sitter has every predicate form blanked
out. Directives such as ``#set!`` are dropped as well.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tsfilter.exceptions import QueryCompileError

type TokenKind = Literal["open", "close", "string", "capture", "predicate", "atom"]

_ESCAPES: dict[str, str] = {"n": "\n", "r": "\r", "t": "\t", "0": "\0"}
_QUANTIFIERS: frozenset[str] = frozenset({"*", "+", "?"})
_ANCHOR: str = "."


@dataclass(frozen=True)
class RawCapture:
    """A ``@name`` argument before capture ids are assigned."""

    name: str


@dataclass(frozen=True)
class RawPredicate:
    """A predicate form as written in the query text."""

    name: str
    arguments: tuple[str | RawCapture, ...]


@dataclass(frozen=True)
class ParsedQuery:
    """Predicates per top-level pattern, plus the text to hand to tree-sitter."""

    patterns: tuple[tuple[RawPredicate, ...], ...]
    pattern_text: str


@dataclass(frozen=True)
class _Token:
    kind: TokenKind
    value: str
    offset: int


def parse_query_text(text: str) -> ParsedQuery:
    """Collect the predicates of every top-level pattern in *text*, in order."""
    tokens = _tokenize(text)
    patterns: list[list[RawPredicate]] = []
    spans: list[tuple[int, int]] = []
    depth = 0
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.kind == "open" and _is_predicate_open(tokens, index):
            predicate, index = _read_predicate(tokens, index)
            spans.append((token.offset, tokens[index - 1].offset + 1))
            if predicate.name.endswith("!"):
                continue
            if not patterns:
                raise QueryCompileError(f"predicate #{predicate.name} at offset {token.offset} precedes any pattern")
            patterns[-1].append(predicate)
            continue

        if token.kind == "open":
            if depth == 0:
                patterns.append([])
            depth += 1
        elif token.kind == "close":
            depth -= 1
            if depth < 0:
                raise QueryCompileError(f"unbalanced '{token.value}' at offset {token.offset}")
        elif depth == 0 and token.kind in ("string", "atom") and not _is_suffix(token):
            patterns.append([])
        index += 1

    if depth != 0:
        raise QueryCompileError("unbalanced parentheses at end of query")
    return ParsedQuery(
        patterns=tuple(tuple(predicates) for predicates in patterns),
        pattern_text=_blank_spans(text, spans),
    )


def parse_predicates(text: str) -> list[list[RawPredicate]]:
    """Return the predicates of every top-level pattern in *text*, in order."""
    return [list(predicates) for predicates in parse_query_text(text).patterns]


def _blank_spans(text: str, spans: list[tuple[int, int]]) -> str:
    chars = list(text)
    for start, end in spans:
        for pos in range(start, end):
            if chars[pos] != "\n":
                chars[pos] = " "
    return "".join(chars)


def _is_predicate_open(tokens: list[_Token], index: int) -> bool:
    return tokens[index].value == "(" and index + 1 < len(tokens) and tokens[index + 1].kind == "predicate"


def _is_suffix(token: _Token) -> bool:
    return token.kind == "atom" and (token.value in _QUANTIFIERS or token.value == _ANCHOR)


def _read_predicate(tokens: list[_Token], index: int) -> tuple[RawPredicate, int]:
    name = tokens[index + 1].value
    arguments: list[str | RawCapture] = []
    index += 2
    while index < len(tokens):
        token = tokens[index]
        if token.kind == "close":
            return RawPredicate(name=name, arguments=tuple(arguments)), index + 1
        if token.kind == "capture":
            arguments.append(RawCapture(token.value))
        elif token.kind in ("string", "atom"):
            arguments.append(token.value)
        else:
            raise QueryCompileError(f"unexpected '{token.value}' inside #{name} at offset {token.offset}")
        index += 1
    raise QueryCompileError(f"unterminated predicate #{name}")


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char.isspace():
            pos += 1
        elif char == ";":
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline + 1
        elif char in "([":
            tokens.append(_Token("open", char, pos))
            pos += 1
        elif char in ")]":
            tokens.append(_Token("close", char, pos))
            pos += 1
        elif char == '"':
            value, end = _read_string(text, pos)
            tokens.append(_Token("string", value, pos))
            pos = end
        elif char in "@#":
            end = _scan_identifier(text, pos + 1)
            if end == pos + 1:
                raise QueryCompileError(f"empty name after '{char}' at offset {pos}")
            kind: TokenKind = "capture" if char == "@" else "predicate"
            tokens.append(_Token(kind, text[pos + 1 : end], pos))
            pos = end
        elif char in _QUANTIFIERS or char == _ANCHOR:
            tokens.append(_Token("atom", char, pos))
            pos += 1
        else:
            end = max(_scan_identifier(text, pos), pos + 1)
            tokens.append(_Token("atom", text[pos:end], pos))
            pos = end
    return tokens


def _scan_identifier(text: str, pos: int) -> int:
    while pos < len(text) and (text[pos].isalnum() or text[pos] in "_-.?!:/"):
        pos += 1
    return pos


def _read_string(text: str, start: int) -> tuple[str, int]:
    chars: list[str] = []
    pos = start + 1
    while pos < len(text):
        char = text[pos]
        if char == "\\" and pos + 1 < len(text):
            escaped = text[pos + 1]
            chars.append(_ESCAPES.get(escaped, escaped))
            pos += 2
        elif char == '"':
            return "".join(chars), pos + 1
        else:
            chars.append(char)
            pos += 1
    raise QueryCompileError(f"unterminated string starting at offset {start}")
