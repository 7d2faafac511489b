"""``match?``: a regex must be found inside every captured text."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from tsfilter.constants.predicates import (
    ARGUMENT_NOT_CAPTURE,
    INVALID_REGEX,
    MISSING_REGEX,
    TOO_FEW_ARGUMENTS,
)
from tsfilter.types.arguments import MissingCapture
from tsfilter.types.query import Argument, Capture, CaptureRef, QueryMatch

if TYPE_CHECKING:
    from tsfilter.predicates.evaluator import PredicateEvaluator

logger = logging.getLogger(__name__)


def check_match(arguments: tuple[Argument, ...]) -> str | None:
    """Require a valid regex literal followed by one or more capture references."""
    if len(arguments) < 2:
        return TOO_FEW_ARGUMENTS

    pattern = arguments[0]
    if not isinstance(pattern, str):
        return MISSING_REGEX
    if _compile(pattern) is None:
        return INVALID_REGEX

    for argument in arguments[1:]:
        if not isinstance(argument, CaptureRef):
            return ARGUMENT_NOT_CAPTURE
    return None


def run_match(ctx: PredicateEvaluator, match: QueryMatch, arguments: tuple[Argument, ...]) -> bool:
    """Accept when the regex is found (unanchored) in the text of every capture."""
    resolved = ctx.resolve(match, arguments)
    if len(resolved) < 2:
        return False

    pattern = resolved[0]
    if not isinstance(pattern, str):
        logger.warning("#match?: first argument is not a string")
        return False
    compiled = _compile(pattern)
    if compiled is None:
        logger.warning("#match?: invalid regex %r", pattern)
        return False

    for argument in resolved[1:]:
        if isinstance(argument, Capture):
            if compiled.search(ctx.node_text(argument.node)) is None:
                return False
        elif isinstance(argument, MissingCapture):
            logger.warning("#match?: capture %s is unmatched", argument.capture)
            return False
        else:
            logger.warning("#match?: argument %r is not a capture", argument)
            return False
    return True


def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error:
        return None
