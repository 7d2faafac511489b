"""``eq?``: all resolved arguments must spell the same text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tsfilter.constants.predicates import TOO_FEW_ARGUMENTS
from tsfilter.types.arguments import MissingCapture
from tsfilter.types.query import Argument, Capture, QueryMatch

if TYPE_CHECKING:
    from tsfilter.predicates.evaluator import PredicateEvaluator

logger = logging.getLogger(__name__)


def check_eq(arguments: tuple[Argument, ...]) -> str | None:
    """Require at least two arguments."""
    if len(arguments) < 2:
        return TOO_FEW_ARGUMENTS
    return None


def run_eq(ctx: PredicateEvaluator, match: QueryMatch, arguments: tuple[Argument, ...]) -> bool:
    """Accept when every literal and capture text is identical.

    A capture that bound nothing counts as the empty string, so a query can
    test for an absent optional capture with ``(#eq? @maybe "")``.
    """
    texts: set[str] = set()
    for argument in ctx.resolve(match, arguments):
        if isinstance(argument, str):
            texts.add(argument)
        elif isinstance(argument, Capture):
            texts.add(ctx.node_text(argument.node))
        elif isinstance(argument, MissingCapture):
            logger.warning("#eq?: capture %s is unmatched, comparing as empty text", argument.capture)
            texts.add("")
        else:
            logger.warning("#eq?: unexpected argument type %s", type(argument).__name__)
            return False
    return len(texts) == 1
