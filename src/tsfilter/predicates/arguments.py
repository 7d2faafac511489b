"""Resolve declared predicate arguments against one match."""

from __future__ import annotations

from collections.abc import Sequence

from tsfilter.types.arguments import MissingCapture, ResolvedArgument
from tsfilter.types.query import Argument, QueryMatch


def resolve_arguments(match: QueryMatch, arguments: Sequence[Argument]) -> list[ResolvedArgument]:
    """Expand *arguments* into resolved values, in declared order.

    A literal resolves to itself. A capture reference resolves to every
    capture bound to its id in match order, so quantified captures may
    contribute several values, or a single :class:`MissingCapture` when the
    capture bound nothing.
    """
    resolved: list[ResolvedArgument] = []
    for argument in arguments:
        if isinstance(argument, str):
            resolved.append(argument)
            continue

        bound = [capture for capture in match.captures if capture.id == argument.id]
        if bound:
            resolved.extend(bound)
        else:
            resolved.append(MissingCapture(capture=argument))
    return resolved
