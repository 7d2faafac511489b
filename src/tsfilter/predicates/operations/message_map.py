"""``in_message_map?``: captures must sit between the MFC message-map markers.

An MFC message map is written as::

    BEGIN_MESSAGE_MAP(CMainFrame, CFrameWnd)
        ON_WM_CREATE()
    END_MESSAGE_MAP()

The predicate locates the first such block in the tree once per evaluator,
caches the marker nodes, and then checks capture positions against them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

import tree_sitter_cpp
from tree_sitter import Language

from tsfilter.constants.predicates import MESSAGE_MAP_QUERY_TEMPLATE, NON_CAPTURE_ARGUMENT, TOO_FEW_ARGUMENTS
from tsfilter.predicates.registry import default_registry
from tsfilter.query.compiler import compile_query
from tsfilter.query.cursor import QueryCursor
from tsfilter.types.arguments import MissingCapture
from tsfilter.types.query import Argument, Capture, CaptureRef, CompiledQuery, Node, QueryMatch

if TYPE_CHECKING:
    from tsfilter.predicates.evaluator import PredicateEvaluator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageMapBounds:
    """The begin and end marker identifiers of the first message map."""

    begin: Node
    end: Node

    def contains(self, node: Node) -> bool:
        return self.begin.end_point <= node.start_point and node.end_point <= self.end.start_point


@dataclass(frozen=True)
class MessageMapNotFound:
    """Cached marker for a search that found no message map."""


def check_in_message_map(arguments: tuple[Argument, ...]) -> str | None:
    """Require one or more arguments, all of them capture references."""
    if not arguments:
        return TOO_FEW_ARGUMENTS
    for argument in arguments:
        if not isinstance(argument, CaptureRef):
            return NON_CAPTURE_ARGUMENT
    return None


def run_in_message_map(ctx: PredicateEvaluator, match: QueryMatch, arguments: tuple[Argument, ...]) -> bool:
    """Accept when every captured node lies strictly inside the message map."""
    bounds = _message_map_bounds(ctx)
    if bounds is None:
        logger.warning("#in_message_map?: no message map found")
        return False

    for argument in ctx.resolve(match, arguments):
        if isinstance(argument, Capture):
            if not bounds.contains(argument.node):
                return False
        elif isinstance(argument, MissingCapture):
            logger.warning("#in_message_map?: capture %s is unmatched", argument.capture)
            return False
        else:
            logger.warning("#in_message_map?: argument %r is not a capture", argument)
            return False
    return True


@lru_cache(maxsize=8)
def message_map_query(begin_marker: str, end_marker: str) -> CompiledQuery:
    """Compile the message-map search query for the given marker names."""
    text = MESSAGE_MAP_QUERY_TEMPLATE.format(begin=begin_marker, end=end_marker)
    return compile_query(Language(tree_sitter_cpp.language()), text, source="<message-map>")


def locate_message_map(ctx: PredicateEvaluator) -> MessageMapBounds | None:
    """Run the message-map query over the evaluator's root and return the first block.

    The marker search always uses the built-in predicates, whatever the
    evaluator's registry holds.
    """
    if ctx.root_node is None:
        return None
    settings = ctx.config.message_map
    query = message_map_query(settings.begin_marker, settings.end_marker)
    found = QueryCursor(query).next_match(ctx.root_node, ctx.fresh(registry=default_registry()))
    if found is None:
        return None

    begin = found.captures_named("begin")
    end = found.captures_named("end")
    if not begin or not end:
        return None
    return MessageMapBounds(begin=begin[0].node, end=end[0].node)


def _message_map_bounds(ctx: PredicateEvaluator) -> MessageMapBounds | None:
    cached = ctx.find_cache(MessageMapBounds)
    if cached is not None:
        return cached
    if ctx.find_cache(MessageMapNotFound) is not None:
        return None
    if ctx.root_node is None:
        logger.warning("#in_message_map?: no root node configured")
        return None

    settings = ctx.config.message_map
    locator = ctx.message_map_locator or locate_message_map
    logger.debug("Searching for message map (%s ... %s)", settings.begin_marker, settings.end_marker)
    bounds = locator(ctx)
    if bounds is not None:
        ctx.insert_cache(bounds)
    elif settings.cache_negative:
        ctx.insert_cache(MessageMapNotFound())
    return bounds
