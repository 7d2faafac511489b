"""Shared types for tsfilter."""

from .arguments import MissingCapture, ResolvedArgument
from .query import Argument, Capture, CaptureRef, CompiledQuery, Node, Pattern, PredicateSpec, QueryMatch

__all__ = [
    "Argument",
    "Capture",
    "CaptureRef",
    "CompiledQuery",
    "MissingCapture",
    "Node",
    "Pattern",
    "PredicateSpec",
    "QueryMatch",
    "ResolvedArgument",
]
