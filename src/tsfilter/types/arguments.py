"""Resolved predicate argument values."""

from __future__ import annotations

from dataclasses import dataclass

from tsfilter.types.query import Capture, CaptureRef


@dataclass(frozen=True)
class MissingCapture:
    """Placeholder for a capture reference that bound zero nodes in a match."""

    capture: CaptureRef


type ResolvedArgument = str | Capture | MissingCapture
