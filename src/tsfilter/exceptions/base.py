"""Root exception type for tsfilter."""

from __future__ import annotations


class TsfilterError(Exception):
    """Base class for all tsfilter errors."""
