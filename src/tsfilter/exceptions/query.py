"""Query compilation and evaluation exceptions."""

from __future__ import annotations

from tsfilter.exceptions.base import TsfilterError


class QueryCompileError(TsfilterError, ValueError):
    """Raised when query text or its predicates cannot be compiled."""


class CacheError(TsfilterError, RuntimeError):
    """Raised when a predicate cache slot is written twice."""
