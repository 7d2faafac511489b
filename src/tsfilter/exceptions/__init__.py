"""Shared exception hierarchy for tsfilter."""

from __future__ import annotations

from .base import TsfilterError
from .config import ConfigError
from .query import CacheError, QueryCompileError

__all__ = [
    "CacheError",
    "ConfigError",
    "QueryCompileError",
    "TsfilterError",
]
