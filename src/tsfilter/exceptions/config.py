"""Configuration-related exceptions."""

from __future__ import annotations

from tsfilter.exceptions.base import TsfilterError


class ConfigError(TsfilterError, ValueError):
    """Raised when engine configuration is invalid."""
