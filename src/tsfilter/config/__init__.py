"""Config loading, validation and model for tsfilter."""

from __future__ import annotations

from tsfilter.config.loader import load_config
from tsfilter.config.model import EngineConfig
from tsfilter.config.validator import validate_config_data, validate_config_file

__all__ = [
    "EngineConfig",
    "load_config",
    "validate_config_data",
    "validate_config_file",
]
