"""Config loading and normalization for tsfilter evaluators."""

from __future__ import annotations

from pathlib import Path

import yaml

from tsfilter.config.model import EngineConfig
from tsfilter.config.validator import validate_config_data
from tsfilter.constants.config import CONFIG_FILENAME
from tsfilter.exceptions import ConfigError
from tsfilter.exceptions.validation import format_errors
from tsfilter.types.config import MessageMapConfig


def load_config(root: Path, config_path: Path | None = None) -> EngineConfig:
    """Load and validate engine config from ``tsfilter.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return EngineConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    errors = validate_config_data(raw, str(path))
    if errors:
        raise ConfigError(format_errors(errors))

    message_map_raw = raw.get("message_map") or {}
    defaults = MessageMapConfig()
    message_map = MessageMapConfig(
        begin_marker=message_map_raw.get("begin_marker", defaults.begin_marker),
        end_marker=message_map_raw.get("end_marker", defaults.end_marker),
        cache_negative=message_map_raw.get("cache_negative", defaults.cache_negative),
    )

    return EngineConfig(
        unknown_predicates=raw.get("unknown_predicates", EngineConfig.unknown_predicates),
        message_map=message_map,
    )
