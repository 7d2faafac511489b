"""Frozen config sub-sections."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tsfilter.constants.predicates import DEFAULT_BEGIN_MARKER, DEFAULT_END_MARKER, MARKER_PATTERN
from tsfilter.exceptions import ConfigError

_MARKER_RE = re.compile(MARKER_PATTERN)


@dataclass(frozen=True)
class MessageMapConfig:
    """Marker names and caching policy for ``in_message_map?``."""

    begin_marker: str = DEFAULT_BEGIN_MARKER
    end_marker: str = DEFAULT_END_MARKER
    cache_negative: bool = True

    def __post_init__(self) -> None:
        for field_name in ("begin_marker", "end_marker"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not _MARKER_RE.fullmatch(value):
                raise ConfigError(f"message_map.{field_name} must be a plain identifier, got {value!r}")
