"""Config file name and JSON Schema for ``tsfilter.yaml``."""

from __future__ import annotations

from typing import Any

from tsfilter.constants.predicates import MARKER_PATTERN, VALID_UNKNOWN_PREDICATE_POLICIES

CONFIG_FILENAME: str = "tsfilter.yaml"

_MARKER_SCHEMA: dict[str, Any] = {
    "type": "string",
    "pattern": MARKER_PATTERN,
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "unknown_predicates": {
            "enum": sorted(VALID_UNKNOWN_PREDICATE_POLICIES),
        },
        "message_map": {
            "type": ["object", "null"],
            "additionalProperties": False,
            "properties": {
                "begin_marker": _MARKER_SCHEMA,
                "end_marker": _MARKER_SCHEMA,
                "cache_negative": {"type": "boolean"},
            },
        },
    },
}
