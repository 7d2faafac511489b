"""Stable validation error codes for config and query validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit path)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type or enum

PRED001: str = "PRED001"  # unknown predicate
PRED002: str = "PRED002"  # invalid predicate arguments
