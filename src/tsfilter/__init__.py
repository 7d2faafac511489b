"""tsfilter: predicate evaluation for tree-sitter structural queries."""

from __future__ import annotations

from tsfilter.config import EngineConfig, load_config
from tsfilter.exceptions import CacheError, ConfigError, QueryCompileError, TsfilterError
from tsfilter.predicates import PredicateEvaluator, PredicateRegistry, default_registry, validate_query
from tsfilter.query import QueryCursor, compile_query
from tsfilter.types import Capture, CaptureRef, CompiledQuery, MissingCapture, Pattern, PredicateSpec, QueryMatch

__version__ = "0.3.0"

__all__ = [
    "CacheError",
    "Capture",
    "CaptureRef",
    "CompiledQuery",
    "ConfigError",
    "EngineConfig",
    "MissingCapture",
    "Pattern",
    "PredicateEvaluator",
    "PredicateRegistry",
    "PredicateSpec",
    "QueryCompileError",
    "QueryCursor",
    "QueryMatch",
    "TsfilterError",
    "__version__",
    "compile_query",
    "default_registry",
    "load_config",
    "validate_query",
]
