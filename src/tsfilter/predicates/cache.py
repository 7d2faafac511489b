"""Type-keyed, write-once cache owned by a single evaluator."""

from __future__ import annotations

import logging
from typing import cast

from tsfilter.exceptions import CacheError

logger = logging.getLogger(__name__)


class CacheStore:
    """Holds at most one artifact per type for the lifetime of one evaluator.

    Predicates use it to memoize expensive auxiliary results, such as the
    outcome of a sub-query over the whole tree. Never share a store between
    evaluators that look at different sources.
    """

    def __init__(self) -> None:
        self._entries: dict[type, object] = {}

    def insert(self, value: object) -> None:
        """Store *value* under its own type. Raises CacheError if the slot is taken."""
        key = type(value)
        if key in self._entries:
            raise CacheError(f"cache slot for {key.__name__} is already filled")
        self._entries[key] = value
        logger.debug("Cached predicate artifact: %s", key.__name__)

    def find[T](self, cls: type[T]) -> T | None:
        """Return the artifact stored for *cls*, or ``None``."""
        return cast("T | None", self._entries.get(cls))

    def __contains__(self, cls: object) -> bool:
        return cls in self._entries

    def __len__(self) -> int:
        return len(self._entries)
