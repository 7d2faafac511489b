"""Tests for the type-keyed predicate cache."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from tsfilter.exceptions import CacheError
from tsfilter.predicates.cache import CacheStore


@dataclass(frozen=True)
class _Bounds:
    start: int
    end: int


@dataclass(frozen=True)
class _Other:
    value: str


def test_find_returns_none_when_empty() -> None:
    assert CacheStore().find(_Bounds) is None


def test_insert_then_find_by_type() -> None:
    store = CacheStore()
    store.insert(_Bounds(1, 2))
    store.insert(_Other("x"))

    assert store.find(_Bounds) == _Bounds(1, 2)
    assert store.find(_Other) == _Other("x")
    assert _Bounds in store
    assert len(store) == 2


def test_slot_is_write_once() -> None:
    store = CacheStore()
    store.insert(_Bounds(1, 2))
    with pytest.raises(CacheError, match="_Bounds"):
        store.insert(_Bounds(3, 4))
    assert store.find(_Bounds) == _Bounds(1, 2)


def test_stores_are_independent() -> None:
    first = CacheStore()
    second = CacheStore()
    first.insert(_Bounds(1, 2))
    assert second.find(_Bounds) is None
