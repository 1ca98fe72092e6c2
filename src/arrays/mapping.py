"""
Functional operations over key-value mappings.

Mapping iteration order is treated as unspecified: callers must not depend
on the order of the lists returned here.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Hashable, Mapping

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")


def map_walk(m: Mapping[K, V], callback: Callable[[K, V], R]) -> list[R]:
    """Collect ``callback(k, v)`` for every pair."""
    return [callback(k, v) for k, v in m.items()]


def map_for_each(m: Mapping[K, V], callback: Callable[[K, V], None]) -> None:
    for k, v in m.items():
        callback(k, v)


def map_filter(m: Mapping[K, V], callback: Callable[[K, V], bool]) -> dict[K, V]:
    """Return a new dict with the pairs for which ``callback(k, v)`` is true."""
    return {k: v for k, v in m.items() if callback(k, v)}


def map_keys(m: Mapping[K, V]) -> list[K]:
    return list(m.keys())


def map_values(m: Mapping[K, V]) -> list[V]:
    return list(m.values())
