"""
Functional operations over ordered sequences.

Every operation takes any ``Sequence`` and returns a new list (or a scalar);
inputs are never mutated. Index-aware callbacks are called as
``callback(index, value)``.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Hashable, Sequence
import logging

from .result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
H = TypeVar("H", bound=Hashable)

IndexedFunc = Callable[[int, T], R]
IndexedPredicate = Callable[[int, T], bool]


def array_map(arr: Sequence[T], callback: IndexedFunc[T, R]) -> list[R]:
    """Apply ``callback(i, v)`` to every element, keeping positions."""
    return [callback(i, v) for i, v in enumerate(arr)]


def array_map_err(arr: Sequence[T], callback: IndexedFunc[T, R]) -> Result[R]:
    """
    Like :func:`array_map`, but stops at the first exception.

    The exception raised by the callback is returned inside a failed
    :class:`Result` rather than propagated; no partial list is exposed.
    """
    out: list[R] = []
    for i, v in enumerate(arr):
        try:
            out.append(callback(i, v))
        except Exception as exc:
            logger.debug("array_map_err aborted at index %d: %r", i, exc)
            return Result.failure(exc)
    return Result.success(out)


def array_for_each(arr: Sequence[T], callback: Callable[[int, T], None]) -> None:
    for i, v in enumerate(arr):
        callback(i, v)


def array_filter(arr: Sequence[T], callback: IndexedPredicate[T]) -> list[T]:
    """Keep elements for which ``callback(i, v)`` is true, in order."""
    return [v for i, v in enumerate(arr) if callback(i, v)]


def array_concat(*arrs: Sequence[T]) -> list[T]:
    out: list[T] = []
    for arr in arrs:
        out.extend(arr)
    return out


def array_every(arr: Sequence[T], callback: Callable[[T], bool]) -> bool:
    """True if ``callback(v)`` holds for every element. Empty is True."""
    for v in arr:
        if not callback(v):
            return False
    return True


def array_uniq(arr: Sequence[T]) -> list[T]:
    """
    Drop duplicate elements. Elements must be hashable.

    Which of several equal elements is kept, and the order of the result,
    are unspecified.
    """
    return list(dict.fromkeys(arr))


def array_hash_uniq(arr: Sequence[T], hash_func: Callable[[T], H]) -> list[T]:
    """
    Drop elements whose ``hash_func`` key was already seen.

    When several elements share a key the last one wins, the same way a
    later assignment overwrites a dict entry. Result order is unspecified.

    Example:
        people = [alice_30, bob_25, alice_35]
        array_hash_uniq(people, lambda p: p.name)  # alice_35, bob_25
    """
    seen: dict[H, T] = {}
    for v in arr:
        seen[hash_func(v)] = v
    return list(seen.values())


def array_find(
    arr: Sequence[T],
    callback: IndexedPredicate[T],
    default: T | None = None,
) -> tuple[T | None, bool]:
    """
    Return the first element matching ``callback(i, v)``.

    Args:
        arr: Sequence to search.
        callback: Predicate receiving index and value.
        default: Returned in place of an element when nothing matches.

    Returns:
        ``(element, True)`` for the lowest matching index, otherwise
        ``(default, False)``.
    """
    for i, v in enumerate(arr):
        if callback(i, v):
            return v, True
    return default, False


def array_find_index(arr: Sequence[T], callback: IndexedPredicate[T]) -> tuple[int, bool]:
    """Return ``(index, True)`` for the first match, else ``(-1, False)``."""
    for i, v in enumerate(arr):
        if callback(i, v):
            return i, True
    return -1, False


def array_reverse(arr: Sequence[T]) -> list[T]:
    return list(reversed(arr))


def array_contains(arr: Sequence[T], elem: T) -> bool:
    return any(v == elem for v in arr)


def array_process(arr: Sequence[T], callback: Callable[[T], R]) -> list[R]:
    """Index-free :func:`array_map`."""
    return [callback(v) for v in arr]


def array_process_err(arr: Sequence[T], callback: Callable[[T], R]) -> Result[R]:
    """Index-free :func:`array_map_err`."""
    out: list[R] = []
    for i, v in enumerate(arr):
        try:
            out.append(callback(v))
        except Exception as exc:
            logger.debug("array_process_err aborted at index %d: %r", i, exc)
            return Result.failure(exc)
    return Result.success(out)
