"""
Success-or-failure value returned by the fail-fast operations.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Iterator, Any
from dataclasses import dataclass

R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[R]):
    """
    Outcome of a whole ``*_err`` operation.

    Exactly one of ``value`` and ``error`` is set. On failure ``error`` is
    the exception the callback raised, untouched, and ``value`` is None.
    Build one with :meth:`success` or :meth:`failure`. Truthiness follows
    :attr:`ok`.

    Example:
        result = array_map_err(rows, parse_row)
        if not result:
            log.warning("bad row: %s", result.error)

        # or unpack like a pair
        parsed, err = array_map_err(rows, parse_row)

        # or re-raise the callback's exception
        parsed = array_map_err(rows, parse_row).unwrap()
    """
    value: list[R] | None
    error: Exception | None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def success(cls, value: list[R]) -> Result[R]:
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: Exception) -> Result[R]:
        return cls(value=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> list[R]:
        """Return the value, or raise the original callback exception."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error
