"""
Arrays: functional helpers for sequences and mappings.

Provides map, filter, for-each, find, uniq, concat, reverse, contains and
every over ordered sequences, plus walk, filter, keys and values over
mappings. Every operation builds a new result and leaves its input alone.

Usage:
    from arrays import array_map, array_filter, array_map_err, map_filter

    labels = array_map(items, lambda i, v: f"{i}:{v}")
    evens = array_filter(numbers, lambda _, v: v % 2 == 0)

    # Fail-fast on the first callback exception
    parsed, err = array_map_err(rows, lambda _, row: int(row))

    big = map_filter(scores, lambda k, v: v > 2)
"""

import logging

from .result import Result
from .sequence import (
    array_map,
    array_map_err,
    array_for_each,
    array_filter,
    array_concat,
    array_every,
    array_uniq,
    array_hash_uniq,
    array_find,
    array_find_index,
    array_reverse,
    array_contains,
    array_process,
    array_process_err,
)
from .mapping import map_walk, map_for_each, map_filter, map_keys, map_values

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Sequences
    "array_map",
    "array_map_err",
    "array_for_each",
    "array_filter",
    "array_concat",
    "array_every",
    "array_uniq",
    "array_hash_uniq",
    "array_find",
    "array_find_index",
    "array_reverse",
    "array_contains",
    "array_process",
    "array_process_err",
    # Mappings
    "map_walk",
    "map_for_each",
    "map_filter",
    "map_keys",
    "map_values",
    # Fail-fast outcome
    "Result",
]
