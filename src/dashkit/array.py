"""List helpers."""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from ._base import is_scalar, same_value_zero_key
from .lang import to_integer


def chunk(array: Sequence[Any] | None, size: Any = 1) -> list[list[Any]]:
    """Split ``array`` into lists of ``size`` elements; the last may be shorter.

    Example:
        >>> chunk(["a", "b", "c", "d"], 3)
        [['a', 'b', 'c'], ['d']]
    """
    size = max(to_integer(size), 0)
    if not array or size < 1:
        return []
    return [list(array[i : i + size]) for i in range(0, len(array), size)]


def compact(array: Iterable[Any] | None) -> list[Any]:
    """Return the truthy values of ``array``; NaN counts as falsy."""
    return [
        value
        for value in array or ()
        if value and not (isinstance(value, float) and math.isnan(value))
    ]


def difference(array: Iterable[Any] | None, *values: Iterable[Any]) -> list[Any]:
    """Return the items of ``array`` not present in any of ``values``.

    Membership uses SameValueZero: scalars match by value, objects by identity.
    Entries of ``values`` that are not collections (numbers, strings, None)
    are ignored.

    Example:
        >>> difference([2, 1], [2, 3])
        [1]
    """
    excluded = {
        same_value_zero_key(item)
        for other in values
        if isinstance(other, Iterable) and not is_scalar(other)
        for item in other
    }
    return [item for item in array or () if same_value_zero_key(item) not in excluded]


def drop(array: Sequence[Any] | None, n: Any = 1) -> list[Any]:
    """Return ``array`` without its first ``n`` elements."""
    if not array:
        return []
    return list(array[max(to_integer(n), 0) :])


def slice_(array: Sequence[Any] | None, start: Any = 0, end: Any = None) -> list[Any]:
    """Return a list copy of ``array`` from ``start`` up to, not including, ``end``.

    Negative indexes count from the end.
    """
    if not array:
        return []
    stop = len(array) if end is None else to_integer(end)
    return list(array[to_integer(start) : stop])
