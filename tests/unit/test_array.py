"""Unit tests for dashkit.array."""

import math

import pytest

from dashkit.array import chunk, compact, difference, drop, slice_

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (3, [["a", "b", "c"], ["d"]]),
        (2, [["a", "b"], ["c", "d"]]),
        (1, [["a"], ["b"], ["c"], ["d"]]),
        (10, [["a", "b", "c", "d"]]),
        (2.9, [["a", "b"], ["c", "d"]]),
        (0, []),
        (-1, []),
    ],
)
def test_chunk(size, expected):
    """chunk splits into lists of the requested (truncated) size."""
    assert chunk(["a", "b", "c", "d"], size) == expected


def test_chunk_empty_and_tuple():
    """Empty input gives no chunks; tuples are chunked into lists."""
    assert chunk([], 2) == []
    assert chunk(None) == []
    assert chunk((1, 2, 3), 2) == [[1, 2], [3]]


def test_compact_removes_falsy_values():
    """Falsy values, including NaN, are removed."""
    assert compact([0, 1, False, 2, "", 3, None, math.nan, [], 4]) == [1, 2, 3, 4]
    assert compact(None) == []


def test_difference():
    """Values present in any exclusion list are dropped."""
    assert difference([2, 1], [2, 3]) == [1]
    assert difference([1, 2, 3, 4], [1], [4]) == [2, 3]
    assert difference([1, 2]) == [1, 2]


def test_difference_uses_same_value_zero():
    """NaN matches NaN; objects match only by identity; True is not 1."""
    obj = {"a": 1}
    assert difference([math.nan, 1], [float("nan")]) == [1]
    assert difference([obj, {"a": 1}], [obj]) == [{"a": 1}]
    assert difference([True, 1], [1]) == [True]


def test_difference_ignores_non_collections():
    """Exclusion arguments that are not collections are skipped."""
    assert difference([1, 2], 2) == [1, 2]
    assert difference(["a", "b"], "a", None) == ["a", "b"]
    assert difference([1, 2, 3], 2, [3], {1}) == [2]


def test_drop():
    """drop removes n leading elements."""
    assert drop([1, 2, 3]) == [2, 3]
    assert drop([1, 2, 3], 2) == [3]
    assert drop([1, 2, 3], 5) == []
    assert drop([1, 2, 3], 0) == [1, 2, 3]
    assert drop([1, 2, 3], -1) == [1, 2, 3]


def test_slice():
    """slice_ follows list slicing, returning a new list."""
    values = [1, 2, 3, 4]
    assert slice_(values, 1, 3) == [2, 3]
    assert slice_([1, 2, 3], -2) == [2, 3]
    assert slice_(values, 3, 1) == []
    assert slice_(values) == values
    assert slice_(values) is not values
    assert slice_((1, 2, 3), 1) == [2, 3]
    assert slice_(None, 1) == []
