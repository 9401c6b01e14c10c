"""Numeric extrema and order-statistic helpers."""
from __future__ import annotations

import heapq
from typing import Any, Sequence

from extrema.services.errors import ElementTypeError, RangeError
from extrema.services.kinds import check_homogeneous, classify, element_kind

__all__: list[str] = [
    "minimum",
    "maximum",
    "bounds",
    "pairwise_min",
    "pairwise_max",
    "top_k",
    "bottom_k",
]

Number = int | float


def _scan(values: Sequence[Any]) -> tuple[Number, Number]:
    # One pass: validates every element and tracks both extremes.
    elements = check_homogeneous(values, classify(values))
    low = high = next(elements)
    for value in elements:
        if value < low:
            low = value
        elif value > high:
            high = value
    return low, high


def minimum(values: Sequence[Number]) -> Number:
    """Return the lowest value of a non-empty INT or FLOAT sequence."""
    return _scan(values)[0]


def maximum(values: Sequence[Number]) -> Number:
    """Return the highest value of a non-empty INT or FLOAT sequence."""
    return _scan(values)[1]


def bounds(values: Sequence[Number]) -> list[Number]:
    """
    Return ``[minimum, maximum]`` of the sequence, computed in a single pass.

    >>> bounds([2, 3, 4, 5])
    [2, 5]
    """
    low, high = _scan(values)
    return [low, high]


def _pair(a: Any, b: Any) -> list[Number] | None:
    # None means an INT/FLOAT mix, which the caller compares directly.
    kinds = [element_kind(a), element_kind(b)]
    for value, kind in zip((a, b), kinds):
        if kind is None:
            raise ElementTypeError(value)
    if kinds[0] is not kinds[1]:
        return None
    return [a, b]


def pairwise_max(a: Number, b: Number) -> Number:
    """
    Return the higher of two numbers.
    An INT/FLOAT mix is compared exactly and the winner returned as a FLOAT.

    >>> pairwise_max(2, 3)
    3
    >>> pairwise_max(2.0, 3.0)
    3.0
    >>> pairwise_max(2, 3.5)
    3.5
    """
    pair = _pair(a, b)
    if pair is None:
        return float(b if b > a else a)
    return maximum(pair)


def pairwise_min(a: Number, b: Number) -> Number:
    """Return the lower of two numbers; an INT/FLOAT mix yields a FLOAT."""
    pair = _pair(a, b)
    if pair is None:
        return float(b if b < a else a)
    return minimum(pair)


def _validated(values: Sequence[Any], k: Any) -> list[Number]:
    kind = classify(values)
    if not isinstance(k, int) or isinstance(k, bool) or not 1 <= k <= len(values):
        raise RangeError(k, len(values))
    # Copy so the caller's sequence is never touched.
    return list(check_homogeneous(values, kind))


def top_k(values: Sequence[Number], k: int) -> list[Number]:
    """
    Return the ``k`` highest values in ascending order.
    Raises RangeError unless 1 <= k <= len(values).

    >>> top_k([32, 15, -7, 10, 1000, 41, 42], 3)
    [41, 42, 1000]
    """
    largest = heapq.nlargest(k, _validated(values, k))
    largest.reverse()
    return largest


def bottom_k(values: Sequence[Number], k: int) -> list[Number]:
    """
    Return the ``k`` lowest values in ascending order.

    >>> bottom_k([32, 15, -7, 10, 1000, 41, 42], 3)
    [-7, 10, 15]
    """
    return heapq.nsmallest(k, _validated(values, k))
