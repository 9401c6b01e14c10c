"""Typed errors raised by the reduction engine."""
from __future__ import annotations

from typing import Any

__all__: list[str] = [
    "StatsError",
    "ElementTypeError",
    "EmptyInputError",
    "RangeError",
    "HeterogeneousInputError",
]


class StatsError(Exception):
    """Base class for every error the engine raises."""

    kind = "StatsError"


class ElementTypeError(StatsError, TypeError):
    kind = "TypeError"

    def __init__(self, value: Any = None):
        super().__init__("The elements of the input must either be INT or FLOAT.")
        self.value = value


class EmptyInputError(StatsError, ValueError):
    kind = "EmptyInputError"

    def __init__(self) -> None:
        super().__init__("The input must contain at least one element.")


class RangeError(StatsError, ValueError):
    kind = "RangeError"

    def __init__(self, k: Any, length: int):
        super().__init__(f"k={k!r} is out of range, expected an integer in [1, {length}]")
        self.k = k
        self.length = length


class HeterogeneousInputError(StatsError, TypeError):
    kind = "HeterogeneousInputError"

    def __init__(self, index: int, value: Any, expected: str):
        super().__init__(f"Value at index {index}={value!r} is not {expected}")
        self.index = index
        self.value = value
        self.expected = expected
