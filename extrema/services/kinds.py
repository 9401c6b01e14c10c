"""Element-kind classification for numeric sequences.

A sequence is classified by its first element only. Callers then verify
the rest of the elements against that kind while they read them, see
:func:`check_homogeneous`.

INT elements are 64-bit signed integers and FLOAT elements are finite
doubles; anything outside that is not a number for the engine.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Iterator, Sequence

from extrema.services.errors import ElementTypeError, EmptyInputError, HeterogeneousInputError

__all__: list[str] = [
    "ElementKind",
    "INT_MIN",
    "INT_MAX",
    "element_kind",
    "classify",
    "check_homogeneous",
]

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class ElementKind(Enum):
    INTEGER = "INT"
    FLOAT = "FLOAT"


def element_kind(value: Any) -> ElementKind | None:
    """Return the kind of a single value, or None if it is not numeric.

    ``bool`` is an ``int`` subclass in Python but is not a number here.
    NaN, infinities and ints outside the 64-bit range are rejected too.
    """
    if isinstance(value, float):
        return ElementKind.FLOAT if math.isfinite(value) else None
    if isinstance(value, int) and not isinstance(value, bool):
        return ElementKind.INTEGER if INT_MIN <= value <= INT_MAX else None
    return None


def classify(values: Sequence[Any]) -> ElementKind:
    """
    Classify a sequence by inspecting its first element.
    Raises EmptyInputError for an empty sequence and ElementTypeError
    when the first element is neither INT nor FLOAT.
    """
    if len(values) == 0:
        raise EmptyInputError()
    kind = element_kind(values[0])
    if kind is None:
        raise ElementTypeError(values[0])
    return kind


def check_homogeneous(values: Sequence[Any], kind: ElementKind) -> Iterator[Any]:
    """Yield each element of a sequence classified as ``kind``.

    Raises ElementTypeError on the first element that is not a number at
    all, and HeterogeneousInputError on the first number of the other kind.
    """
    for index, value in enumerate(values):
        found = element_kind(value)
        if found is None:
            raise ElementTypeError(value)
        if found is not kind:
            raise HeterogeneousInputError(index, value, kind.value)
        yield value
