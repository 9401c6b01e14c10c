"""Extrema and order statistics over homogeneous INT or FLOAT sequences."""
from __future__ import annotations

from extrema.services.errors import (
    ElementTypeError,
    EmptyInputError,
    HeterogeneousInputError,
    RangeError,
    StatsError,
)
from extrema.services.kinds import ElementKind, classify
from extrema.services.numeric import (
    bottom_k,
    bounds,
    maximum,
    minimum,
    pairwise_max,
    pairwise_min,
    top_k,
)

__all__: list[str] = [
    "max_of",
    "min_of",
    "bounds",
    "maxk",
    "mink",
    "maximum",
    "minimum",
    "pairwise_max",
    "pairwise_min",
    "top_k",
    "bottom_k",
    "classify",
    "ElementKind",
    "StatsError",
    "ElementTypeError",
    "EmptyInputError",
    "HeterogeneousInputError",
    "RangeError",
]


def max_of(*args):
    """``max(seq)`` or ``max(a, b)``, resolved by arity."""
    if len(args) == 1:
        return maximum(args[0])
    if len(args) == 2:
        return pairwise_max(*args)
    raise TypeError(f"max_of() takes 1 or 2 arguments ({len(args)} given)")


def min_of(*args):
    """``min(seq)`` or ``min(a, b)``, resolved by arity."""
    if len(args) == 1:
        return minimum(args[0])
    if len(args) == 2:
        return pairwise_min(*args)
    raise TypeError(f"min_of() takes 1 or 2 arguments ({len(args)} given)")


maxk = top_k
mink = bottom_k
