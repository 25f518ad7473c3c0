"""
unitable.core.utils
===================

Small numeric helpers shared by the matrix and the quantity types.
"""

from __future__ import annotations

from math import isfinite
from typing import Any, Union

Number = Union[int, float]

# Absolute tolerance used by Quantity.eq and friends.
DEFAULT_EPSILON: float = 1e-9


def approx_equals(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True when ``|a - b| <= epsilon``."""
    return abs(a - b) <= epsilon


def is_scalar(value: Any) -> bool:
    """Plain int or float operand (the only kinds accepted for scaling).

    ``bool`` is an ``int`` subclass but never a scalar here.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    return is_scalar(value) and isfinite(value)


def is_positive_finite(value: Any) -> bool:
    return is_finite_number(value) and value > 0


__all__ = [
    "Number",
    "DEFAULT_EPSILON",
    "approx_equals",
    "is_scalar",
    "is_finite_number",
    "is_positive_finite",
]
