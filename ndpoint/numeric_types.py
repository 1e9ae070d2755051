"""Groupings of numeric types and tools for working with them"""

import numbers
from typing import *
import numpy as np
from numpydoc_decorator import doc

__author__ = "ndpoint developers"

__all__ = ["FloatLike", "IntegerLike", "NumberLike", "is_integer_like", "is_number_like", "to_float64"]


FloatLike = Union[float, np.float16, np.float32, np.float64]
IntegerLike = Union[int, np.int8, np.uint8, np.int16, np.uint16, np.int32, np.uint32, np.int64, np.uint64]
NumberLike = Union[IntegerLike, FloatLike, numbers.Real]


def _is_boolean(x: Any) -> bool:
    # Instance check of a Boolean against int is True, so callers exclude it explicitly.
    return isinstance(x, (bool, np.bool_))


@doc(
    summary="Determine whether the given value may act as a scalar operand for point arithmetic",
    parameters=dict(x="The value to check"),
    returns="Whether the value is a real-valued number (e.g., int, float, Fraction, Decimal, numpy scalar), and not a Boolean",
)
def is_number_like(x: Any) -> bool:
    if _is_boolean(x):
        return False
    if isinstance(x, (np.integer, np.floating)):
        return True
    # Decimal registers only as numbers.Number, so check for complex rather than for numbers.Real.
    return isinstance(x, numbers.Number) and not (isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real))


@doc(
    summary="Determine whether the given value is an integer, in the sense of exact integral arithmetic",
    parameters=dict(x="The value to check"),
    returns="Whether the value is a Python or numpy integer, and not a Boolean",
)
def is_integer_like(x: Any) -> bool:
    return not _is_boolean(x) and isinstance(x, (numbers.Integral, np.integer))


@doc(
    summary="Promote the given scalar to a 64-bit float",
    parameters=dict(x="The value to promote"),
    returns="The value as a numpy float64",
    raises=dict(TypeError="If the value can't be converted to float"),
)
def to_float64(x: NumberLike) -> np.float64:
    return np.float64(float(x))
