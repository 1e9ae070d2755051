"""Reductions of a point's coordinates to a single value, for use with Point.apply"""

from typing import Sequence

from expression import curry_flip
import numpy as np

from ndpoint.exceptions import DimensionMismatchError
from ndpoint.numeric_types import NumberLike


__author__ = "ndpoint developers"

__all__ = ["coordinate_sum", "squared_norm", "weighted_sum"]


def _as_float64_array(values: Sequence[NumberLike]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def coordinate_sum(coordinates: Sequence[NumberLike]) -> float:
    """Sum the coordinates, each promoted to float64."""
    return float(np.sum(_as_float64_array(coordinates)))


def squared_norm(coordinates: Sequence[NumberLike]) -> float:
    return float(np.sum(np.square(_as_float64_array(coordinates))))


@curry_flip(1)
def weighted_sum(coordinates: Sequence[NumberLike], weights: Sequence[NumberLike]) -> float:
    """
    Sum the coordinates, each promoted to float64 and scaled by the weight at the same position.

    This is curried such that the weights are given first, e.g. `point.apply(weighted_sum([0.5, 0.25, 0.25]))`.

    Raises
    ------
    DimensionMismatchError
        If the number of weights differs from the number of coordinates
    """
    if len(weights) != len(coordinates):
        raise DimensionMismatchError(left_dim=len(coordinates), right_dim=len(weights), context="Weighted sum")
    return float(np.dot(_as_float64_array(coordinates), _as_float64_array(weights)))
