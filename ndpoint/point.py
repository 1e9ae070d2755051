"""The N-dimensional point value type and its arithmetic"""

from enum import Enum
import logging
import operator
from typing import Any, Callable, Iterable, Iterator, Sequence

import attrs
from expression import Option, Result
import numpy as np

from ndpoint.exceptions import DimensionMismatchError
from ndpoint.numeric_types import NumberLike, is_integer_like, is_number_like, to_float64
from ndpoint.utilities import find_first_option, unsafe_extract_result

__author__ = "ndpoint developers"

__all__ = ["DimensionMismatchPolicy", "Point", "divide_within_type"]

BinaryOperation = Callable[[NumberLike, NumberLike], NumberLike]


class DimensionMismatchPolicy(Enum):
    """How an elementwise operation treats a pair of points of unequal dimensionality"""
    STRICT = "strict"
    TRUNCATE = "truncate"

    @classmethod
    def parse(cls, s: str) -> Option["DimensionMismatchPolicy"]:
        """Find the policy named by the given text, ignoring case."""
        return find_first_option(lambda m: s.lower() == m.value)(cls)


def divide_within_type(a: NumberLike, b: NumberLike) -> NumberLike:
    """
    Divide one scalar by another, staying within the operands' arithmetic.

    Two integers give an integer quotient truncated toward zero; anything else is true division.
    """
    if is_integer_like(a) and is_integer_like(b):
        # Floor and truncation differ only when the signs differ.
        return -(-a // b) if (a < 0) != (b < 0) else a // b
    return a / b


@attrs.define(frozen=True)
class Point:
    """
    An ordered, fixed-length sequence of numeric coordinates.

    Points are immutable values: every arithmetic operation builds a new instance. Elementwise
    operations pair the coordinates of two points by position; scalar operations apply the
    same scalar to each coordinate. Arithmetic is done in the coordinates' own numeric type,
    so e.g. integer overflow or division by zero behave however the scalar type behaves, and
    dividing integers by an integer truncates toward zero. Only the Euclidean norm promotes
    values to 64-bit floating point.

    The operator symbols require operands of equal dimensionality; the named forms accept a
    policy to pair coordinates only up to the shorter operand instead.

    There's no elementwise division; dividing one point by another is a TypeError.
    """

    coordinates = attrs.field(converter=tuple) # type: tuple[NumberLike, ...]

    # Keep numpy from treating a point as an array-like operand, so that reflected operators are used.
    __array_ufunc__ = None

    @classmethod
    def new(cls, coordinates: Iterable[NumberLike]) -> "Point":
        return cls(coordinates)

    def dim(self) -> int:
        """The number of coordinates in this point"""
        return len(self.coordinates)

    def dist(self) -> float:
        """
        Compute the Euclidean norm of this point.

        Returns
        -------
        float
            Square root of the sum of the squared coordinates, each promoted to float64; 0.0 for a zero-length point
        """
        values = np.fromiter((to_float64(x) for x in self.coordinates), dtype=np.float64, count=self.dim())
        return float(np.sqrt(np.sum(np.square(values))))

    def apply(self, func: Callable[[Sequence[NumberLike]], float]) -> float:
        """Reduce the coordinates with the given function, returning its result as-is."""
        return func(self.coordinates)

    def combine(
        self,
        other: "Point",
        op: BinaryOperation,
        *,
        policy: DimensionMismatchPolicy = DimensionMismatchPolicy.STRICT,
    ) -> Result["Point", DimensionMismatchError]:
        """
        Pair coordinates of this point with those of another, by position, combining each pair with the given operation.

        Parameters
        ----------
        other : Point
            The right-hand operand
        op : Callable
            The binary operation to apply to each (left, right) coordinate pair
        policy : DimensionMismatchPolicy, default STRICT
            How to handle unequal dimensionality

        Returns
        -------
        expression.Result
            Either the new point, or the error describing the dimensionality mismatch
        """
        if not isinstance(other, Point):
            raise TypeError(f"Elementwise operand must be {Point.__name__}, not {type(other).__name__}")
        if not isinstance(policy, DimensionMismatchPolicy):
            raise TypeError(f"Mismatch policy must be {DimensionMismatchPolicy.__name__}, not {type(policy).__name__}")
        left_dim, right_dim = self.dim(), other.dim()
        if left_dim != right_dim:
            match policy:
                case DimensionMismatchPolicy.STRICT:
                    return Result.Error(DimensionMismatchError(left_dim=left_dim, right_dim=right_dim))
                case DimensionMismatchPolicy.TRUNCATE:
                    logging.debug("Truncating elementwise operation to shorter dimensionality: %d vs. %d", left_dim, right_dim)
        return Result.Ok(Point(op(a, b) for a, b in zip(self.coordinates, other.coordinates)))

    def combine__unsafe(
        self,
        other: "Point",
        op: BinaryOperation,
        *,
        policy: DimensionMismatchPolicy = DimensionMismatchPolicy.STRICT,
    ) -> "Point":
        return unsafe_extract_result(self.combine(other, op, policy=policy))

    def plus(self, other: "Point | NumberLike", *, policy: DimensionMismatchPolicy = DimensionMismatchPolicy.STRICT) -> "Point":
        return self._operate_named(other, operator.add, policy=policy, name="plus")

    def minus(self, other: "Point | NumberLike", *, policy: DimensionMismatchPolicy = DimensionMismatchPolicy.STRICT) -> "Point":
        return self._operate_named(other, operator.sub, policy=policy, name="minus")

    def times(self, other: "Point | NumberLike", *, policy: DimensionMismatchPolicy = DimensionMismatchPolicy.STRICT) -> "Point":
        return self._operate_named(other, operator.mul, policy=policy, name="times")

    def divided_by(self, scalar: NumberLike) -> "Point":
        self._check_scalar(scalar, name="divided_by")
        return self._map_scalar(scalar, divide_within_type)

    def floor_divided_by(self, scalar: NumberLike) -> "Point":
        self._check_scalar(scalar, name="floor_divided_by")
        return self._map_scalar(scalar, operator.floordiv)

    def __add__(self, other: Any) -> "Point":
        return self._operate(other, operator.add)

    def __radd__(self, other: Any) -> "Point":
        return self._operate_reflected(other, operator.add)

    def __sub__(self, other: Any) -> "Point":
        return self._operate(other, operator.sub)

    def __mul__(self, other: Any) -> "Point":
        return self._operate(other, operator.mul)

    def __rmul__(self, other: Any) -> "Point":
        return self._operate_reflected(other, operator.mul)

    def __truediv__(self, other: Any) -> "Point":
        return self._map_scalar(other, divide_within_type) if is_number_like(other) else NotImplemented

    def __floordiv__(self, other: Any) -> "Point":
        return self._map_scalar(other, operator.floordiv) if is_number_like(other) else NotImplemented

    def __len__(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[NumberLike]:
        return iter(self.coordinates)

    def __getitem__(self, index: int) -> NumberLike:
        return self.coordinates[index]

    def _map_scalar(self, scalar: NumberLike, op: BinaryOperation) -> "Point":
        return Point(op(a, scalar) for a in self.coordinates)

    def _operate(self, other: Any, op: BinaryOperation) -> "Point":
        if isinstance(other, Point):
            return self.combine__unsafe(other, op)
        if is_number_like(other):
            return self._map_scalar(other, op)
        return NotImplemented

    def _operate_reflected(self, other: Any, op: BinaryOperation) -> "Point":
        if is_number_like(other):
            return Point(op(other, a) for a in self.coordinates)
        return NotImplemented

    def _operate_named(
        self,
        other: "Point | NumberLike",
        op: BinaryOperation,
        *,
        policy: DimensionMismatchPolicy,
        name: str,
    ) -> "Point":
        if isinstance(other, Point):
            return self.combine__unsafe(other, op, policy=policy)
        self._check_scalar(other, name=name)
        return self._map_scalar(other, op)

    @staticmethod
    def _check_scalar(value: Any, *, name: str) -> None:
        if isinstance(value, Point):
            raise TypeError(f"No elementwise form of {name}; operand must be a number-like scalar")
        if not is_number_like(value):
            raise TypeError(f"Operand for {name} must be a number-like scalar, not {type(value).__name__}")
