"""N-dimensional points, with elementwise and scalar arithmetic"""

from ndpoint.exceptions import ConfigurationValueError, DimensionalityError, DimensionMismatchError, NdpointException
from ndpoint.numeric_types import FloatLike, IntegerLike, NumberLike
from ndpoint.point import DimensionMismatchPolicy, Point
from ndpoint.utilities import unsafe_extract_result

__all__ = [
    "ConfigurationValueError",
    "DimensionMismatchError",
    "DimensionMismatchPolicy",
    "DimensionalityError",
    "FloatLike",
    "IntegerLike",
    "NdpointException",
    "NumberLike",
    "Point",
    "unsafe_extract_result",
]
