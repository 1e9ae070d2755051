"""Tests for the ready-made reductions to use with Point.apply"""

from math import sqrt

from hypothesis import given, strategies as st
import pytest

from ndpoint import DimensionMismatchError, Point
from ndpoint.reductions import coordinate_sum, squared_norm, weighted_sum
from .utilities import gen_coordinates, gen_int_scalar


@pytest.mark.parametrize(("coords", "expected"), [
    ([], 0.0),
    ([1, 2, 3], 6.0),
    ([0.5, -0.5], 0.0),
])
def test_coordinate_sum(coords, expected):
    observed = Point(coords).apply(coordinate_sum)
    assert observed == expected
    assert isinstance(observed, float)


@given(coords=gen_coordinates())
def test_dist_is_square_root_of_squared_norm(coords):
    p = Point(coords)
    assert p.dist() == pytest.approx(sqrt(p.apply(squared_norm)))


def test_weighted_sum():
    assert Point([1, 2, 3]).apply(weighted_sum([0.5, 0.25, 0.25])) == 1.75


@given(coords=st.lists(gen_int_scalar(), max_size=10))
def test_unit_weighted_sum_is_coordinate_sum(coords):
    p = Point(coords)
    assert p.apply(weighted_sum([1] * len(coords))) == p.apply(coordinate_sum)


def test_weighted_sum_requires_weight_per_coordinate():
    with pytest.raises(DimensionMismatchError) as err_ctx:
        Point([1, 2, 3]).apply(weighted_sum([1, 1]))
    assert str(err_ctx.value) == "Weighted sum requires equal dimensionality; got 3 and 2"
