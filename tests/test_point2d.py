"""Unit tests for the 2D point value type."""

import numpy as np

from point2d import (
    ORIGIN,
    Point2D,
    add,
    component_max,
    component_min,
    dot,
    scale,
    subtract,
)


def test_arithmetic_returns_new_values():
    a = Point2D(1.0, 2.0)
    b = Point2D(-3.0, 0.5)

    assert add(a, b) == Point2D(-2.0, 2.5)
    assert subtract(a, b) == Point2D(4.0, 1.5)
    assert scale(a, 3) == Point2D(3.0, 6.0)
    assert a == Point2D(1.0, 2.0)


def test_operators_match_free_functions():
    a = Point2D(1.5, -2.0)
    b = Point2D(0.25, 4.0)

    assert a + b == add(a, b)
    assert a - b == subtract(a, b)
    assert a * 2.0 == scale(a, 2.0)
    assert a.dot(b) == dot(a, b) == 1.5 * 0.25 + -2.0 * 4.0


def test_component_min_max_mix_coordinates():
    a = Point2D(1.0, 5.0)
    b = Point2D(3.0, -2.0)

    assert component_min(a, b) == Point2D(1.0, -2.0)
    assert component_max(a, b) == Point2D(3.0, 5.0)


def test_origin_and_array_conversion():
    assert ORIGIN == Point2D(0, 0)
    arr = Point2D(2.0, -1.0).to_array()
    assert arr.dtype == np.float64
    assert np.array_equal(arr, [2.0, -1.0])


def test_component_min_max_keep_nan_in_any_position():
    a = Point2D(0.0, 0.0)
    b = Point2D(float("nan"), 1.0)

    for lo, hi in ((component_min(a, b), component_max(a, b)),
                   (component_min(b, a), component_max(b, a))):
        assert np.isnan(lo.x) and np.isnan(hi.x)
        assert (lo.y, hi.y) == (0.0, 1.0)
