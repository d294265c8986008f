import math

import pytest

from plutoengine.scalar import (
    almost_equal,
    clamp_scalar,
    degrees,
    radians,
    smoothstep_scalar,
    step_scalar,
)


@pytest.mark.parametrize(
    "val, lo, hi, expected",
    [(5, 0, 3, 3), (-1, 0, 3, 0), (2, 0, 3, 2), (0, 0, 3, 0)],
)
def test_clamp_scalar(val, lo, hi, expected):
    assert clamp_scalar(val, lo, hi) == expected


def test_step_scalar_above_edge():
    assert step_scalar(0.5, 0.75) == 1


def test_step_scalar_at_or_below_edge():
    assert step_scalar(0.5, 0.5) == 0
    assert step_scalar(0.5, 0.25) == 0


def test_smoothstep_endpoints_and_clamping():
    assert smoothstep_scalar(2.0, 4.0, 2.0) == 0
    assert smoothstep_scalar(2.0, 4.0, 4.0) == 1
    assert smoothstep_scalar(2.0, 4.0, -10.0) == 0
    assert smoothstep_scalar(2.0, 4.0, 10.0) == 1


def test_smoothstep_symmetry_and_monotonic():
    xs = [i / 10 for i in range(11)]
    values = [smoothstep_scalar(0.0, 1.0, x) for x in xs]
    assert values == sorted(values)
    for x in xs:
        assert smoothstep_scalar(0.0, 1.0, x) + smoothstep_scalar(0.0, 1.0, 1.0 - x) == pytest.approx(1.0)


def test_almost_equal_tolerance():
    assert almost_equal(1.0, 1.0 + 1e-15)
    assert not almost_equal(1.0, 1.1)


def test_almost_equal_is_relative():
    assert almost_equal(1e10, 1e10 + 1e-4)
    assert not almost_equal(1e-3, 2e-3)


def test_almost_equal_custom_eps():
    assert almost_equal(1.0, 1.05, 0.1)
    assert not almost_equal(1.0, 1.05, 0.01)


def test_radians_of_half_turn():
    assert radians(180.0) == pytest.approx(math.pi)


def test_degrees_of_pi():
    assert degrees(math.pi) == pytest.approx(180.0)


@pytest.mark.parametrize("angle", [-720.0, -45.0, 0.0, 30.0, 359.5])
def test_degree_radian_round_trip(angle):
    assert degrees(radians(angle)) == pytest.approx(angle)