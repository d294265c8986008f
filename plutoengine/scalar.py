"""Scalar helpers shared by the vector and matrix types."""

from __future__ import annotations

import math
import sys

DEFAULT_EPSILON = sys.float_info.epsilon * 100


def clamp_scalar(val, min_val, max_val):
    """Limit ``val`` to the closed range ``[min_val, max_val]``."""
    if val < min_val:
        return min_val
    if val > max_val:
        return max_val
    return val


def step_scalar(edge, val):
    """Return 1.0 when ``val`` lies strictly above ``edge``, otherwise 0.0."""
    return float(val > edge)


def smoothstep_scalar(edge0, edge1, val):
    """Hermite interpolation between 0 and 1 as ``val`` moves from ``edge0`` to ``edge1``."""
    t = clamp_scalar((val - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def almost_equal(a, b, eps=DEFAULT_EPSILON):
    """Compare two numbers with a tolerance relative to their magnitude."""
    return abs(a - b) <= eps * max(1.0, abs(a), abs(b))


def radians(degrees):
    """Convert an angle from degrees to radians."""
    return degrees * (math.pi / 180.0)


def degrees(radians):
    """Convert an angle from radians to degrees."""
    return radians * (180.0 / math.pi)