"""Vertex and index data for simple shapes.

Each vertex holds eight floats: position (x, y, z), normal (nx, ny, nz)
and texture coordinates (u, v).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

VERTEX_STRIDE = 8
CIRCLE_STEPS = 30


@dataclass(frozen=True)
class Primitive:
    """Interleaved vertex data and triangle indices of a shape."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]


def _flatten(rows) -> tuple[float, ...]:
    return tuple(float(value) for row in rows for value in row)


def _quads(count: int) -> tuple[int, ...]:
    return tuple(
        index
        for base in range(0, 4 * count, 4)
        for index in (base, base + 1, base + 2, base + 2, base + 3, base)
    )


@lru_cache(maxsize=None)
def square() -> Primitive:
    """Unit square in the xy plane, centred on the origin."""
    rows = [
        (-0.5, -0.5, 0.0, 0, 0, 1, 0, 0),
        (0.5, -0.5, 0.0, 0, 0, 1, 1, 0),
        (0.5, 0.5, 0.0, 0, 0, 1, 1, 1),
        (-0.5, 0.5, 0.0, 0, 0, 1, 0, 1),
    ]
    return Primitive(_flatten(rows), _quads(1))


@lru_cache(maxsize=None)
def cube() -> Primitive:
    """Unit cube centred on the origin, four vertices per face."""
    rows = [
        # front
        (-0.5, -0.5, 0.5, 0, 0, 1, 0, 0),
        (0.5, -0.5, 0.5, 0, 0, 1, 1, 0),
        (0.5, 0.5, 0.5, 0, 0, 1, 1, 1),
        (-0.5, 0.5, 0.5, 0, 0, 1, 0, 1),
        # back
        (-0.5, -0.5, -0.5, 0, 0, -1, 0, 0),
        (0.5, -0.5, -0.5, 0, 0, -1, 1, 0),
        (0.5, 0.5, -0.5, 0, 0, -1, 1, 1),
        (-0.5, 0.5, -0.5, 0, 0, -1, 0, 1),
        # left
        (-0.5, -0.5, -0.5, -1, 0, 0, 0, 0),
        (-0.5, 0.5, -0.5, -1, 0, 0, 1, 0),
        (-0.5, 0.5, 0.5, -1, 0, 0, 1, 1),
        (-0.5, -0.5, 0.5, -1, 0, 0, 0, 1),
        # right
        (0.5, -0.5, -0.5, 1, 0, 0, 0, 0),
        (0.5, 0.5, -0.5, 1, 0, 0, 1, 0),
        (0.5, 0.5, 0.5, 1, 0, 0, 1, 1),
        (0.5, -0.5, 0.5, 1, 0, 0, 0, 1),
        # top
        (-0.5, 0.5, -0.5, 0, 1, 0, 0, 0),
        (0.5, 0.5, -0.5, 0, 1, 0, 1, 0),
        (0.5, 0.5, 0.5, 0, 1, 0, 1, 1),
        (-0.5, 0.5, 0.5, 0, 1, 0, 0, 1),
        # bottom
        (-0.5, -0.5, -0.5, 0, -1, 0, 0, 0),
        (0.5, -0.5, -0.5, 0, -1, 0, 1, 0),
        (0.5, -0.5, 0.5, 0, -1, 0, 1, 1),
        (-0.5, -0.5, 0.5, 0, -1, 0, 0, 1),
    ]
    return Primitive(_flatten(rows), _quads(6))


@lru_cache(maxsize=None)
def circle(steps: int = CIRCLE_STEPS) -> Primitive:
    """Unit-radius disc in the xy plane as a fan of ``steps`` triangles."""
    if steps < 1:
        raise ValueError("a circle needs at least one step")
    rows = [(0.0, 0.0, 0.0, 0, 0, 1, 0, 0)]
    for i in range(steps):
        theta = (i / steps) * 2.0 * math.pi
        rows.append((math.cos(theta), math.sin(theta), 0.0, 0, 0, 1, 0, 0))
    indices = tuple(
        index
        for i in range(steps)
        for index in (0, i + 1, (i + 1) % steps + 1)
    )
    return Primitive(_flatten(rows), indices)