import dataclasses
import math

import pytest

from plutoengine.primitives import (
    CIRCLE_STEPS,
    VERTEX_STRIDE,
    Primitive,
    circle,
    cube,
    square,
)


def _vertices(primitive):
    data = primitive.vertices
    return [data[i:i + VERTEX_STRIDE] for i in range(0, len(data), VERTEX_STRIDE)]


def test_square_layout():
    s = square()
    assert len(s.vertices) == 4 * VERTEX_STRIDE
    assert s.indices == (0, 1, 2, 2, 3, 0)


def test_square_first_vertex():
    assert _vertices(square())[0] == (-0.5, -0.5, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def test_cube_counts():
    c = cube()
    assert len(c.vertices) == 24 * VERTEX_STRIDE
    assert len(c.indices) == 36
    assert max(c.indices) == 23
    assert c.indices[6:12] == (4, 5, 6, 6, 7, 4)


def test_cube_vertices_on_surface_with_unit_normals():
    for vertex in _vertices(cube()):
        assert all(abs(p) == 0.5 for p in vertex[:3])
        assert math.hypot(*vertex[3:6]) == pytest.approx(1.0)


def test_cube_normals_point_outwards():
    for vertex in _vertices(cube()):
        position, normal = vertex[:3], vertex[3:6]
        assert sum(p * n for p, n in zip(position, normal)) > 0


def test_circle_default_counts():
    c = circle()
    assert len(c.vertices) == (CIRCLE_STEPS + 1) * VERTEX_STRIDE
    assert len(c.indices) == 3 * CIRCLE_STEPS
    assert c.indices[-3:] == (0, CIRCLE_STEPS, 1)


def test_circle_rim_is_unit():
    rim = _vertices(circle(12))[1:]
    assert len(rim) == 12
    for vertex in rim:
        assert math.hypot(vertex[0], vertex[1]) == pytest.approx(1.0)


def test_circle_centre_vertex():
    assert _vertices(circle(5))[0] == (0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def test_circle_triangles_share_centre():
    idx = circle(7).indices
    triangles = [idx[i:i + 3] for i in range(0, len(idx), 3)]
    assert all(t[0] == 0 for t in triangles)
    assert sorted(t[1] for t in triangles) == list(range(1, 8))


def test_circle_rejects_zero_steps():
    with pytest.raises(ValueError):
        circle(0)


def test_results_are_cached():
    first_square = square()
    again_square = square()
    assert again_square is first_square
    assert again_square.indices == (0, 1, 2, 2, 3, 0)

    first_cube = cube()
    assert cube() is first_cube
    assert len(first_cube.indices) == 36

    first_circle = circle()
    assert circle() is first_circle
    assert len(first_circle.indices) == 3 * CIRCLE_STEPS


def test_primitive_is_frozen():
    p = Primitive((0.0,), (0,))
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.indices = (1,)
    assert p.indices == (0,)
    assert p.vertices == (0.0,)