"""Vector projections and camera projection matrices."""

from __future__ import annotations

import math

from .mat4 import Mat4
from .matrix import Matrix
from .vector import Vec3, Vector


def project(v: Vector, onto):
    """Project ``v`` onto a vector, or onto the column space of a matrix."""
    if isinstance(onto, Matrix):
        if type(v) is not onto.VECTOR:
            raise TypeError(
                f"cannot project {type(v).__name__} onto {type(onto).__name__}"
            )
        result = type(v)()
        for u in onto.gram_schmidt():
            result += v.dot(u) * u
        return result
    if not isinstance(onto, Vector):
        raise TypeError(f"cannot project onto {type(onto).__name__}")
    if onto == type(onto)():
        raise ZeroDivisionError("Cannot divide by zero")
    return (v.dot(onto) / onto.length_squared()) * onto


def ortho(left, right, bottom, top, near, far) -> Mat4:
    """Orthographic projection matrix."""
    m = Mat4.identity()
    m[0][0] = 2 / (right - left)
    m[1][1] = 2 / (top - bottom)
    m[2][2] = -2 / (far - near)
    m[3][0] = -(right + left) / (right - left)
    m[3][1] = -(top + bottom) / (top - bottom)
    m[3][2] = -(far + near) / (far - near)
    return m


def perspective(fov_rad, aspect_ratio, near, far) -> Mat4:
    """Perspective projection matrix, with the y axis flipped."""
    f = 1 / math.tan(fov_rad / 2)
    m = Mat4()
    m[0][0] = f / aspect_ratio
    m[1][1] = -f
    m[2][2] = (far + near) / (near - far)
    m[2][3] = -1.0
    m[3][2] = (2 * far * near) / (near - far)
    return m


def look_at(cam: Vec3, target: Vec3, up: Vec3 | None = None) -> Mat4:
    """View matrix for a camera at ``cam`` looking towards ``target``."""
    if up is None:
        up = Vec3(0.0, 1.0, 0.0)
    direction = (cam - target).normalize()
    right = up.normalize().cross(direction).normalize()
    true_up = right.cross(direction)
    rotation = Mat4(
        right.x, right.y, right.z, 0.0,
        true_up.x, true_up.y, true_up.z, 0.0,
        -direction.x, -direction.y, -direction.z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )
    translation = Mat4(
        1.0, 0.0, 0.0, -cam.x,
        0.0, 1.0, 0.0, -cam.y,
        0.0, 0.0, 1.0, -cam.z,
        0.0, 0.0, 0.0, 1.0,
    )
    return rotation * translation