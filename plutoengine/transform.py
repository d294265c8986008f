"""Affine transformation matrices for 2D (3x3) and 3D (4x4) homogeneous coordinates."""

from __future__ import annotations

import math
from numbers import Real

from .mat3 import Mat3
from .mat4 import Mat4
from .vector import Vec2, Vec3, Vector


def _components(value, vector_type: type, size: int) -> tuple:
    if isinstance(value, Vector):
        if type(value) is not vector_type:
            raise TypeError(f"expected {vector_type.__name__}, got {type(value).__name__}")
        return tuple(value)
    if isinstance(value, Real):
        return (value,) * size
    raise TypeError(f"expected {vector_type.__name__} or a number, got {type(value).__name__}")


def _apply(mat, transform):
    return transform if mat is None else mat * transform


def scale2d(s, mat=None) -> Mat3:
    """Scaling by a :class:`Vec2` or a uniform factor, optionally applied after ``mat``."""
    sx, sy = _components(s, Vec2, 2)
    return _apply(mat, Mat3(
        sx, 0.0, 0.0,
        0.0, sy, 0.0,
        0.0, 0.0, 1.0,
    ))


def translate2d(t, mat=None) -> Mat3:
    """Translation by a :class:`Vec2` or the same offset on both axes."""
    tx, ty = _components(t, Vec2, 2)
    return _apply(mat, Mat3(
        1.0, 0.0, tx,
        0.0, 1.0, ty,
        0.0, 0.0, 1.0,
    ))


def rotate2d(theta, mat=None) -> Mat3:
    """Counter-clockwise rotation by ``theta`` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    return _apply(mat, Mat3(
        c, -s, 0.0,
        s, c, 0.0,
        0.0, 0.0, 1.0,
    ))


def trs2d(t, theta, s, mat=None) -> Mat3:
    """Translate, rotate and scale composed as ``T * R * S``."""
    return _apply(mat, translate2d(t) * rotate2d(theta) * scale2d(s))


def scale3d(s, mat=None) -> Mat4:
    """Scaling by a :class:`Vec3` or a uniform factor, optionally applied after ``mat``."""
    sx, sy, sz = _components(s, Vec3, 3)
    return _apply(mat, Mat4(
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ))


def translate3d(t, mat=None) -> Mat4:
    """Translation by a :class:`Vec3` or the same offset on all axes."""
    tx, ty, tz = _components(t, Vec3, 3)
    return _apply(mat, Mat4(
        1.0, 0.0, 0.0, tx,
        0.0, 1.0, 0.0, ty,
        0.0, 0.0, 1.0, tz,
        0.0, 0.0, 0.0, 1.0,
    ))


def rotate3d(theta, axis, mat=None) -> Mat4:
    """Rotation by ``theta`` radians about ``axis`` (normalised first)."""
    if type(axis) is not Vec3:
        raise TypeError(f"axis must be Vec3, got {type(axis).__name__}")
    n = axis.normalize()
    x, y, z = n.x, n.y, n.z
    cos = math.cos(-theta)
    sin = math.sin(-theta)
    o_cos = 1.0 - cos
    return _apply(mat, Mat4(
        Vec4_(x * x * o_cos + cos, x * y * o_cos - z * sin, x * z * o_cos + y * sin, 0.0),
        Vec4_(x * y * o_cos + z * sin, y * y * o_cos + cos, y * z * o_cos - x * sin, 0.0),
        Vec4_(x * z * o_cos - y * sin, y * z * o_cos + x * sin, z * z * o_cos + cos, 0.0),
        Vec4_(0.0, 0.0, 0.0, 1.0),
    ))


def rotate_x(theta, mat=None) -> Mat4:
    """Rotation about the x axis."""
    return rotate3d(theta, Vec3(1.0, 0.0, 0.0), mat)


def rotate_y(theta, mat=None) -> Mat4:
    """Rotation about the y axis."""
    return rotate3d(theta, Vec3(0.0, 1.0, 0.0), mat)


def rotate_z(theta, mat=None) -> Mat4:
    """Rotation about the z axis."""
    return rotate3d(theta, Vec3(0.0, 0.0, 1.0), mat)


Vec4_ = Mat4.VECTOR