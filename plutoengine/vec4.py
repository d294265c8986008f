"""Four-component vector."""

from __future__ import annotations

from .vector import Vector


class Vec4(Vector):
    """Four-component vector (x, y, z, w)."""

    __slots__ = ()
    SIZE = 4