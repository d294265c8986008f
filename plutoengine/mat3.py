"""3x3 matrix."""

from __future__ import annotations

from .matrix import Mat2, Matrix
from .vector import Vec3


class Mat3(Matrix):
    """3x3 matrix stored as three :class:`Vec3` columns.

    ``Mat3()`` is the zero matrix, ``Mat3(s)`` has ``s`` on the diagonal,
    ``Mat3(c0, c1, c2)`` takes columns and ``Mat3(s1, ..., s9)`` takes
    entries row by row.
    """

    __slots__ = ()
    SIZE = 3
    VECTOR = Vec3
    MINOR = Mat2

    def __str__(self) -> str:
        return super().__str__() + "\n"