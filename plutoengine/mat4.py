"""4x4 matrix."""

from __future__ import annotations

from .mat3 import Mat3
from .matrix import Matrix
from .vec4 import Vec4


class Mat4(Matrix):
    """4x4 matrix stored as four :class:`Vec4` columns.

    ``Mat4()`` is the zero matrix, ``Mat4(s)`` has ``s`` on the diagonal,
    ``Mat4(c0, c1, c2, c3)`` takes columns and ``Mat4(s1, ..., s16)`` takes
    entries row by row.
    """

    __slots__ = ()
    SIZE = 4
    VECTOR = Vec4
    MINOR = Mat3

    def __str__(self) -> str:
        return super().__str__() + "\n"