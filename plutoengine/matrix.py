"""Square matrices stored as column vectors, and the 2x2 matrix."""

from __future__ import annotations

import operator
import sys
from numbers import Real
from typing import Iterator, TypeVar

from .vector import Vec2, Vector

M = TypeVar("M", bound="Matrix")


def _choices(size: int) -> str:
    if size == 2:
        return "0 or 1"
    if size == 3:
        return "0, 1, or 2"
    return f"less than {size}"


class Matrix:
    """Base of the square matrices; subclasses set ``SIZE``, ``VECTOR`` and ``MINOR``.

    Storage is column-major: ``m[j]`` is column ``j`` and ``m[j][i]`` the
    entry in row ``i`` of that column.
    """

    __slots__ = ("_columns",)
    SIZE = 0
    VECTOR: type = Vector
    MINOR: type | None = None

    def __init__(self, *args):
        n = self.SIZE
        vec = self.VECTOR
        if n == 0:
            raise TypeError("Matrix is abstract; use a sized subclass")
        if not args:
            self._columns = [vec() for _ in range(n)]
        elif len(args) == 1 and isinstance(args[0], Real):
            s = args[0]
            self._columns = [vec(*(s if i == j else 0.0 for i in range(n))) for j in range(n)]
        elif len(args) == n and all(isinstance(a, Vector) for a in args):
            for a in args:
                if type(a) is not vec:
                    raise TypeError(f"{type(self).__name__} columns must be {vec.__name__}")
            self._columns = [vec(*a) for a in args]
        elif len(args) == n * n and all(isinstance(a, Real) for a in args):
            # Scalars are given row by row.
            self._columns = [vec(*args[c::n]) for c in range(n)]
        else:
            raise TypeError(
                f"{type(self).__name__} takes nothing, one scalar, {n} columns "
                f"or {n * n} scalars"
            )

    @classmethod
    def identity(cls: type[M]) -> M:
        """The identity matrix."""
        return cls(1.0)

    @classmethod
    def from_rows(cls: type[M], *args) -> M:
        """Build a matrix from ``SIZE`` row sequences or ``SIZE*SIZE`` row-major scalars."""
        n = cls.SIZE
        if len(args) == n and not any(isinstance(a, Real) for a in args):
            rows = [list(r) for r in args]
            if any(len(r) != n for r in rows):
                raise TypeError(f"each row must have {n} entries")
            return cls(*(value for r in rows for value in r))
        return cls(*args)

    def _check_index(self, index, message: str) -> int:
        i = operator.index(index)
        if not 0 <= i < self.SIZE:
            raise IndexError(message)
        return i

    def _same_type(self, other: "Matrix") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._columns)

    def __getitem__(self, index):
        i = self._check_index(index, f"Index must be {_choices(self.SIZE)}")
        return self._columns[i]

    def __setitem__(self, index, column):
        i = self._check_index(index, f"Index must be {_choices(self.SIZE)}")
        if type(column) is not self.VECTOR:
            raise TypeError(f"column must be {self.VECTOR.__name__}")
        self._columns[i] = self.VECTOR(*column)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._columns))})"

    def __str__(self) -> str:
        rows = (
            "[" + ", ".join(f"{v:g}" for v in self.row(i)) + "]" for i in range(self.SIZE)
        )
        return "[" + ",\n ".join(rows) + "]"

    def _with_columns(self: M, columns) -> M:
        return type(self)(*columns)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_type(other)
        return self._with_columns(a + b for a, b in zip(self._columns, other._columns))

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_type(other)
        return self._with_columns(a - b for a, b in zip(self._columns, other._columns))

    def __mul__(self, other):
        if isinstance(other, Real):
            return self._with_columns(c * other for c in self._columns)
        if isinstance(other, Matrix):
            self._same_type(other)
            rows = [self.row(i) for i in range(self.SIZE)]
            return self._with_columns(
                self.VECTOR(*(r.dot(col) for r in rows)) for col in other._columns
            )
        if isinstance(other, Vector):
            if type(other) is not self.VECTOR:
                raise TypeError(
                    f"cannot multiply {type(self).__name__} by {type(other).__name__}"
                )
            result = self.VECTOR()
            for col, weight in zip(self._columns, other):
                result += col * weight
            return result
        return NotImplemented

    def __rmul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return self._with_columns(c / scalar for c in self._columns)

    def __neg__(self):
        return self._with_columns(-c for c in self._columns)

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_type(other)
        self._columns = [a + b for a, b in zip(self._columns, other._columns)]
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_type(other)
        self._columns = [a - b for a, b in zip(self._columns, other._columns)]
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._columns = [c * scalar for c in self._columns]
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        self._columns = [c / scalar for c in self._columns]
        return self

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return all(a == b for a, b in zip(self._columns, other._columns))

    __hash__ = None

    def col(self, index) -> Vector:
        """A copy of column ``index``."""
        return self.VECTOR(*self[index])

    def row(self, index) -> Vector:
        """Row ``index`` as a vector."""
        i = self._check_index(index, f"Row index must be {_choices(self.SIZE)}")
        return self.VECTOR(*(c[i] for c in self._columns))

    def transpose(self: M) -> M:
        """The transposed matrix."""
        return self._with_columns(self.row(i) for i in range(self.SIZE))

    def _check_minor(self, row, col) -> tuple[int, int]:
        n = self.SIZE
        message = f"Index out of bounds for {n} by {n} matrix"
        return self._check_index(row, message), self._check_index(col, message)

    def minor(self, row, col):
        """The matrix left after removing ``row`` and ``col``."""
        row, col = self._check_minor(row, col)
        if self.MINOR is None:
            raise TypeError(f"{type(self).__name__} has no minor type")
        n = self.SIZE
        entries = [
            self._columns[j][i]
            for i in range(n)
            if i != row
            for j in range(n)
            if j != col
        ]
        return self.MINOR(*entries)

    def _minor_determinant(self, row, col):
        m = self.minor(row, col)
        return m.determinant() if isinstance(m, Matrix) else m

    def determinant(self):
        """Determinant by cofactor expansion along the first row."""
        return sum(
            (-1) ** j * self._columns[j][0] * self._minor_determinant(0, j)
            for j in range(self.SIZE)
        )

    def cofactor(self: M) -> M:
        """The matrix of cofactors."""
        n = self.SIZE
        output = type(self)()
        for i in range(n):
            for j in range(n):
                output[j][i] = (-1) ** (i + j) * self._minor_determinant(i, j)
        return output

    def adjugate(self: M) -> M:
        """Transpose of the cofactor matrix."""
        return self.cofactor().transpose()

    def inverse(self: M) -> M:
        """The inverse; a singular matrix raises ``ValueError``."""
        det = self.determinant()
        if det == 0:
            raise ValueError("Determinant of matrix must be non zero to calculate inverse")
        return self.adjugate() / det

    def gram_schmidt(self: M) -> M:
        """Orthonormalise the columns; columns dependent on earlier ones become zero."""
        n = self.SIZE
        tol = sys.float_info.epsilon * 1000 * n * max(c.norm() for c in self._columns)
        orth = type(self)()
        for i, column in enumerate(self._columns):
            u = column - orth * orth.transpose() * column
            length = u.norm()
            if length > tol:
                orth[i] = u / length
        return orth

    def values(self) -> list:
        """All entries in column-major order."""
        return [v for c in self._columns for v in c]


class Mat2(Matrix):
    """2x2 matrix."""

    __slots__ = ()
    SIZE = 2
    VECTOR = Vec2

    def minor(self, row, col):
        """The single entry left after removing ``row`` and ``col``."""
        row, col = self._check_minor(row, col)
        return self._columns[1 - col][1 - row]

    def determinant(self):
        """Determinant."""
        c0, c1 = self._columns
        return c0.x * c1.y - c1.x * c0.y