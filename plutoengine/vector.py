"""Small fixed-size vectors and the component-wise functions over them."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Callable, Iterator, TypeVar

from .scalar import almost_equal, clamp_scalar, smoothstep_scalar, step_scalar

V = TypeVar("V", bound="Vector")


def _index_message(size: int) -> str:
    indices = [str(i) for i in range(size)]
    if size == 2:
        allowed = " or ".join(indices)
    else:
        allowed = ", ".join(indices[:-1]) + ", or " + indices[-1]
    return f"vec{size} index must be {allowed}"


def _axis(position: int, name: str) -> property:
    def getter(self):
        if position >= self.SIZE:
            raise AttributeError(f"{type(self).__name__} has no component {name!r}")
        return self._values[position]

    def setter(self, value):
        if position >= self.SIZE:
            raise AttributeError(f"{type(self).__name__} has no component {name!r}")
        self._values[position] = value

    return property(getter, setter, doc=f"The {name} component.")


class Vector:
    """Base class of the fixed-size vectors; subclasses set ``SIZE``."""

    __slots__ = ("_values",)
    SIZE = 0

    x = _axis(0, "x")
    y = _axis(1, "y")
    z = _axis(2, "z")
    w = _axis(3, "w")

    def __init__(self, *values):
        size = self.SIZE
        if size == 0:
            raise TypeError("Vector is abstract; use a sized subclass")
        if not values:
            self._values = [0.0] * size
        elif len(values) == 1:
            self._values = [values[0]] * size
        elif len(values) == size:
            self._values = list(values)
        else:
            raise TypeError(
                f"{type(self).__name__} takes 0, 1 or {size} components, got {len(values)}"
            )

    def _index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < self.SIZE:
            raise IndexError(_index_message(self.SIZE))
        return i

    def _same_type(self, other: "Vector") -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def _map(self: V, fn: Callable, *others: "Vector") -> V:
        for other in others:
            self._same_type(other)
        columns = zip(self._values, *(o._values for o in others))
        return type(self)(*(fn(*parts) for parts in columns))

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index):
        return self._values[self._index(index)]

    def __setitem__(self, index, value):
        self._values[self._index(index)] = value

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._values))})"

    def __str__(self) -> str:
        return "(" + ", ".join(f"{v:g}" for v in self._values) + ")"

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._map(operator.add, other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._map(operator.sub, other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._map(lambda v: v * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return self._map(lambda v: v / scalar)

    def __neg__(self):
        return self._map(operator.neg)

    def __iadd__(self, other):
        if isinstance(other, Vector):
            self._same_type(other)
            self._values = [a + b for a, b in zip(self._values, other._values)]
        elif isinstance(other, Real):
            self._values = [a + other for a in self._values]
        else:
            return NotImplemented
        return self

    def __isub__(self, other):
        if isinstance(other, Vector):
            self._same_type(other)
            self._values = [a - b for a, b in zip(self._values, other._values)]
        elif isinstance(other, Real):
            self._values = [a - other for a in self._values]
        else:
            return NotImplemented
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self._values = [a * scalar for a in self._values]
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        self._values = [a / scalar for a in self._values]
        return self

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return all(almost_equal(a, b) for a, b in zip(self._values, other._values))

    __hash__ = None

    def cwise_mul(self: V, other: V) -> V:
        """Component-wise product."""
        return self._map(operator.mul, other)

    def dot(self, other: "Vector"):
        """Dot product."""
        self._same_type(other)
        return sum(a * b for a, b in zip(self._values, other._values))

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def length_squared(self):
        """Squared Euclidean length."""
        return self.dot(self)

    def magnitude(self) -> float:
        """Alias of :meth:`length`."""
        return self.length()

    def norm(self) -> float:
        """Alias of :meth:`length`."""
        return self.length()

    def normalize(self: V) -> V:
        """Unit vector in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return type(self)(*self._values)
        return self / length

    def distance(self, other: "Vector") -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: "Vector"):
        """Squared Euclidean distance to ``other``."""
        self._same_type(other)
        return sum((a - b) * (a - b) for a, b in zip(self._values, other._values))


class Vec2(Vector):
    """Two-component vector."""

    __slots__ = ()
    SIZE = 2

    def cross(self, other: "Vec2"):
        """Scalar z component of the 3D cross product of two planar vectors."""
        self._same_type(other)
        return self.x * other.y - self.y * other.x


class Vec3(Vector):
    """Three-component vector."""

    __slots__ = ()
    SIZE = 3

    def cross(self, other: "Vec3") -> "Vec3":
        """Cross product."""
        self._same_type(other)
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def _same(first: Vector, *others: Vector) -> None:
    for other in others:
        first._same_type(other)


def clamp(v: V, lo: V, hi: V) -> V:
    """Clamp each component of ``v`` into the matching range of ``lo`` and ``hi``."""
    return v._map(clamp_scalar, lo, hi)


def lerp(a: V, b: V, t) -> V:
    """Linear interpolation; ``t`` is a scalar or a vector of per-component weights."""
    if isinstance(t, Vector):
        _same(a, b, t)
        if any(c < 0 or c > 1 for c in t):
            raise ValueError("t vector values must be between 0 and 1")
        return a._map(lambda p, q, s: p * (1 - s) + q * s, b, t)
    if t < 0 or t > 1:
        raise ValueError("t must be between 0 and 1")
    return a._map(lambda p, q: p * (1 - t) + q * t, b)


def angle_between(a: Vector, b: Vector) -> float:
    """Angle in radians between two non-zero vectors."""
    _same(a, b)
    lengths = a.length() * b.length()
    if lengths == 0:
        raise ValueError("Cannot compute angle between zero-length vectors")
    return math.acos(clamp_scalar(a.dot(b) / lengths, -1.0, 1.0))


def step(edge: V, x: V) -> V:
    """Component-wise step function."""
    return edge._map(step_scalar, x)


def smoothstep(edge0: V, edge1: V, x: V) -> V:
    """Component-wise smoothstep."""
    return edge0._map(smoothstep_scalar, edge1, x)


def faceforward(n: V, i: V, nref: V) -> V:
    """Return ``n`` if ``nref`` faces against ``i``, otherwise ``-n``."""
    _same(n, i, nref)
    return type(n)(*n) if nref.dot(i) < 0 else -n


def reflect(v: V, n: V) -> V:
    """Reflect ``v`` about the normal ``n``."""
    _same(v, n)
    n_norm = n.normalize()
    return v - (2.0 * v.dot(n_norm)) * n_norm


def refract(v: V, n: V, eta) -> V:
    """Refract ``v`` through a surface with normal ``n`` and index ratio ``eta``.

    Total internal reflection yields a zero vector.
    """
    _same(v, n)
    n_norm = n.normalize()
    cos_i = -n_norm.dot(v)
    sin_t2 = eta * eta * (1.0 - cos_i * cos_i)
    if sin_t2 > 1.0:
        return type(v)(0.0)
    cos_t = math.sqrt(1.0 - sin_t2)
    return eta * v + (eta * cos_i - cos_t) * n_norm


def minimum(a: V, b: V) -> V:
    """Component-wise minimum."""
    return a._map(min, b)


def maximum(a: V, b: V) -> V:
    """Component-wise maximum."""
    return a._map(max, b)


def absolute(a: V) -> V:
    """Component-wise absolute value."""
    return a._map(abs)