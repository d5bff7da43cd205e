# core/vector.py
import math
from typing import Iterator, Union

import numpy as np

# Tolerance for every approximate comparison: equality, zero length, unit length.
EPSILON = 1.0e-4

_AXES = ("x", "y", "z")

Scalar = Union[int, float]


class Vector3:
    """
    A 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Equality is approximate: two vectors compare equal
    when every pair of components lies within EPSILON.

    Indexing aliases the named components, so ``v[0] = 1.0`` and
    ``v.x = 1.0`` write the same slot.
    """
    __slots__ = _AXES

    # Keeps numpy scalars from broadcasting over a Vector3 in ``np.float32(2) * v``.
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_array(cls, arr) -> "Vector3":
        """
        Builds a vector from the first three entries of a numpy array (or any sequence).
        """
        return Vector3(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self, dtype=np.float32) -> np.ndarray:
        """
        Packs the components into a flat numpy array, float32 by default so the
        result can be copied straight into device buffers.
        """
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    __copy__ = copy

    def __reduce__(self):
        return (self.__class__, (self.x, self.y, self.z))

    # Component access

    def __getitem__(self, i: int) -> float:
        return getattr(self, _AXES[i])

    def __setitem__(self, i: int, value: float):
        setattr(self, _AXES[i], value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (abs(self.x - other.x) <= EPSILON and
                abs(self.y - other.y) <= EPSILON and
                abs(self.z - other.z) <= EPSILON)

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Approximate equality is not transitive, so there is no consistent hash.
    __hash__ = None

    # Arithmetic

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, t: Scalar) -> "Vector3":
        if isinstance(t, Vector3):
            return NotImplemented
        return Vector3(self.x * t, self.y * t, self.z * t)

    def __rmul__(self, t: Scalar) -> "Vector3":
        return self.__mul__(t)

    def __truediv__(self, t: Scalar) -> "Vector3":
        if isinstance(t, Vector3):
            return NotImplemented
        inv = 1.0 / t
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, t: Scalar) -> "Vector3":
        if isinstance(t, Vector3):
            return NotImplemented
        self.x *= t
        self.y *= t
        self.z *= t
        return self

    def __itruediv__(self, t: Scalar) -> "Vector3":
        if isinstance(t, Vector3):
            return NotImplemented
        inv = 1.0 / t
        self.x *= inv
        self.y *= inv
        self.z *= inv
        return self

    # Method forms of the free functions below

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        return cross(self, other)

    def length_squared(self) -> float:
        return length_squared(self)

    def length(self) -> float:
        return length(self)

    def normalize(self) -> "Vector3":
        return normalize(self)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class _FrozenVector3(Vector3):
    """
    Read-only vector used for the module constants. Compound assignment
    returns a fresh Vector3 instead of updating the constant.
    """
    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self!r} is a constant and cannot be modified")

    def __iadd__(self, other):
        return self + other

    def __isub__(self, other):
        return self - other

    def __imul__(self, t):
        return self * t

    def __itruediv__(self, t):
        return self / t


ZERO = _FrozenVector3(0.0, 0.0, 0.0)
UNIT_X = _FrozenVector3(1.0, 0.0, 0.0)
UNIT_Y = _FrozenVector3(0.0, 1.0, 0.0)
UNIT_Z = _FrozenVector3(0.0, 0.0, 1.0)


def length_squared(v: Vector3) -> float:
    return v.x * v.x + v.y * v.y + v.z * v.z


def length(v: Vector3) -> float:
    """
    Euclidean length of v. Near-zero vectors report 0 and near-unit vectors
    report their squared length, skipping the square root in both cases.
    """
    len_sq = length_squared(v)
    if abs(len_sq) <= EPSILON:
        return 0.0
    if abs(len_sq - 1.0) <= EPSILON:
        return len_sq
    return math.sqrt(len_sq)


def normalize(v: Vector3) -> Vector3:
    """
    Returns v scaled to unit length. Zero vectors and vectors that are already
    unit length come back as an unscaled copy.
    """
    len_sq = length_squared(v)
    if abs(len_sq) <= EPSILON or abs(len_sq - 1.0) <= EPSILON:
        return v.copy()
    inv = 1.0 / math.sqrt(len_sq)
    return Vector3(v.x * inv, v.y * inv, v.z * inv)


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Right-handed cross product: cross(UNIT_X, UNIT_Y) == UNIT_Z.
    Parallel, anti-parallel and zero inputs yield the zero vector.
    """
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def distance_squared(a: Vector3, b: Vector3) -> float:
    return length_squared(b - a)


def distance(a: Vector3, b: Vector3) -> float:
    return length(b - a)


def is_zero(v: Vector3) -> bool:
    return abs(length_squared(v)) <= EPSILON


def is_unit(v: Vector3) -> bool:
    return abs(length_squared(v) - 1.0) <= EPSILON
