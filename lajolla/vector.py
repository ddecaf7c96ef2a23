"""Small immutable 2D and 3D vectors and the geometric helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

Scalar = Union[int, float]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Vector2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __add__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: object) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        if _is_scalar(other):
            return Vector2(self.x - other, self.y - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return Vector2(other - self.x, other - self.y)
        return NotImplemented

    def __mul__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return Vector2(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector2:
        if _is_scalar(other):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True, slots=True)
class Vector3:
    """A 3D vector of floats; also used as an RGB spectrum."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __add__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if _is_scalar(other):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return Vector3(other + self.x, other + self.y, other + self.z)
        return NotImplemented

    def __sub__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if _is_scalar(other):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return Vector3(other - self.x, other - self.y, other - self.z)
        return NotImplemented

    def __mul__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return Vector3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if _is_scalar(other):
            inv = 1.0 / other
            return Vector3(self.x * inv, self.y * inv, self.z * inv)
        return NotImplemented

    def __rtruediv__(self, other: object) -> Vector3:
        if _is_scalar(other):
            return Vector3(other / self.x, other / self.y, other / self.z)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


def dot(v0: Vector3, v1: Vector3) -> float:
    """Dot product of two 3D vectors."""
    return v0.x * v1.x + v0.y * v1.y + v0.z * v1.z


def cross(v0: Vector3, v1: Vector3) -> Vector3:
    """Cross product of two 3D vectors."""
    return Vector3(
        v0.y * v1.z - v0.z * v1.y,
        v0.z * v1.x - v0.x * v1.z,
        v0.x * v1.y - v0.y * v1.x,
    )


def distance_squared(v0: Vector3, v1: Vector3) -> float:
    """Squared Euclidean distance between two points."""
    diff = v0 - v1
    return dot(diff, diff)


def distance(v0: Vector3, v1: Vector3) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance_squared(v0, v1))


def length_squared(v: Vector3) -> float:
    """Squared length of a vector."""
    return dot(v, v)


def length(v: Vector3) -> float:
    """Length of a vector."""
    return math.sqrt(length_squared(v))


def normalize(v: Vector3) -> Vector3:
    """Unit vector in the direction of v, or the zero vector if v has no length."""
    norm = length(v)
    if norm <= 0:
        return Vector3(0.0, 0.0, 0.0)
    return v / norm


def average(v: Vector3) -> float:
    """Mean of the three components."""
    return (v.x + v.y + v.z) / 3


def max_component(v: Vector3) -> float:
    """Largest of the three components."""
    return max(max(v.x, v.y), v.z)


def elementwise_max(v0: Vector3, v1: Vector3) -> Vector3:
    """Component-wise maximum of two vectors."""
    return Vector3(max(v0.x, v1.x), max(v0.y, v1.y), max(v0.z, v1.z))


def has_nan(v: Union[Vector2, Vector3]) -> bool:
    """True if any component is NaN."""
    return any(math.isnan(c) for c in v)


def is_finite(v: Union[Vector2, Vector3]) -> bool:
    """True if any component is finite."""
    return any(math.isfinite(c) for c in v)


def build_basis(n: Vector3) -> Tuple[Vector3, Vector3]:
    """Two unit vectors that form an orthonormal basis with the unit vector n."""
    sign = math.copysign(1.0, n.z)
    a = -1.0 / (sign + n.z)
    b = n.x * n.y * a
    tangent = Vector3(1.0 + sign * n.x * n.x * a, sign * b, -sign * n.x)
    bitangent = Vector3(b, sign + n.y * n.y * a, -n.y)
    return tangent, bitangent