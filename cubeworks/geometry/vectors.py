"""Small immutable 2D, 3D and homogeneous 4D vectors."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator

EPS = 1e-6
"""Tolerance used for approximate comparisons and division guards."""


@dataclass(frozen=True, slots=True, eq=False)
class Vec4D:
    """A four-component vector, typically a homogeneous point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Vec4D:
        return Vec4D(-self.x, -self.y, -self.z, -self.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    __hash__ = None  # equality is approximate

    def __add__(self, other: Vec4D) -> Vec4D:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return Vec4D(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4D) -> Vec4D:
        if not isinstance(other, Vec4D):
            return NotImplemented
        return Vec4D(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, number: float) -> Vec4D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec4D(self.x * number, self.y * number, self.z * number, self.w * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec4D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec4D(self.x / number, self.y / number, self.z / number, self.w / number)

    def __abs__(self) -> float:
        return self.length()

    def sqr_abs(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        """Return the length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec4D:
        """Return a unit vector in the same direction, or zero for a null vector."""
        length = self.length()
        if length > EPS:
            return self / length
        return Vec4D()


@dataclass(frozen=True, slots=True, eq=False)
class Vec3D:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vec4(cls, v: Vec4D) -> Vec3D:
        """Build from the first three components of a 4D vector."""
        return cls(v.x, v.y, v.z)

    @classmethod
    def random(cls) -> Vec3D:
        """Return a vector with each component uniformly drawn from [0, 1]."""
        return cls(random.random(), random.random(), random.random())

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vec3D:
        return Vec3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    __hash__ = None  # equality is approximate

    def __add__(self, other: Vec3D) -> Vec3D:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return Vec3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3D) -> Vec3D:
        if not isinstance(other, Vec3D):
            return NotImplemented
        return Vec3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, number: float) -> Vec3D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec3D(self.x * number, self.y * number, self.z * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec3D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        if abs(number) > EPS:
            return Vec3D(self.x / number, self.y / number, self.z / number)
        raise ValueError("Division by zero")

    def __abs__(self) -> float:
        return self.length()

    def dot(self, other: Vec3D) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3D) -> Vec3D:
        """Return the cross product."""
        return Vec3D(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )

    def sqr_abs(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Return the length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec3D:
        """Return a unit vector in the same direction, or zero for a null vector."""
        length = self.length()
        if length > EPS:
            return self / length
        return Vec3D()

    def make_point4d(self) -> Vec4D:
        """Return the homogeneous point (x, y, z, 1)."""
        return Vec4D(self.x, self.y, self.z, 1.0)


@dataclass(frozen=True, slots=True, eq=False)
class Vec2D:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_vec4(cls, v: Vec4D) -> Vec2D:
        """Build from the first two components of a 4D vector."""
        return cls(v.x, v.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return (self - other).sqr_abs() < EPS

    __hash__ = None  # equality is approximate

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __mul__(self, number: float) -> Vec2D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        return Vec2D(self.x * number, self.y * number)

    __rmul__ = __mul__

    def __truediv__(self, number: float) -> Vec2D:
        if not isinstance(number, (int, float)):
            return NotImplemented
        if abs(number) > EPS:
            return Vec2D(self.x / number, self.y / number)
        raise ValueError("Division by zero")

    def __abs__(self) -> float:
        return self.length()

    def dot(self, other: Vec2D) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y

    def sqr_abs(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length."""
        return math.sqrt(self.sqr_abs())

    def normalized(self) -> Vec2D:
        """Return a unit vector in the same direction, or zero for a null vector."""
        length = self.length()
        if length > EPS:
            return self / length
        return Vec2D()