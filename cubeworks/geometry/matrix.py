"""4x4 transformation matrices for homogeneous 3D graphics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Tuple, Union, overload

from cubeworks.geometry.vectors import Vec3D, Vec4D

_Row = Tuple[float, float, float, float]
_ZERO_ROWS: Tuple[_Row, ...] = ((0.0, 0.0, 0.0, 0.0),) * 4


@dataclass(frozen=True, slots=True)
class Matrix4x4:
    """An immutable 4x4 matrix stored as four rows."""

    rows: Tuple[_Row, ...] = _ZERO_ROWS

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("Matrix4x4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def _from_entries(cls, entries: Mapping[tuple[int, int], float]) -> Matrix4x4:
        return cls(
            tuple(
                tuple(entries.get((i, j), 0.0) for j in range(4))
                for i in range(4)
            )
        )

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.rows[i][j]

    @overload
    def __matmul__(self, other: Matrix4x4) -> Matrix4x4: ...

    @overload
    def __matmul__(self, other: Vec4D) -> Vec4D: ...

    @overload
    def __matmul__(self, other: Vec3D) -> Vec3D: ...

    def __matmul__(self, other: Union[Matrix4x4, Vec4D, Vec3D]):
        if isinstance(other, Matrix4x4):
            columns = list(zip(*other.rows))
            return Matrix4x4(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                    for row in self.rows
                )
            )
        if isinstance(other, Vec4D):
            return Vec4D(*(sum(a * b for a, b in zip(row, other)) for row in self.rows))
        if isinstance(other, Vec3D):
            # Only the linear 3x3 part applies to a direction vector.
            return Vec3D(
                *(sum(a * b for a, b in zip(row[:3], other)) for row in self.rows[:3])
            )
        return NotImplemented

    __mul__ = __matmul__

    def x(self) -> Vec3D:
        """Return the first column's upper three entries."""
        return Vec3D(self.rows[0][0], self.rows[1][0], self.rows[2][0])

    def y(self) -> Vec3D:
        """Return the second column's upper three entries."""
        return Vec3D(self.rows[0][1], self.rows[1][1], self.rows[2][1])

    def z(self) -> Vec3D:
        """Return the third column's upper three entries."""
        return Vec3D(self.rows[0][2], self.rows[1][2], self.rows[2][2])

    def w(self) -> Vec3D:
        """Return the fourth column's upper three entries (the translation)."""
        return Vec3D(self.rows[0][3], self.rows[1][3], self.rows[2][3])

    @classmethod
    def constant(cls, value: float) -> Matrix4x4:
        """Return a matrix with every entry equal to ``value``."""
        return cls(((value,) * 4,) * 4)

    @classmethod
    def zero(cls) -> Matrix4x4:
        """Return the zero matrix."""
        return cls.constant(0.0)

    @classmethod
    def identity(cls) -> Matrix4x4:
        """Return the identity matrix."""
        return cls._from_entries({(i, i): 1.0 for i in range(4)})

    @classmethod
    def scale(cls, factor: Vec3D) -> Matrix4x4:
        """Return a scaling matrix."""
        return cls._from_entries(
            {(0, 0): factor.x, (1, 1): factor.y, (2, 2): factor.z, (3, 3): 1.0}
        )

    @classmethod
    def translation(cls, v: Vec3D) -> Matrix4x4:
        """Return a translation matrix."""
        return cls._from_entries(
            {
                (0, 0): 1.0, (1, 1): 1.0, (2, 2): 1.0, (3, 3): 1.0,
                (0, 3): v.x, (1, 3): v.y, (2, 3): v.z,
            }
        )

    @classmethod
    def rotation_x(cls, rx: float) -> Matrix4x4:
        """Return a rotation about the x axis."""
        c, s = math.cos(rx), math.sin(rx)
        return cls._from_entries(
            {(0, 0): 1.0, (1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation_y(cls, ry: float) -> Matrix4x4:
        """Return a rotation about the y axis."""
        c, s = math.cos(ry), math.sin(ry)
        return cls._from_entries(
            {(1, 1): 1.0, (0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation_z(cls, rz: float) -> Matrix4x4:
        """Return a rotation about the z axis."""
        c, s = math.cos(rz), math.sin(rz)
        return cls._from_entries(
            {(2, 2): 1.0, (0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c, (3, 3): 1.0}
        )

    @classmethod
    def rotation(cls, r: Vec3D) -> Matrix4x4:
        """Return the Euler rotation Rx(r.x) * Ry(r.y) * Rz(r.z)."""
        return cls.rotation_x(r.x) @ cls.rotation_y(r.y) @ cls.rotation_z(r.z)

    @classmethod
    def rotation_axis(cls, v: Vec3D, rv: float) -> Matrix4x4:
        """Return a rotation by ``rv`` radians about the axis ``v``."""
        n = v.normalized()
        c, s = math.cos(rv), math.sin(rv)
        t = 1.0 - c
        return cls._from_entries(
            {
                (0, 0): c + t * n.x * n.x,
                (0, 1): t * n.x * n.y - s * n.z,
                (0, 2): t * n.x * n.z + s * n.y,
                (1, 0): t * n.x * n.y + s * n.z,
                (1, 1): c + t * n.y * n.y,
                (1, 2): t * n.y * n.z - s * n.x,
                (2, 0): t * n.z * n.x - s * n.y,
                (2, 1): t * n.z * n.y + s * n.x,
                (2, 2): c + t * n.z * n.z,
                (3, 3): 1.0,
            }
        )

    @classmethod
    def view(cls, left: Vec3D, up: Vec3D, look_at: Vec3D, eye: Vec3D) -> Matrix4x4:
        """Return the camera view matrix for the given basis and eye position."""
        return cls._from_entries(
            {
                (0, 0): left.x, (0, 1): left.y, (0, 2): left.z, (0, 3): -eye.dot(left),
                (1, 0): up.x, (1, 1): up.y, (1, 2): up.z, (1, 3): -eye.dot(up),
                (2, 0): look_at.x, (2, 1): look_at.y, (2, 2): look_at.z,
                (2, 3): -eye.dot(look_at),
                (3, 3): 1.0,
            }
        )

    @classmethod
    def projection(
        cls,
        fov: float = 90.0,
        aspect: float = 1.0,
        z_near: float = 1.0,
        z_far: float = 10.0,
    ) -> Matrix4x4:
        """Return a perspective projection matrix; ``fov`` is in degrees."""
        half = math.tan(math.pi * fov * 0.5 / 180)
        return cls._from_entries(
            {
                (0, 0): 1.0 / (half * aspect),
                (1, 1): 1.0 / half,
                (2, 2): z_far / (z_far - z_near),
                (2, 3): -z_far * z_near / (z_far - z_near),
                (3, 2): 1.0,
            }
        )

    @classmethod
    def screen_space(cls, width: int, height: int) -> Matrix4x4:
        """Return the matrix mapping normalised device coordinates to pixels."""
        return cls._from_entries(
            {
                (0, 0): -0.5 * width,
                (1, 1): -0.5 * height,
                (0, 3): 0.5 * width,
                (1, 3): 0.5 * height,
                (2, 2): 1.0,
                (3, 3): 1.0,
            }
        )