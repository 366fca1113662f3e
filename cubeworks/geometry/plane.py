"""Infinite planes given by a normal and a point."""

from __future__ import annotations

from dataclasses import dataclass

from cubeworks.geometry.vectors import Vec3D


@dataclass(frozen=True, slots=True, eq=False)
class Plane:
    """A plane through ``point`` with unit ``normal``; the normal is normalised."""

    normal: Vec3D
    point: Vec3D

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", self.normal.normalized())

    def distance(self, point: Vec3D) -> float:
        """Return the signed distance from ``point`` to the plane."""
        return point.dot(self.normal) - self.normal.dot(self.point)

    def intersection(self, start: Vec3D, end: Vec3D) -> tuple[Vec3D, float]:
        """Return where the line through ``start`` and ``end`` meets the plane.

        The second value is the parameter ``k`` with the point equal to
        ``start + (end - start) * k``. A line parallel to the plane raises
        ``ZeroDivisionError``.
        """
        s_dot_n = start.dot(self.normal)
        k = (s_dot_n - self.point.dot(self.normal)) / (s_dot_n - end.dot(self.normal))
        return start + (end - start) * k, k