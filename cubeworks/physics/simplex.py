"""Simplex of up to four points used by GJK collision detection."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Iterable, Iterator

from cubeworks.geometry.vectors import Vec3D

_MAX_POINTS = 4


class SimplexType(IntEnum):
    """Kind of simplex, equal to its number of points."""

    ZERO = 0
    POINT = 1
    LINE = 2
    TRIANGLE = 3
    TETRAHEDRON = 4


class Simplex:
    """An ordered set of at most four points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Vec3D] = ()) -> None:
        # Appending past the limit drops the oldest point from the front.
        self._points: deque[Vec3D] = deque(points, maxlen=_MAX_POINTS)

    def push_front(self, point: Vec3D) -> None:
        """Insert ``point`` at the front, dropping the last point if full."""
        self._points.appendleft(point)

    def simplex_type(self) -> SimplexType:
        """Return the simplex kind given by the number of points."""
        return SimplexType(len(self._points))

    def __getitem__(self, index: int) -> Vec3D:
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vec3D]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Simplex({list(self._points)!r})"