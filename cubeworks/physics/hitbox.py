"""Collision hit boxes built from a mesh's vertices."""

from __future__ import annotations

import bisect
import functools
import sys
from typing import Iterable, Iterator

from cubeworks.geometry.vectors import EPS, Vec3D


def _less(lhs: Vec3D, rhs: Vec3D) -> bool:
    """Lexicographic ordering that treats coordinates within EPS as equal."""
    for a, b in zip(lhs, rhs):
        if abs(a - b) >= EPS:
            return a < b
    return False


def _compare(lhs: Vec3D, rhs: Vec3D) -> int:
    if _less(lhs, rhs):
        return -1
    if _less(rhs, lhs):
        return 1
    return 0


_key = functools.cmp_to_key(_compare)


class HitBox:
    """The points that stand for a body in collision tests.

    A simple box holds the eight corners of the points' axis-aligned bounding
    box; a detailed box holds the distinct points themselves, sorted.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Vec3D] = (), use_simple_box: bool = True) -> None:
        self._points: list[Vec3D] = (
            self._simple(points) if use_simple_box else self._detailed(points)
        )

    @staticmethod
    def _simple(points: Iterable[Vec3D]) -> list[Vec3D]:
        big = sys.float_info.max
        min_x = min_y = min_z = big
        max_x = max_y = max_z = -big
        for p in points:
            max_x, max_y, max_z = max(max_x, p.x), max(max_y, p.y), max(max_z, p.z)
            min_x, min_y, min_z = min(min_x, p.x), min(min_y, p.y), min(min_z, p.z)
        return [
            Vec3D(min_x, min_y, min_z),
            Vec3D(min_x, max_y, min_z),
            Vec3D(max_x, min_y, min_z),
            Vec3D(max_x, max_y, min_z),
            Vec3D(min_x, min_y, max_z),
            Vec3D(min_x, max_y, max_z),
            Vec3D(max_x, min_y, max_z),
            Vec3D(max_x, max_y, max_z),
        ]

    @staticmethod
    def _detailed(points: Iterable[Vec3D]) -> list[Vec3D]:
        unique: list[Vec3D] = []
        for p in points:
            pos = bisect.bisect_left(unique, _key(p), key=_key)
            if pos < len(unique) and not _less(p, unique[pos]):
                continue  # an equivalent point is already present
            unique.insert(pos, p)
        return unique

    def __iter__(self) -> Iterator[Vec3D]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"HitBox({self._points!r})"