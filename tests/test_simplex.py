import pytest

from cubeworks.geometry.vectors import Vec3D
from cubeworks.physics.simplex import Simplex, SimplexType

A, B, C, D, E = (Vec3D(i, i, i) for i in range(1, 6))


def test_empty_simplex():
    s = Simplex()
    assert len(s) == 0
    assert s.simplex_type() is SimplexType.ZERO


def test_push_front_orders_points():
    s = Simplex()
    s.push_front(A)
    s.push_front(B)
    assert list(s) == [B, A]
    assert s.simplex_type() is SimplexType.LINE


def test_push_front_drops_last_when_full():
    s = Simplex([A, B, C, D])
    s.push_front(E)
    assert list(s) == [E, A, B, C]
    assert len(s) == 4


def test_init_keeps_last_four():
    s = Simplex([A, B, C, D, E])
    assert list(s) == [B, C, D, E]
    assert s.simplex_type() is SimplexType.TETRAHEDRON


@pytest.mark.parametrize(
    "count,kind",
    [(1, SimplexType.POINT), (2, SimplexType.LINE), (3, SimplexType.TRIANGLE)],
)
def test_type_matches_size(count, kind):
    s = Simplex([A, B, C, D][:count])
    assert s.simplex_type() is kind
    assert int(s.simplex_type()) == len(s)


def test_indexing():
    s = Simplex([A, B, C])
    assert s[0] == A
    assert s[2] == C
    with pytest.raises(IndexError):
        s[3]