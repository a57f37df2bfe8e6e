import pytest

from hexchain.hexpath import Axial, Cube
from hexchain.hexpath import hex_count, hex_distance_cube, neighbors_axial, neighbors_cube, within_radius


def test_neighbors_axial_six():
    n = list(neighbors_axial(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(1, 0) in n
    assert Axial(0, 1) in n


def test_neighbors_cube_enumeration_order():
    assert list(neighbors_cube(Cube(0, 0, 0))) == [
        Cube(1, -1, 0),
        Cube(1, 0, -1),
        Cube(0, 1, -1),
        Cube(-1, 1, 0),
        Cube(-1, 0, 1),
        Cube(0, -1, 1),
    ]


def test_neighbors_cube_ignores_board_bounds():
    corner = Cube(4, -4, 0)
    n = list(neighbors_cube(corner))
    assert len(n) == 6
    assert all(hex_distance_cube(corner, other) == 1 for other in n)
    assert not all(within_radius(other, 4) for other in n)


@pytest.mark.parametrize(
    ("cube", "radius", "expected"),
    [
        (Cube(0, 0, 0), 0, True),
        (Cube(1, -1, 0), 0, False),
        (Cube(2, -1, -1), 2, True),
        (Cube(3, -1, -2), 2, False),
    ],
)
def test_within_radius(cube: Cube, radius: int, expected: bool):
    assert within_radius(cube, radius) is expected


@pytest.mark.parametrize(("radius", "count"), [(0, 1), (1, 7), (2, 19), (3, 37), (4, 61)])
def test_hex_count(radius: int, count: int):
    assert hex_count(radius) == count
