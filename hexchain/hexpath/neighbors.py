from __future__ import annotations

from typing import Iterable

from .coords import Axial, Cube

_AXIAL_DIRS = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)

# Enumeration order of neighbors; the search strategies rely on it.
CUBE_DIRECTIONS = (
    (+1, -1, 0),
    (+1, 0, -1),
    (0, +1, -1),
    (-1, +1, 0),
    (-1, 0, +1),
    (0, -1, +1),
)


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in _AXIAL_DIRS:
        yield Axial(a.q + d.q, a.r + d.r)


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for dx, dy, dz in CUBE_DIRECTIONS:
        yield Cube(c.x + dx, c.y + dy, c.z + dz)


def within_radius(c: Cube, max_radius: int) -> bool:
    return abs(c.x) <= max_radius and abs(c.y) <= max_radius and abs(c.z) <= max_radius


def hex_count(max_radius: int) -> int:
    """Number of cells on a hexagonal board of the given radius."""

    return 1 + 3 * max_radius * (max_radius + 1)
