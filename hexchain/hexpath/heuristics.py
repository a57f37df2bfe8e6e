from __future__ import annotations

from typing import Iterable

from .conversions import axial_to_cube
from .coords import Axial, Cube


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


def hex_distance_axial(a: Axial, b: Axial) -> int:
    return hex_distance_cube(axial_to_cube(a), axial_to_cube(b))


def sorted_by_distance(coords: Iterable[Cube], root: Cube) -> list[Cube]:
    """Return ``coords`` ordered by distance to ``root``; ties keep input order."""

    return sorted(coords, key=lambda c: hex_distance_cube(c, root))
