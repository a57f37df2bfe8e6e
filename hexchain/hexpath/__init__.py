from .coords import ORIGIN, Axial, Cube, InvalidCoordinate
from .conversions import axial_to_cube, cube_to_axial
from .heuristics import hex_distance_axial, hex_distance_cube, sorted_by_distance
from .neighbors import (
    CUBE_DIRECTIONS,
    hex_count,
    neighbors_axial,
    neighbors_cube,
    within_radius,
)

__all__ = [
    "ORIGIN",
    "Axial",
    "Cube",
    "InvalidCoordinate",
    "axial_to_cube",
    "cube_to_axial",
    "hex_distance_axial",
    "hex_distance_cube",
    "sorted_by_distance",
    "CUBE_DIRECTIONS",
    "hex_count",
    "neighbors_axial",
    "neighbors_cube",
    "within_radius",
]
