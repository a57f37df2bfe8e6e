from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


class InvalidCoordinate(ValueError):
    """Raised when cube components do not sum to zero."""


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int


@total_ordering
@dataclass(frozen=True, slots=True)
class Cube:
    """Cube hex coordinate, ordered top-to-bottom then left-to-right."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinate(
                f"For cube coords, x + y + z must be 0 (got {self.x}, {self.y}, {self.z})"
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return (self.z, self.x) < (other.z, other.x)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = Cube(0, 0, 0)
