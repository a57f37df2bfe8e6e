"""Mutable placement state for the hex chain puzzle.

The board maps every cell of a hexagon of radius ``max_radius`` to a value,
``EMPTY`` marking an unfilled cell.  The set of values that still have to be
placed is kept alongside the cells and both are always updated together, so
that a search can place and remove values freely and end up exactly where it
started.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Dict, List, Optional, Set, Tuple

from .hexpath import ORIGIN, Cube, neighbors_cube, within_radius

EMPTY = 0


class PuzzleConfigurationError(ValueError):
    """Base class for malformed puzzle definitions."""


class InvalidRadius(PuzzleConfigurationError):
    """Raised when the board radius is negative."""


class DuplicateValue(PuzzleConfigurationError):
    """Raised when two initial placements share a value."""


class OutOfRangeValue(PuzzleConfigurationError):
    """Raised when an initial value falls outside ``1..cell_count``."""


class OffBoardCoordinate(PuzzleConfigurationError):
    """Raised when an initial placement lies outside the board."""


class InvariantViolation(AssertionError):
    """Board or solver misuse; never caused by user input."""


class Board:
    """Hexagonal board holding the values placed so far."""

    def __init__(
        self,
        max_radius: int,
        initial_placements: Mapping[Cube, int] | None = None,
    ) -> None:
        if max_radius < 0:
            raise InvalidRadius(f"max_radius must be non-negative, got {max_radius}")
        self.max_radius = max_radius
        self._cells: Dict[Cube, int] = {coord: EMPTY for coord in self._flood_fill()}
        self._positions: Dict[int, Cube] = {}
        self._remaining: Set[int] = set(range(1, len(self._cells) + 1))
        self._fixed: frozenset[Cube] = frozenset()

        placements = dict(initial_placements or {})
        seen: Dict[int, Cube] = {}
        for coord, value in placements.items():
            if coord not in self._cells:
                raise OffBoardCoordinate(
                    f"{coord} is outside a board of radius {max_radius}"
                )
            if not 1 <= value <= self.cell_count:
                raise OutOfRangeValue(
                    f"value {value} at {coord} is outside 1..{self.cell_count}"
                )
            if value in seen:
                raise DuplicateValue(
                    f"value {value} is placed at both {seen[value]} and {coord}"
                )
            seen[value] = coord

        for coord, value in placements.items():
            self.place(coord, value)
        self._fixed = frozenset(placements)

    def _flood_fill(self) -> List[Cube]:
        discovered = [ORIGIN]
        seen = {ORIGIN}
        frontier = deque([ORIGIN])
        while frontier:
            current = frontier.popleft()
            for neighbor in neighbors_cube(current):
                if neighbor in seen or not within_radius(neighbor, self.max_radius):
                    continue
                seen.add(neighbor)
                discovered.append(neighbor)
                frontier.append(neighbor)
        return discovered

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def cells(self) -> Mapping[Cube, int]:
        return MappingProxyType(self._cells)

    @property
    def remaining(self) -> frozenset[int]:
        return frozenset(self._remaining)

    @property
    def fixed(self) -> frozenset[Cube]:
        """Coordinates pre-filled by the puzzle definition."""

        return self._fixed

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __iter__(self) -> Iterator[Tuple[Cube, int]]:
        return self.ordered_cells()

    def ordered_cells(self) -> Iterator[Tuple[Cube, int]]:
        """Yield ``(coordinate, value)`` pairs in print order."""

        for coord in sorted(self._cells):
            yield coord, self._cells[coord]

    def value_at(self, coord: Cube) -> int:
        return self._cells[coord]

    def is_empty(self, coord: Cube) -> bool:
        return self._cells[coord] == EMPTY

    def position_of(self, value: int) -> Optional[Cube]:
        return self._positions.get(value)

    def placed_values(self) -> List[int]:
        return sorted(self._positions)

    def lowest_placed(self) -> Optional[int]:
        return min(self._positions) if self._positions else None

    def next_remaining(self) -> Optional[int]:
        return min(self._remaining) if self._remaining else None

    def empty_neighbors(self, coord: Cube) -> List[Cube]:
        return [
            n for n in neighbors_cube(coord) if self._cells.get(n, None) == EMPTY
        ]

    def occupied_neighbor_values(self, coord: Cube) -> Set[int]:
        values = set()
        for n in neighbors_cube(coord):
            value = self._cells.get(n, EMPTY)
            if value != EMPTY:
                values.add(value)
        return values

    def is_legal(self, value: int) -> bool:
        position = self._positions.get(value)
        if position is None:
            return False
        expected = set()
        if value > 1:
            expected.add(value - 1)
        if value < self.cell_count:
            expected.add(value + 1)
        return expected <= self.occupied_neighbor_values(position)

    def is_complete(self) -> bool:
        return all(self.is_legal(value) for value in range(1, self.cell_count + 1))

    def snapshot(self) -> Dict[Cube, int]:
        return dict(self._cells)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, coord: Cube, value: int) -> None:
        if coord not in self._cells:
            raise InvariantViolation(f"{coord} is not on the board")
        if coord in self._fixed:
            raise InvariantViolation(f"{coord} holds a fixed value")
        if self._cells[coord] != EMPTY:
            raise InvariantViolation(
                f"{coord} already holds {self._cells[coord]}"
            )
        if value not in self._remaining:
            raise InvariantViolation(f"value {value} is not available for placement")
        self._remaining.remove(value)
        self._cells[coord] = value
        self._positions[value] = coord

    def remove(self, coord: Cube) -> int:
        """Clear ``coord`` and return the value it held."""

        if coord in self._fixed:
            raise InvariantViolation(f"{coord} holds a fixed value")
        value = self._cells.get(coord, EMPTY)
        if value == EMPTY:
            raise InvariantViolation(f"{coord} is empty or not on the board")
        self._cells[coord] = EMPTY
        del self._positions[value]
        self._remaining.add(value)
        return value

    def __repr__(self) -> str:
        return (
            f"Board(max_radius={self.max_radius}, placed={len(self._positions)}, "
            f"remaining={len(self._remaining)})"
        )


__all__ = [
    "EMPTY",
    "Board",
    "DuplicateValue",
    "InvalidRadius",
    "InvariantViolation",
    "OffBoardCoordinate",
    "OutOfRangeValue",
    "PuzzleConfigurationError",
]
