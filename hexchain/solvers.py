"""
Search strategies for the hex chain puzzle.

Both strategies place the smallest value that is still missing next to the
cell holding its predecessor, recurse on the following value and undo the
placement when the recursion fails.  They differ in the order in which the
empty neighbors of the predecessor are tried and in how many of them are
pruned:

* ``DFSSolver`` tries the neighbors in enumeration order.  When the successor
  of the value is already on the board only neighbors touching it are tried.
* ``PathfindingSolver`` heads for the nearest higher value already on the
  board, trying the closest neighbors first and dropping those that can no
  longer reach it in time.

Usage:
    board = Board(1, {ORIGIN: 1})
    solver = create_solver(Strategy.DFS, board)
    solver.solve(board.next_remaining())
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Type

from .board import Board, InvariantViolation
from .hexpath import Cube, hex_distance_cube, sorted_by_distance

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """Selectable search strategies."""

    DFS = "dfs"
    PATHFINDING = "pathfinding"


@dataclass
class StepCounter:
    """Counts recursive search steps; used only for reporting."""

    steps: int = 0

    def increment(self) -> None:
        self.steps += 1

    def reset(self) -> None:
        self.steps = 0


class Solver(ABC):
    """
    Abstract base class for backtracking strategies.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for menus and reports
    """

    strategy: Strategy
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self, board: Board, counter: Optional[StepCounter] = None) -> None:
        self.board = board
        self.counter = counter if counter is not None else StepCounter()

    @abstractmethod
    def solve(self, next_value: int) -> bool:
        """
        Place ``next_value`` and every value after it.

        Args:
            next_value: Smallest value not yet on the board; its predecessor
                must already be placed.

        Returns:
            True if the board was completed, False if every candidate failed.
            On False the board is left exactly as it was found.
        """

    def _parent_of(self, value: int) -> Cube:
        parent = self.board.position_of(value - 1)
        if parent is None:
            raise InvariantViolation(
                f"cannot place {value}: predecessor {value - 1} is not on the board"
            )
        return parent

    def _try_candidates(self, value: int, candidates: Iterable[Cube]) -> bool:
        board = self.board
        for candidate in candidates:
            logger.debug("Placing %d at %s", value, candidate)
            board.place(candidate, value)
            following = board.next_remaining()
            if following is None:
                if board.is_complete():
                    return True
            elif self.solve(following):
                return True
            logger.debug("Could not place %d at %s", value, candidate)
            board.remove(candidate)
        return False


_SOLVERS: Dict[Strategy, Type[Solver]] = {}


def register_solver(cls: Type[Solver]) -> Type[Solver]:
    """Class decorator adding ``cls`` to the strategy registry."""

    _SOLVERS[cls.strategy] = cls
    return cls


@register_solver
class DFSSolver(Solver):
    """Plain depth-first search over the predecessor's empty neighbors."""

    strategy = Strategy.DFS
    name = "DFS"
    description = "Solve using a simple DFS algorithm."

    def solve(self, next_value: int) -> bool:
        self.counter.increment()
        board = self.board
        parent = self._parent_of(next_value)
        successor = next_value + 1
        successor_known = (
            successor <= board.cell_count and board.position_of(successor) is not None
        )

        candidates = board.empty_neighbors(parent)
        if successor_known:
            # A value placed away from its successor can never become legal.
            candidates = [
                c for c in candidates if successor in board.occupied_neighbor_values(c)
            ]
        return self._try_candidates(next_value, candidates)


@register_solver
class PathfindingSolver(Solver):
    """Steer the chain towards the nearest higher value already placed."""

    strategy = Strategy.PATHFINDING
    name = "Pathfinding"
    description = "Solve through pathfinding."

    def __init__(self, board: Board, counter: Optional[StepCounter] = None) -> None:
        super().__init__(board, counter)
        self._fallback = DFSSolver(board, self.counter)

    def _target_for(self, value: int) -> Optional[int]:
        for placed in self.board.placed_values():
            if placed > value:
                return placed
        return None

    def solve(self, next_value: int) -> bool:
        target_value = self._target_for(next_value)
        if target_value is None:
            logger.debug("No placed value above %d, going DFS", next_value)
            return self._fallback.solve(next_value)

        self.counter.increment()
        board = self.board
        parent = self._parent_of(next_value)
        target = board.position_of(target_value)
        assert target is not None
        budget = target_value - next_value

        candidates = [
            c
            for c in sorted_by_distance(board.empty_neighbors(parent), target)
            if hex_distance_cube(c, target) <= budget
        ]
        return self._try_candidates(next_value, candidates)


def create_solver(
    strategy: Strategy | str,
    board: Board,
    counter: Optional[StepCounter] = None,
) -> Solver:
    """
    Create a solver for ``strategy`` bound to ``board``.

    Raises:
        ValueError: If the strategy is unknown
    """
    if isinstance(strategy, Strategy):
        key = strategy
    else:
        try:
            key = Strategy(str(strategy).lower())
        except ValueError:
            available = ", ".join(s.value for s in _SOLVERS)
            raise ValueError(
                f"Unknown strategy: {strategy}. Available: {available}"
            ) from None
    return _SOLVERS[key](board, counter)


def solver_names() -> List[str]:
    return [cls.name for cls in _SOLVERS.values()]


__all__ = [
    "DFSSolver",
    "PathfindingSolver",
    "Solver",
    "StepCounter",
    "Strategy",
    "create_solver",
    "register_solver",
    "solver_names",
]
