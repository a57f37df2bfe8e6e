"""Drive a search strategy from the initial puzzle state to a verdict."""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .board import EMPTY, Board
from .hexpath import Cube, hex_distance_cube, neighbors_cube, sorted_by_distance
from .solvers import Solver, StepCounter, Strategy, create_solver

logger = logging.getLogger(__name__)


class SolveState(str, Enum):
    """Lifecycle of a solve attempt."""

    UNSOLVED = "unsolved"
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solve attempt."""

    solved: bool
    steps: int
    final_board: Dict[Cube, int] = field(repr=False)
    strategy: Strategy
    state: SolveState
    elapsed: float = 0.0


def coordinates_within(board: Board, root: Cube, distance: int) -> List[Cube]:
    """Return the board cells at most ``distance`` away from ``root``.

    ``root`` itself is excluded.  Cells at exactly ``distance`` are collected
    but not expanded further.
    """

    result: List[Cube] = []
    seen = {root}
    frontier = deque([root])
    while frontier:
        current = frontier.popleft()
        if hex_distance_cube(current, root) >= distance:
            continue
        for neighbor in neighbors_cube(current):
            if neighbor in seen or neighbor not in board:
                continue
            seen.add(neighbor)
            result.append(neighbor)
            frontier.append(neighbor)
    return result


def _start_candidates(board: Board) -> List[Cube]:
    lowest = board.lowest_placed()
    if lowest is None:
        # Nothing fixed: 1 may start anywhere.
        return [coord for coord, _ in board.ordered_cells()]
    target = board.position_of(lowest)
    assert target is not None
    logger.debug("Lowest placed value is: %d", lowest)
    candidates = coordinates_within(board, target, lowest - 1)
    return sorted_by_distance(candidates, target)


def initialize_solution(board: Board, solver: Solver) -> bool:
    """Seed value 1 if needed and run ``solver`` to completion.

    Returns False when no placement of 1 leads to a solution.  On False the
    board is restored to its initial state.
    """

    first = board.next_remaining()
    if first is None:
        return board.is_complete()
    if first != 1:
        return solver.solve(first)

    candidates = _start_candidates(board)
    logger.debug("Candidates for starting position: %s", [str(c) for c in candidates])
    for candidate in candidates:
        if board.value_at(candidate) != EMPTY:
            continue
        logger.debug("Placing 1 at %s", candidate)
        board.place(candidate, 1)
        following = board.next_remaining()
        if following is None:
            if board.is_complete():
                return True
        elif solver.solve(following):
            return True
        logger.debug("Could not place 1 at %s", candidate)
        board.remove(candidate)
    logger.debug("Could not solve from any starting position.")
    return False


class PuzzleSolver:
    """Run one strategy over a board and track the solve state."""

    def __init__(self, board: Board, strategy: Strategy | str = Strategy.PATHFINDING) -> None:
        self.board = board
        self.counter = StepCounter()
        self.solver = create_solver(strategy, board, self.counter)
        self.state = SolveState.UNSOLVED

    @property
    def strategy(self) -> Strategy:
        return self.solver.strategy

    def run(self) -> SolveResult:
        if self.state is not SolveState.UNSOLVED:
            raise RuntimeError(f"solve already ran (state: {self.state.value})")
        logger.info("Attempting to solve with %s", self.solver.name)
        self.state = SolveState.SEARCHING
        self.counter.reset()
        started = time.perf_counter()
        solved = initialize_solution(self.board, self.solver)
        elapsed = time.perf_counter() - started
        self.state = SolveState.SOLVED if solved else SolveState.EXHAUSTED
        logger.info(
            "%s search %s after %d steps", self.solver.name, self.state.value, self.counter.steps
        )
        return SolveResult(
            solved=solved,
            steps=self.counter.steps,
            final_board=self.board.snapshot(),
            strategy=self.strategy,
            state=self.state,
            elapsed=elapsed,
        )


def solve(board: Board, strategy: Strategy | str = Strategy.PATHFINDING) -> SolveResult:
    """Solve ``board`` in place with ``strategy``."""

    return PuzzleSolver(board, strategy).run()


__all__ = [
    "PuzzleSolver",
    "SolveResult",
    "SolveState",
    "coordinates_within",
    "initialize_solution",
    "solve",
]
