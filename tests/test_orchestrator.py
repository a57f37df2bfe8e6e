"""End-to-end tests for bootstrapping and running a solve."""

from __future__ import annotations

import pytest

from hexchain import Board, Cube, PuzzleSolver, SolveState, Strategy, solve
from hexchain.hexpath import ORIGIN, hex_distance_cube
from hexchain.orchestrator import coordinates_within, initialize_solution
from hexchain.solvers import DFSSolver

STRATEGIES = [Strategy.DFS, Strategy.PATHFINDING]

SPIRAL_CLUES = {
    Cube(1, -2, 1): 3,
    Cube(2, 0, -2): 6,
    Cube(-1, 2, -1): 9,
    Cube(-2, 0, 2): 12,
    Cube(1, -1, 0): 15,
    Cube(0, 0, 0): 19,
}


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_ring_with_fixed_centre_is_solved(strategy: Strategy) -> None:
    board = Board(1, {ORIGIN: 1})
    result = solve(board, strategy)

    assert result.solved is True
    assert result.state is SolveState.SOLVED
    assert result.strategy is strategy
    assert result.steps == 6
    assert sorted(result.final_board.values()) == list(range(1, 8))
    assert all(value != 0 for value in result.final_board.values())
    assert board.is_complete()


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_spiral_without_fixed_start_is_solved(strategy: Strategy) -> None:
    board = Board(2, SPIRAL_CLUES)
    result = solve(board, strategy)

    assert result.solved is True
    assert board.is_complete()
    one = board.position_of(1)
    assert one is not None
    assert hex_distance_cube(one, Cube(1, -2, 1)) <= 2
    for coord, value in SPIRAL_CLUES.items():
        assert result.final_board[coord] == value


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_unsatisfiable_puzzle_is_exhausted(strategy: Strategy) -> None:
    # 2 and 3 face each other across the centre and can never be adjacent.
    placements = {Cube(1, -1, 0): 2, Cube(-1, 1, 0): 3}
    board = Board(1, placements)
    before = board.snapshot()

    result = solve(board, strategy)

    assert result.solved is False
    assert result.state is SolveState.EXHAUSTED
    assert result.steps > 0
    assert board.snapshot() == before
    assert board.remaining == frozenset({1, 4, 5, 6, 7})


def test_single_cell_board() -> None:
    result = solve(Board(0), Strategy.DFS)
    assert result.solved is True
    assert result.final_board == {ORIGIN: 1}
    assert result.steps == 0


def test_empty_board_places_one_anywhere() -> None:
    board = Board(1)
    result = solve(board, Strategy.DFS)
    assert result.solved is True
    assert board.is_complete()


def test_prefilled_boards_are_only_checked() -> None:
    chain = {
        Cube(0, 0, 0): 1,
        Cube(1, -1, 0): 2,
        Cube(1, 0, -1): 3,
        Cube(0, 1, -1): 4,
        Cube(-1, 1, 0): 5,
        Cube(-1, 0, 1): 6,
        Cube(0, -1, 1): 7,
    }
    assert solve(Board(1, chain)).solved is True

    chain[Cube(1, 0, -1)], chain[Cube(-1, 1, 0)] = 5, 3
    result = solve(Board(1, chain))
    assert result.solved is False
    assert result.steps == 0


def test_initialize_solution_places_one_near_lowest_value() -> None:
    board = Board(2, SPIRAL_CLUES)
    assert initialize_solution(board, DFSSolver(board)) is True
    one = board.position_of(1)
    assert one is not None
    assert hex_distance_cube(one, Cube(1, -2, 1)) <= 2


@pytest.mark.parametrize(
    ("root", "distance", "expected"),
    [
        (ORIGIN, 1, 6),
        (ORIGIN, 2, 18),
        (Cube(2, -2, 0), 1, 3),
        (Cube(2, -2, 0), 2, 8),
    ],
)
def test_coordinates_within(root: Cube, distance: int, expected: int) -> None:
    board = Board(2)
    found = coordinates_within(board, root, distance)
    assert len(found) == expected
    assert len(set(found)) == expected
    assert root not in found
    assert all(0 < hex_distance_cube(root, coord) <= distance for coord in found)
    assert all(coord in board for coord in found)


def test_puzzle_solver_tracks_state() -> None:
    puzzle = PuzzleSolver(Board(1, {ORIGIN: 1}), "dfs")
    assert puzzle.state is SolveState.UNSOLVED
    assert puzzle.strategy is Strategy.DFS

    result = puzzle.run()
    assert puzzle.state is SolveState.SOLVED
    assert result.state is SolveState.SOLVED

    with pytest.raises(RuntimeError):
        puzzle.run()
