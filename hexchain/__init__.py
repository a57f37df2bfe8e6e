"""Hex chain puzzle solving library."""

from .board import (
    EMPTY,
    Board,
    DuplicateValue,
    InvalidRadius,
    InvariantViolation,
    OffBoardCoordinate,
    OutOfRangeValue,
    PuzzleConfigurationError,
)
from .hexpath import Axial, Cube, InvalidCoordinate
from .orchestrator import PuzzleSolver, SolveResult, SolveState, solve
from .solvers import DFSSolver, PathfindingSolver, Solver, StepCounter, Strategy

__all__ = [
    "EMPTY",
    "Axial",
    "Board",
    "Cube",
    "DFSSolver",
    "DuplicateValue",
    "InvalidCoordinate",
    "InvalidRadius",
    "InvariantViolation",
    "OffBoardCoordinate",
    "OutOfRangeValue",
    "PathfindingSolver",
    "PuzzleConfigurationError",
    "PuzzleSolver",
    "SolveResult",
    "SolveState",
    "Solver",
    "StepCounter",
    "Strategy",
    "solve",
]
