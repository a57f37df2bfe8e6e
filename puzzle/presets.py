"""Built-in puzzles available from the command line."""

from __future__ import annotations

from .config import PuzzleConfig

# The radius-4 puzzle the solver was first written for.
INTEL_PUZZLE = PuzzleConfig.from_mapping(
    4,
    {
        (-2, 1, 1): 1,
        (-3, 2, 1): 2,
        (-1, 2, -1): 5,
        (-1, 3, -2): 7,
        (-4, 1, 3): 16,
        (-3, 0, 3): 17,
        (-1, -1, 2): 20,
        (-1, 1, 0): 23,
        (0, 2, -2): 26,
        (1, 1, -2): 31,
        (2, 0, -2): 33,
        (3, -1, -2): 39,
        (3, -2, -1): 40,
        (3, -3, 0): 43,
        (1, -4, 3): 46,
        (1, -3, 2): 47,
        (-1, -2, 3): 58,
        (-4, 0, 4): 61,
    },
    name="intel",
    description="Radius 4 puzzle with 18 given values.",
)

RING_PUZZLE = PuzzleConfig.from_mapping(
    1,
    {(0, 0, 0): 1},
    name="ring",
    description="Radius 1 board with 1 in the centre.",
)

# Clues taken from a spiral running around the outer ring and inwards.
SPIRAL_PUZZLE = PuzzleConfig.from_mapping(
    2,
    {
        (1, -2, 1): 3,
        (2, 0, -2): 6,
        (-1, 2, -1): 9,
        (-2, 0, 2): 12,
        (1, -1, 0): 15,
        (0, 0, 0): 19,
    },
    name="spiral",
    description="Radius 2 board without a fixed starting cell.",
)

PRESETS: dict[str, PuzzleConfig] = {
    preset.name: preset for preset in (INTEL_PUZZLE, RING_PUZZLE, SPIRAL_PUZZLE)
}

DEFAULT_PRESET = INTEL_PUZZLE.name

__all__ = ["DEFAULT_PRESET", "INTEL_PUZZLE", "PRESETS", "RING_PUZZLE", "SPIRAL_PUZZLE"]
