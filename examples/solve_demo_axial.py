from hexchain import Board, Strategy, solve
from hexchain.hexpath import Axial, axial_to_cube

from puzzle.render import format_grid

radius = 2
# Clues given in axial coordinates for readability.
clues = {
    Axial(1, 1): 3,
    Axial(2, -2): 6,
    Axial(-1, -1): 9,
    Axial(-2, 2): 12,
    Axial(1, 0): 15,
    Axial(0, 0): 19,
}


if __name__ == "__main__":
    board = Board(radius, {axial_to_cube(a): value for a, value in clues.items()})
    print(format_grid(board))
    print()
    result = solve(board, Strategy.PATHFINDING)
    print("solved:", result.solved, "steps:", result.steps)
    print(format_grid(board))
