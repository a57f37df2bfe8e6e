"""Text rendering of boards and solve results."""

from __future__ import annotations

from collections.abc import Iterator

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hexchain import EMPTY, Board, Cube, SolveResult

SEPARATOR = "  "


def _cell_width(board: Board) -> int:
    # Even widths keep every row offset by exactly half a cell.
    width = max(2, len(str(board.cell_count)))
    return width + (width % 2)


def _rows(board: Board) -> Iterator[tuple[int, list[tuple[Cube, int]]]]:
    row: list[tuple[Cube, int]] = []
    current_z: int | None = None
    for coord, value in board.ordered_cells():
        if current_z is not None and coord.z != current_z:
            yield current_z, row
            row = []
        current_z = coord.z
        row.append((coord, value))
    if current_z is not None:
        yield current_z, row


def _format_value(value: int, width: int, empty_symbol: str) -> str:
    if value == EMPTY:
        return empty_symbol.rjust(width)
    return str(value).rjust(width)


def format_grid(board: Board, *, empty_symbol: str = "0") -> str:
    """Return the board as plain text, one line per row of hexes."""

    width = _cell_width(board)
    half_cell = " " * ((width + len(SEPARATOR)) // 2)
    lines = []
    for z, row in _rows(board):
        cells = SEPARATOR.join(_format_value(v, width, empty_symbol) for _, v in row)
        lines.append(half_cell * abs(z) + cells)
    return "\n".join(lines)


def board_text(board: Board, *, empty_symbol: str = ".") -> Text:
    """Styled variant of :func:`format_grid` for rich consoles."""

    width = _cell_width(board)
    half_cell = " " * ((width + len(SEPARATOR)) // 2)
    text = Text()
    for index, (z, row) in enumerate(_rows(board)):
        if index:
            text.append("\n")
        text.append(half_cell * abs(z))
        for position, (coord, value) in enumerate(row):
            if position:
                text.append(SEPARATOR)
            if coord in board.fixed:
                style = "bold cyan"
            elif value == EMPTY:
                style = "dim"
            else:
                style = "green"
            text.append(_format_value(value, width, empty_symbol), style=style)
    return text


def render_board(board: Board, title: str = "Board") -> RenderableType:
    return Panel(board_text(board), title=title, border_style="cyan", expand=False)


def outcome_message(result: SolveResult) -> str:
    if result.solved:
        return f"Puzzle solved successfully with {result.steps} recursive calls."
    return (
        f"Could not find solution within {result.steps} steps. "
        "Solution does not exist?"
    )


def render_result(result: SolveResult) -> RenderableType:
    table = Table(title="Solve summary", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Strategy", result.strategy.value)
    table.add_row("State", result.state.value)
    table.add_row("Steps", str(result.steps))
    table.add_row("Elapsed", f"{result.elapsed:.3f}s")
    return table


__all__ = [
    "board_text",
    "format_grid",
    "outcome_message",
    "render_board",
    "render_result",
]
