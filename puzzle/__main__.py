"""Command line entry point for solving hex chain puzzles.

Example:
    python -m puzzle
    python -m puzzle --preset spiral --strategy dfs
    python -m puzzle --puzzle my_puzzle.json --debug-log
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from hexchain import PuzzleConfigurationError, Strategy, solve

from .config import PuzzleConfig, load_puzzle_config
from .logs import configure_logging, default_log_path
from .presets import DEFAULT_PRESET, PRESETS
from .render import outcome_message, render_board, render_result

logger = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_EXHAUSTED = 1
EXIT_BAD_INPUT = 2

MENU: dict[int, Strategy] = {
    1: Strategy.DFS,
    2: Strategy.PATHFINDING,
}
MENU_LABELS: dict[Strategy, str] = {
    Strategy.DFS: "Solve using a simple DFS algorithm.",
    Strategy.PATHFINDING: "Solve through pathfinding.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexchain",
        description="Fill a hexagonal grid so that consecutive numbers are adjacent.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--puzzle", type=Path, help="JSON puzzle definition to solve")
    source.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET,
        help=f"built-in puzzle to solve (default: {DEFAULT_PRESET})",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        help="search strategy; asks interactively when omitted",
    )
    parser.add_argument(
        "--debug-log",
        nargs="?",
        type=Path,
        const=default_log_path(),
        default=None,
        metavar="PATH",
        help="write the full search trace to PATH (default: per-user log dir)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="show more log output (repeat for debug)",
    )
    return parser


def choose_strategy(console: Console) -> Strategy:
    """Ask for a strategy until a listed option is picked."""

    while True:
        console.print("What would you like to do?")
        for number, strategy in MENU.items():
            console.print(f"{number}) {MENU_LABELS[strategy]}")
        selection = IntPrompt.ask("Selection", console=console)
        if selection in MENU:
            return MENU[selection]
        console.print("That is not a valid option.\n")


def _load_config(args: argparse.Namespace) -> PuzzleConfig:
    if args.puzzle is not None:
        return load_puzzle_config(args.puzzle)
    return PRESETS[args.preset]


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Solve one puzzle and return the process exit status."""

    args = build_parser().parse_args(argv)
    console = console or Console()
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    log_path = configure_logging(level, debug_log=args.debug_log)
    if log_path is not None:
        console.print(f"Writing search trace to {log_path}")

    try:
        config = _load_config(args)
        board = config.build_board()
    except (OSError, json.JSONDecodeError) as exc:
        console.print(f"[red]Could not read puzzle:[/red] {escape(str(exc))}")
        return EXIT_BAD_INPUT
    except (ValidationError, PuzzleConfigurationError) as exc:
        console.print(f"[red]Invalid puzzle:[/red] {escape(str(exc))}")
        return EXIT_BAD_INPUT

    if args.strategy is not None:
        strategy = Strategy(args.strategy)
    elif config.strategy is not None:
        strategy = config.strategy
    else:
        strategy = choose_strategy(console)

    console.print(render_board(board, title="Initial state"))
    logger.info("Solving %r with %s", config.name, strategy.value)
    result = solve(board, strategy)
    console.print(outcome_message(result))
    console.print(render_board(board, title="Solution" if result.solved else "Final state"))
    console.print(render_result(result))
    return EXIT_SOLVED if result.solved else EXIT_EXHAUSTED


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
