#!/usr/bin/env python3
"""
Minesweeper - terminal game entry point.

Usage:
    python main.py [--level {easy,medium,hard}] [--seed N]
    python main.py --rows R --cols C --mines M
    LEVEL=hard python main.py

Controls:
    w/a/s/d or arrows   move cursor
    r or Return         reveal
    f or Space          flag
    Ctrl-N              new game
    Ctrl-R              replay the same board
    Ctrl-C              quit
"""
import argparse
import logging
import random
from typing import List, Optional

from src.minesweeper import (
    Board,
    DIFFICULTY_PRESETS,
    InvalidConfigurationError,
    resolve_config,
)
from src.minesweeper.terminal import ConsoleSession

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--level",
        choices=sorted(DIFFICULTY_PRESETS),
        default=None,
        help="Difficulty preset (default: $LEVEL, then easy)",
    )
    parser.add_argument("--rows", type=int, help="Custom number of rows")
    parser.add_argument("--cols", type=int, help="Custom number of columns")
    parser.add_argument("--mines", type=int, help="Custom number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for a reproducible layout"
    )
    parser.add_argument(
        "--log-file", default=None, help="Write log records to this file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level when --log-file is set",
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Log to a file if asked; the terminal itself belongs to the game."""
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.getLogger("src.minesweeper").addHandler(logging.NullHandler())


def build_board(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> Board:
    """Create the board from arguments and environment."""
    rng = random.Random(args.seed)
    custom = (args.rows, args.cols, args.mines)
    if all(value is None for value in custom):
        return Board(resolve_config(args.level), rng)
    if any(value is None for value in custom):
        parser.error("--rows, --cols and --mines must be given together")
    try:
        return Board.from_dimensions(args.rows, args.cols, args.mines, rng)
    except InvalidConfigurationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run a game session."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    ConsoleSession(build_board(args, parser)).run()


if __name__ == "__main__":
    main()
