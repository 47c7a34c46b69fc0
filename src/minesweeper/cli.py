"""
Command-line front end for Minesweeper.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py show [--rows R] [--cols C] [--mines M] [--seed S] [--at ROW COL]
"""
import argparse
import logging
from typing import Callable, Optional, Sequence, Tuple

from .board import Board, BoardConfig, OutOfRangeError
from .render import render_board

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands:\n"
    "  r ROW COL   reveal a cell\n"
    "  f ROW COL   flag or unflag a cell\n"
    "  n           start a new game\n"
    "  h           show this help\n"
    "  q           quit"
)


# ============================================================================
# Command Parsing
# ============================================================================

def parse_command(line: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Split a player command into its verb and optional coordinates.

    Raises:
        ValueError: If the verb is unknown or coordinates are malformed.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")

    verb = parts[0].lower()
    if verb in ("n", "q", "h"):
        if len(parts) != 1:
            raise ValueError(f"'{verb}' takes no arguments")
        return verb, None
    if verb in ("r", "f"):
        if len(parts) != 3:
            raise ValueError(f"'{verb}' needs ROW and COL")
        return verb, (int(parts[1]), int(parts[2]))
    raise ValueError(f"Unknown command: {parts[0]}")


# ============================================================================
# Interactive Loop
# ============================================================================

def play(board: Board, read: Callable[[str], str] = input) -> None:
    """
    Run the interactive loop until the player quits or input ends.

    The board is re-rendered after every command.
    """
    print(render_board(board))
    print(HELP_TEXT)

    while True:
        try:
            line = read("> ")
        except EOFError:
            break

        try:
            verb, position = parse_command(line)
        except ValueError as exc:
            print(f"Error: {exc}")
            continue

        if verb == "q":
            break
        if verb == "h":
            print(HELP_TEXT)
            continue

        try:
            apply_command(board, verb, position)
        except OutOfRangeError as exc:
            print(f"Error: {exc}")
            continue

        print(render_board(board))


def apply_command(
    board: Board, verb: str, position: Optional[Tuple[int, int]]
) -> None:
    """Forward a parsed command to the board."""
    if verb == "n":
        board.new_game()
    elif verb == "r":
        board.reveal(*position)
    elif verb == "f":
        board.toggle_flag(*position)
    logger.debug("Applied %s %s", verb, position)


# ============================================================================
# Entry Point
# ============================================================================

def build_board(args: argparse.Namespace) -> Board:
    """Create a board from parsed command-line arguments."""
    config = BoardConfig(rows=args.rows, cols=args.cols, mines=args.mines)
    return Board(config, seed=args.seed)


def show(args: argparse.Namespace) -> None:
    """Start a game, optionally reveal one cell, and print the board."""
    board = build_board(args)
    if args.at is not None:
        board.reveal(*args.at)
    print(render_board(board))


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    _add_board_arguments(play_parser)

    show_parser = subparsers.add_parser("show", help="Print a board")
    _add_board_arguments(show_parser)
    show_parser.add_argument(
        "--at",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Cell to reveal before printing",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "play":
            play(build_board(args))
        elif args.command == "show":
            show(args)
    except (ValueError, OutOfRangeError) as exc:
        print(f"Error: {exc}")
        return 1
    return 0
