"""
Text rendering for Minesweeper boards.

Mirrors board state for a terminal: every function only reads the
board's queries, so a caller can re-render after each command.
"""
from typing import List

from .board import Board


# ============================================================================
# Glyphs
# ============================================================================

FLAG = "F"
MINE = "M"
HIDDEN_MINE = "*"
HIDDEN = "."


def cell_glyph(board: Board, row: int, col: int) -> str:
    """
    Text for a single cell.

    Flags win over everything else. Revealed cells show "M" for a mine
    or their adjacent count. Once the game is lost, mines that were never
    uncovered show as "*".
    """
    if board.has_flag(row, col):
        return FLAG
    if board.is_revealed(row, col):
        if board.has_mine(row, col):
            return MINE
        return str(board.adjacent(row, col))
    if board.is_lost and board.has_mine(row, col):
        return HIDDEN_MINE
    return HIDDEN


# ============================================================================
# Labels
# ============================================================================

def flags_label(board: Board) -> str:
    return f"{board.flags}/{board.mines} flags"


def completion_label(board: Board) -> str:
    return f"{board.completion}/{board.max_completion} cells"


def status_label(board: Board) -> str:
    """Win/lose message, empty while the game is in progress."""
    if board.is_won:
        return "You have won!"
    if board.is_lost:
        return "You have lost!"
    return ""


# ============================================================================
# Full Board
# ============================================================================

def render_board(board: Board) -> str:
    """
    Render the grid with row/column indices, counters and status.

    Returns:
        Multi-line string ready for printing.
    """
    width = len(str(max(board.rows, board.cols) - 1))
    lines: List[str] = []

    header = " " * width + " " + " ".join(
        f"{col:>{width}}" for col in range(board.cols)
    )
    lines.append(header)

    for row in range(board.rows):
        cells = " ".join(
            f"{cell_glyph(board, row, col):>{width}}"
            for col in range(board.cols)
        )
        lines.append(f"{row:>{width}} {cells}")

    lines.append(f"{flags_label(board)}  {completion_label(board)}")
    status = status_label(board)
    if status:
        lines.append(status)
    return "\n".join(lines)
