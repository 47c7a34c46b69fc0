"""
Minesweeper game module.

Provides the board simulation (cells, mine placement, cascading reveal,
flags, win/lose state) plus text rendering and a Gymnasium wrapper.
"""
from .cell import Cell
from .board import Board, BoardConfig, GameState, OutOfRangeError
from .render import (
    cell_glyph,
    completion_label,
    flags_label,
    render_board,
    status_label,
)
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "Board",
    "BoardConfig",
    "GameState",
    "OutOfRangeError",
    "cell_glyph",
    "completion_label",
    "flags_label",
    "render_board",
    "status_label",
    "MinesweeperEnv",
    "make_vec_env",
]
