"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle."""
    board = Board(BoardConfig(3, 3, 1))
    board.new_game(mine_positions=[(1, 1)])
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Layout (adjacent counts, M = mine):
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 M
    """
    board = Board(BoardConfig(5, 5, 1))
    board.new_game(mine_positions=[(4, 4)])
    return board


@pytest.fixture
def split_board() -> Board:
    """
    4x5 board with a wall of mines splitting it into two regions.

    Layout (adjacent counts, M = mine):
        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
    """
    board = Board(BoardConfig(4, 5, 4))
    board.new_game(mine_positions=[(0, 2), (1, 2), (2, 2), (3, 2)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
