"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
cascading reveal, flag bookkeeping and win/lose determination.
"""
import logging
import operator
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class OutOfRangeError(IndexError):
    """Raised when a cell coordinate falls outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    flags and win/lose conditions. A game is started on construction;
    ``new_game`` resets the same board in place.

    Mine placement draws from ``rng``; when none is given one is built
    from ``seed``.

    Per-cell commands and queries raise ``OutOfRangeError`` for
    coordinates outside the board, and ``TypeError`` for coordinates
    that are not integers.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _flags: int = 0
    _completion: int = 0
    seed: InitVar[Optional[int]] = None

    def __post_init__(self, seed: Optional[int]) -> None:
        """Set up the random source and start the first game."""
        if self.rng is None:
            self.rng = np.random.default_rng(seed)
        self.new_game()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _sample_mine_positions(self) -> List[Tuple[int, int]]:
        """Pick distinct mine positions uniformly at random."""
        indices = self.rng.choice(
            self.config.size, size=self.config.mines, replace=False
        )
        return [divmod(int(index), self.config.cols) for index in indices]

    def _check_mine_positions(
        self, mine_positions: Iterable[Tuple[int, int]]
    ) -> List[Tuple[int, int]]:
        """Validate an explicit mine layout."""
        positions = [(int(row), int(col)) for row, col in mine_positions]
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position ({row}, {col}) is off the board")
        if len(set(positions)) != len(positions):
            raise ValueError("Mine positions must be distinct")
        if len(positions) != self.config.mines:
            raise ValueError(
                f"Expected {self.config.mines} mine positions, "
                f"got {len(positions)}"
            )
        return positions

    def _calculate_adjacent_mines(self, mines: List[Tuple[int, int]]) -> None:
        """Add each mine to the counts of its neighbors."""
        for row, col in mines:
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].increment_adjacent()

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising for coordinates off the board."""
        row, col = operator.index(row), operator.index(col)
        if not self._is_valid_position(row, col):
            raise OutOfRangeError(row, col, self.config.rows, self.config.cols)
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def new_game(
        self, mine_positions: Optional[Iterable[Tuple[int, int]]] = None
    ) -> None:
        """
        Reset the board and place mines for a new game.

        Args:
            mine_positions: Explicit (row, col) mine layout. Must hold
                exactly ``config.mines`` distinct positions. Mines are
                placed at random when omitted.
        """
        if mine_positions is None:
            mines = self._sample_mine_positions()
        else:
            mines = self._check_mine_positions(mine_positions)

        self._init_grid()
        for row, col in mines:
            self._grid[row][col].mine()
        self._calculate_adjacent_mines(mines)

        self._game_state = GameState.PLAYING
        self._flags = 0
        self._completion = 0
        logger.debug(
            "New %dx%d game with %d mines",
            self.config.rows, self.config.cols, self.config.mines,
        )

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        If cell is empty (0 adjacent mines), blank neighbors are revealed
        transitively. Flagged cells are never revealed, neither directly
        nor by the cascade. If cell is a mine, game is lost.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if reveal changed the board, False otherwise.
        """
        cell = self._cell(row, col)
        if self._game_state != GameState.PLAYING or not cell.blank:
            return False

        self._reveal_cell(cell)

        if cell.has_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine hit at (%d, %d): game lost", row, col)
            return True

        if cell.no_adjacent_mines:
            self._reveal_neighbors(row, col)

        self._check_win_condition()
        return True

    def _reveal_cell(self, cell: Cell) -> None:
        cell.reveal()
        self._completion += 1

    def _reveal_neighbors(self, row: int, col: int) -> None:
        """Flood-fill outward from an empty cell using a work queue."""
        pending = deque([(row, col)])
        cascaded = 0
        while pending:
            center_row, center_col = pending.popleft()
            for neighbor_row, neighbor_col in self._get_neighbors(
                center_row, center_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.blank:
                    continue
                # Revealed before queueing, so each cell is visited once.
                self._reveal_cell(neighbor)
                cascaded += 1
                if neighbor.no_adjacent_mines:
                    pending.append((neighbor_row, neighbor_col))
        logger.debug("Cascade from (%d, %d) revealed %d cells", row, col, cascaded)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._completion >= self.max_completion:
            self._game_state = GameState.WON
            logger.debug("All %d safe cells revealed: game won", self.max_completion)

    def flag(self, row: int, col: int) -> bool:
        """
        Place a flag on an unrevealed cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if a flag was placed, False otherwise.
        """
        cell = self._cell(row, col)
        if self._game_state != GameState.PLAYING or not cell.blank:
            return False
        cell.flag()
        self._flags += 1
        return True

    def unflag(self, row: int, col: int) -> bool:
        """
        Remove the flag from a cell.

        Returns:
            True if a flag was removed, False otherwise.
        """
        cell = self._cell(row, col)
        if self._game_state != GameState.PLAYING or not cell.has_flag:
            return False
        cell.unflag()
        self._flags -= 1
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """Flag the cell, or unflag it if it already carries a flag."""
        if self.has_flag(row, col):
            return self.unflag(row, col)
        return self.flag(row, col)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mines(self) -> int:
        """Total number of mines on the board."""
        return self.config.mines

    @property
    def flags(self) -> int:
        """Number of currently flagged cells."""
        return self._flags

    @property
    def completion(self) -> int:
        """Number of revealed cells."""
        return self._completion

    @property
    def max_completion(self) -> int:
        """Completion value that wins the game."""
        return self.config.size - self.config.mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def has_mine(self, row: int, col: int) -> bool:
        return self._cell(row, col).has_mine

    def has_flag(self, row: int, col: int) -> bool:
        return self._cell(row, col).has_flag

    def is_revealed(self, row: int, col: int) -> bool:
        return self._cell(row, col).revealed

    def adjacent(self, row: int, col: int) -> int:
        """Number of mines around the cell."""
        return self._cell(row, col).adjacent

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        return self._cell(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are neither flagged
            nor revealed.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].blank:
                    actions.append((row, col))
        return actions

    def __str__(self) -> str:
        """Full layout dump, one line per row."""
        return "\n".join(
            " ".join(str(cell) for cell in row) for row in self._grid
        )
