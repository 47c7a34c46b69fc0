"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they hold a mine,
carry a flag, have been revealed, and how many mines surround them.
"""
from dataclasses import dataclass


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN_OBS = -1
FLAGGED_OBS = -2
MINE_OBS = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    The flag and revealed bits are independent. The board never reveals
    a flagged cell nor flags a revealed one.

    Attributes:
        has_mine: Whether this cell contains a mine.
        has_flag: Whether the player has flagged this cell.
        revealed: Whether this cell has been uncovered.
        adjacent: Count of mines in neighboring cells (0-8).
    """

    has_mine: bool = False
    has_flag: bool = False
    revealed: bool = False
    adjacent: int = 0

    def mine(self) -> None:
        """Place a mine in this cell."""
        self.has_mine = True

    def flag(self) -> None:
        self.has_flag = True

    def unflag(self) -> None:
        self.has_flag = False

    def reveal(self) -> None:
        self.revealed = True

    def set_adjacent(self, adjacent: int) -> None:
        self.adjacent = adjacent

    def increment_adjacent(self) -> None:
        self.adjacent += 1

    @property
    def blank(self) -> bool:
        """Check if cell is neither flagged nor revealed."""
        return not self.has_flag and not self.revealed

    @property
    def no_adjacent_mines(self) -> bool:
        """Check if no neighbor holds a mine."""
        return self.adjacent == 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.has_flag:
            return FLAGGED_OBS
        if not self.revealed:
            return HIDDEN_OBS
        if self.has_mine:
            return MINE_OBS
        return self.adjacent

    def __str__(self) -> str:
        """Text form: "F" if flagged, "M" if mined, else the adjacent count."""
        if self.has_flag:
            return "F"
        if self.has_mine:
            return "M"
        return str(self.adjacent)
