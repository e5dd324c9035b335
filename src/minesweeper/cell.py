"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
content (mine or adjacent count) and visual state (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = -1

# Observation codes for read-only board views
HIDDEN_CODE = -1
FLAGGED_CODE = -2
REVEALED_MINE_CODE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index, fixed at creation.
        col: Column index, fixed at creation.
        value: -1 for a mine, otherwise count of neighboring mines (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    row: int
    col: int
    value: int = 0
    state: CellState = CellState.HIDDEN

    @property
    def is_mine(self) -> bool:
        """Check if cell is a mine."""
        return self.value == MINE

    def mark_mine(self) -> None:
        """Turn this cell into a mine, discarding any adjacent count."""
        self.value = MINE

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def reset(self) -> None:
        """Hide the cell again, dropping any flag."""
        self.state = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to the integer code used by read-only board views.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_CODE
        if self.state == CellState.FLAGGED:
            return FLAGGED_CODE
        if self.is_mine:
            return REVEALED_MINE_CODE
        return self.value
