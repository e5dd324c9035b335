"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging and derived game status.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List, Optional, Tuple

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


class InvalidConfigurationError(ValueError):
    """Raised when board dimensions or mine count are out of range."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols
        if self.mine_count > max_mines:
            raise InvalidConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class BoardStats:
    """
    Snapshot of derived game status.

    The win rule only compares counts: a board is won when the number of
    flags equals the number of mines and every unflagged cell is revealed.
    Flag positions are not checked against actual mines.
    """

    revealed_count: int
    flagged_count: int
    is_lost: bool
    is_win: bool

    @property
    def is_playing(self) -> bool:
        return not self.is_win and not self.is_lost


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, places mines, reveals and flags cells, and
    derives win/lose status from the grid on demand.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid and place mines after dataclass creation."""
        self.setup_board()

    @classmethod
    def from_dimensions(
        cls,
        rows: int,
        cols: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board from raw dimensions."""
        return cls(BoardConfig(rows, cols, mine_count), rng or random.Random())

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def setup_board(self) -> None:
        """
        Generate a new game: fresh grid, new mine layout, new counts.

        The grid is replaced rather than cleared, so nothing from the
        previous layout carries over.
        """
        self._init_grid()
        self._place_mines()
        self._calculate_adjacent_mines()
        logger.debug(
            "Set up %dx%d board with %d mines",
            self.rows, self.cols, self.mine_count,
        )

    def reset_board(self) -> None:
        """Hide and unflag every cell, keeping the current mine layout."""
        for row in self._grid:
            for cell in row:
                cell.reset()

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    def _place_mines(self) -> None:
        """
        Place mines by drawing without replacement from all flat indices.

        Each draw picks uniformly among the cells still free, so every
        layout of mine_count mines is equally likely.
        """
        indices = list(range(self.config.total_cells))
        for _ in range(self.mine_count):
            index = indices.pop(self.rng.randrange(len(indices)))
            row, col = divmod(index, self.cols)
            self._grid[row][col].mark_mine()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].value = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

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
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, cell: Cell) -> None:
        """
        Reveal a cell, flooding outward from cells with no adjacent mines.

        Args:
            cell: Cell to reveal, addressed by its position on this board.
        """
        self.reveal(cell.row, cell.col)

    def flag_cell(self, cell: Cell) -> None:
        """
        Toggle the flag on a cell unless it is already revealed.

        Args:
            cell: Cell to flag, addressed by its position on this board.
        """
        self.flag(cell.row, cell.col)

    def reveal(self, row: int, col: int) -> None:
        """
        Reveal the cell at a position; out-of-bounds is a no-op.

        Revealed and flagged cells are skipped. A revealed mine stops the
        cascade at that cell; the loss shows up in stats.
        """
        if not self._is_valid_position(row, col):
            return
        pending = [(row, col)]
        while pending:
            row, col = pending.pop()
            current = self._grid[row][col]
            if not current.reveal():
                continue
            if current.is_mine:
                continue
            if current.value == 0:
                pending.extend(self._get_neighbors(row, col))

    def flag(self, row: int, col: int) -> None:
        """Toggle the flag at a position; out-of-bounds is a no-op."""
        if self._is_valid_position(row, col):
            self._grid[row][col].toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def stats(self) -> BoardStats:
        """Scan the grid and derive the current game status."""
        revealed = 0
        flagged = 0
        is_lost = False
        for row in self._grid:
            for cell in row:
                if cell.is_revealed:
                    revealed += 1
                    if cell.is_mine:
                        is_lost = True
                elif cell.is_flagged:
                    flagged += 1

        is_win = (
            flagged == self.mine_count
            and revealed + flagged == self.config.total_cells
        )
        return BoardStats(
            revealed_count=revealed,
            flagged_count=flagged,
            is_lost=is_lost,
            is_win=is_win,
        )

    @property
    def game_state(self) -> GameState:
        """Get current game state; a win takes precedence over a loss."""
        stats = self.stats
        if stats.is_win:
            return GameState.WON
        if stats.is_lost:
            return GameState.LOST
        return GameState.PLAYING

    @property
    def mines_remaining(self) -> int:
        """Mines not yet accounted for by a flag (may go negative)."""
        return self.mine_count - self.stats.flagged_count

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        """
        Snapshot of the grid, indexed [row][col].

        The cells are copies: changing them does not touch the board, and
        they do not follow later moves. Pass them back to reveal_cell or
        flag_cell to act on the board at their position.
        """
        return tuple(
            tuple(replace(cell) for cell in row) for row in self._grid
        )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get a copy of the cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return replace(self._grid[row][col])

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a read-only numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        obs.flags.writeable = False
        return obs
