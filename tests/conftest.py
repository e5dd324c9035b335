"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Iterable, Tuple

# Add src to path for imports, and the project root for main.py
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(1, str(ROOT))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Deterministic Mine Layouts
# ============================================================================

class ScriptedRandom(random.Random):
    """
    Random source that places mines at chosen positions.

    Replays the draws the board's mine placement would need to hit the
    given cells, then falls back to ordinary seeded randomness.
    """

    def __init__(
        self,
        mines: Iterable[Tuple[int, int]],
        rows: int,
        cols: int,
    ) -> None:
        super().__init__(0)
        remaining = list(range(rows * cols))
        self._draws = []
        for row, col in mines:
            position = remaining.index(row * cols + col)
            remaining.pop(position)
            self._draws.append(position)

    def randrange(self, *args, **kwargs):
        if self._draws:
            return self._draws.pop(0)
        return super().randrange(*args, **kwargs)


def make_board(rows: int, cols: int, mines: Iterable[Tuple[int, int]]) -> Board:
    """Build a board with mines exactly at the given positions."""
    mines = list(mines)
    return Board(
        BoardConfig(rows, cols, len(mines)),
        ScriptedRandom(mines, rows, cols),
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 mines."""
    return Board(rng=random.Random(1234))


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return make_board(3, 3, [(2, 2)])


@pytest.fixture
def two_by_two_board() -> Board:
    """2x2 board with a mine in the top-left corner."""
    return make_board(2, 2, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def split_board() -> Board:
    """
    5x5 board split by a column of mines.

        . . M . .
        . . M . .
        . . M . .
        . . M . .
        . . M . .
    """
    return make_board(5, 5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell(0, 0)
    cell.mark_mine()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 8, 10)


@pytest.fixture
def board_factory():
    """Factory building boards with mines at chosen positions."""
    return make_board
