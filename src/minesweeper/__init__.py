"""
Minesweeper game module.

Provides the board engine (cells, mine placement, reveal and flag rules,
derived game status) and difficulty presets.
"""
from .cell import Cell, CellState, MINE
from .board import (
    Board,
    BoardConfig,
    BoardStats,
    GameState,
    InvalidConfigurationError,
)
from .config import DEFAULT, DIFFICULTY_PRESETS, EASY, HARD, MEDIUM, resolve_config

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "Board",
    "BoardConfig",
    "BoardStats",
    "GameState",
    "InvalidConfigurationError",
    "DEFAULT",
    "DIFFICULTY_PRESETS",
    "EASY",
    "MEDIUM",
    "HARD",
    "resolve_config",
]
