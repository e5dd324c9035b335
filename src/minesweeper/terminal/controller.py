"""
Session controller for a terminal Minesweeper game.

Owns the cursor, maps decoded key presses onto board operations and
tells the caller when the screen needs redrawing.
"""
import logging
from enum import Enum, auto
from typing import Dict, Optional

from ..board import Board
from .keys import KeyPress

logger = logging.getLogger(__name__)


# ============================================================================
# Actions
# ============================================================================

class Action(Enum):
    """Player intents the controller understands."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    REVEAL = auto()
    FLAG = auto()
    NEW_GAME = auto()
    REPLAY = auto()
    QUIT = auto()


KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "up": Action.UP,
    "s": Action.DOWN,
    "down": Action.DOWN,
    "a": Action.LEFT,
    "left": Action.LEFT,
    "d": Action.RIGHT,
    "right": Action.RIGHT,
    "f": Action.FLAG,
    "space": Action.FLAG,
    "r": Action.REVEAL,
    "return": Action.REVEAL,
}

CTRL_BINDINGS: Dict[str, Action] = {
    "n": Action.NEW_GAME,
    "r": Action.REPLAY,
    "c": Action.QUIT,
}


def action_for_key(key: KeyPress) -> Optional[Action]:
    """Look up the action bound to a key, if any."""
    bindings = CTRL_BINDINGS if key.ctrl else KEY_BINDINGS
    return bindings.get(key.name)


# ============================================================================
# Session Controller
# ============================================================================

class SessionController:
    """
    Drives one board from keyboard input.

    Cursor moves wrap around the board edges and are always allowed.
    Reveal and flag only reach the board while the game is in progress;
    new game and replay are allowed at any time and return the cursor to
    the top-left cell.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.cursor_row = 0
        self.cursor_col = 0
        self.running = True

    def handle_key(self, key: KeyPress) -> bool:
        """
        Dispatch a key press.

        Returns:
            True if the screen should be redrawn.
        """
        action = action_for_key(key)
        if action is None:
            return False
        return self.dispatch(action)

    def dispatch(self, action: Action) -> bool:
        """
        Apply an action to the cursor or the board.

        Returns:
            True if the screen should be redrawn.
        """
        logger.debug("Dispatching %s at (%d, %d)",
                     action.name, self.cursor_row, self.cursor_col)

        if action == Action.QUIT:
            self.running = False
            return False
        if action == Action.NEW_GAME:
            self._home_cursor()
            self.board.setup_board()
            return True
        if action == Action.REPLAY:
            self._home_cursor()
            self.board.reset_board()
            return True
        if action in (Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT):
            self._move_cursor(action)
            return True

        if not self.board.stats.is_playing:
            return False

        cell = self.board.get_cell(self.cursor_row, self.cursor_col)
        if action == Action.REVEAL:
            self.board.reveal_cell(cell)
        else:
            self.board.flag_cell(cell)
        self._log_game_end()
        return True

    def _move_cursor(self, action: Action) -> None:
        """Move the cursor one step, wrapping to the opposite edge."""
        rows, cols = self.board.rows, self.board.cols
        if action == Action.UP:
            self.cursor_row = (self.cursor_row - 1) % rows
        elif action == Action.DOWN:
            self.cursor_row = (self.cursor_row + 1) % rows
        elif action == Action.LEFT:
            self.cursor_col = (self.cursor_col - 1) % cols
        else:
            self.cursor_col = (self.cursor_col + 1) % cols

    def _home_cursor(self) -> None:
        self.cursor_row = 0
        self.cursor_col = 0

    def _log_game_end(self) -> None:
        stats = self.board.stats
        if stats.is_win:
            logger.info("Game won with %d cells revealed", stats.revealed_count)
        elif stats.is_lost:
            logger.info("Game lost at (%d, %d)", self.cursor_row, self.cursor_col)
