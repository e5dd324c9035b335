"""
Emoji rendering of a board with rich.

Builds rich renderables for the board and its status lines; putting them
on screen is left to the console session.
"""
from typing import List

from rich.console import Group
from rich.table import Table
from rich.text import Text

from ..board import Board, GameState
from ..cell import FLAGGED_CODE, HIDDEN_CODE, REVEALED_MINE_CODE


# ============================================================================
# Icons and Styles
# ============================================================================

MINE_ICON = "\U0001f4a3"
FLAG_ICON = "\U0001f6a9"
EMPTY_ICON = "\U0001f518"
HIDDEN_ICON = "\u2b1c\ufe0f"
# Keycap digits, padded with a space since they render one column short
NUMBER_ICONS = {n: f"{n}\ufe0f\u20e3 " for n in range(1, 9)}

CURSOR_STYLE = "on magenta"
INFO_STYLE = "cyan"

LOST_STATUS = "LOST, New: CTRL-N, Replay: CTRL-R, Exit: CTRL-C"


# ============================================================================
# Renderer
# ============================================================================

def cell_icon(code: int) -> str:
    """Icon for a cell observation code."""
    if code == HIDDEN_CODE:
        return HIDDEN_ICON
    if code == FLAGGED_CODE:
        return FLAG_ICON
    if code == REVEALED_MINE_CODE:
        return MINE_ICON
    if code == 0:
        return EMPTY_ICON
    return NUMBER_ICONS[code]


def status_text(state: GameState) -> str:
    """Status line text for a game state."""
    if state == GameState.WON:
        return "WIN"
    if state == GameState.LOST:
        return LOST_STATUS
    return "PLAYING"


def board_table(board: Board, cursor_row: int, cursor_col: int) -> Table:
    """One table cell per board cell, with the cursor cell highlighted."""
    table = Table.grid(padding=0)
    for _ in range(board.cols):
        table.add_column(no_wrap=True)

    obs = board.get_observation()
    for row in range(board.rows):
        table.add_row(*[
            Text(
                cell_icon(int(obs[row, col])),
                style=CURSOR_STYLE if (row, col) == (cursor_row, cursor_col) else "",
            )
            for col in range(board.cols)
        ])
    return table


def info_lines(board: Board) -> List[Text]:
    stats = board.stats
    return [
        Text(f"Flagged: {stats.flagged_count}", style=INFO_STYLE),
        Text(f"Revealed: {stats.revealed_count}", style=INFO_STYLE),
        Text(f"Mines: {board.mine_count}", style=INFO_STYLE),
        Text(f"Mines left: {board.mines_remaining}", style=INFO_STYLE),
        Text(f"Status: {status_text(board.game_state)}", style=INFO_STYLE),
    ]


def render_frame(board: Board, cursor_row: int, cursor_col: int) -> Group:
    """
    Render the board and status lines as one frame.

    Args:
        board: Board to draw.
        cursor_row: Highlighted row.
        cursor_col: Highlighted column.

    Returns:
        Renderable holding the board grid followed by the status lines.
    """
    return Group(
        board_table(board, cursor_row, cursor_col),
        *info_lines(board),
    )
