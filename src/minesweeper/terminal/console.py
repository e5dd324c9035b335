"""
Interactive terminal session.

Puts the terminal in raw mode, draws the board with a rich Live display
and feeds key presses to the session controller until the player quits.
"""
import logging
import os
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO

from rich.console import Console, Group
from rich.live import Live

from ..board import Board
from .controller import SessionController
from .keys import decode_keys
from .renderer import render_frame

logger = logging.getLogger(__name__)


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """
    Switch a TTY stream to raw input, restoring its settings on exit.

    Output post-processing stays on so that newlines written while the
    session runs still return to the first column.
    """
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        settings = termios.tcgetattr(fd)
        settings[1] |= termios.OPOST | termios.ONLCR
        termios.tcsetattr(fd, termios.TCSADRAIN, settings)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def read_sequence(stream: TextIO) -> str:
    """
    Read whatever input is waiting, blocking for at least one key.

    Multi-byte keys such as arrows arrive together; several keys may too,
    so the result can hold more than one key press.
    """
    data = os.read(stream.fileno(), 32)
    return data.decode("utf-8", errors="replace")


class ConsoleSession:
    """Keyboard-driven game loop on a terminal."""

    def __init__(
        self,
        board: Board,
        input_stream: Optional[TextIO] = None,
        console: Optional[Console] = None,
        reader: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Args:
            board: Board to play on.
            input_stream: Keyboard stream (default: sys.stdin).
            console: rich console to draw on (default: a stdout console).
            reader: Returns the raw characters waiting on the keyboard;
                an empty string means end of input.
        """
        self.controller = SessionController(board)
        self.input_stream = input_stream or sys.stdin
        self.console = console or Console()
        self.reader = reader or (lambda: read_sequence(self.input_stream))

    def frame(self) -> Group:
        return render_frame(
            self.controller.board,
            self.controller.cursor_row,
            self.controller.cursor_col,
        )

    def run(self) -> None:
        """Play until the player quits or input ends."""
        logger.info("Starting %dx%d game with %d mines",
                    self.controller.board.rows,
                    self.controller.board.cols,
                    self.controller.board.mine_count)
        try:
            with raw_mode(self.input_stream), Live(
                self.frame(),
                console=self.console,
                screen=True,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            ) as live:
                self._loop(live)
        except KeyboardInterrupt:
            logger.info("Interrupted")

    def _loop(self, live: Live) -> None:
        while self.controller.running:
            buffer = self.reader()
            if not buffer:
                logger.info("Input closed")
                break

            redraw = False
            for key in decode_keys(buffer):
                if not self.controller.running:
                    break
                redraw = self.controller.handle_key(key) or redraw
            if redraw:
                live.update(self.frame(), refresh=True)
