"""
Terminal front end for Minesweeper.

Decodes keyboard input, drives the board through a session controller
and renders frames with rich and emoji.
"""
from .keys import KeyPress, decode_key, decode_keys
from .controller import Action, SessionController, action_for_key
from .renderer import render_frame
from .console import ConsoleSession

__all__ = [
    "KeyPress",
    "decode_key",
    "decode_keys",
    "Action",
    "SessionController",
    "action_for_key",
    "render_frame",
    "ConsoleSession",
]
