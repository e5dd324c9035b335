"""
Key decoding for raw terminal input.

Turns the characters read from a terminal in raw mode into KeyPress
values named after the keys they came from.
"""
from dataclasses import dataclass
from typing import Iterator, Optional


ESCAPE = "\x1b"

# Final byte of "ESC [ x" / "ESC O x" cursor key sequences
_ARROWS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_SPECIAL = {
    "\r": "return",
    "\n": "return",
    " ": "space",
    "\t": "tab",
    "\x7f": "backspace",
    ESCAPE: "escape",
}


@dataclass(frozen=True)
class KeyPress:
    """
    A decoded key.

    Attributes:
        name: Key name ("up", "return", "space", or a lowercase character).
        ctrl: Whether the Control modifier was held.
    """

    name: str
    ctrl: bool = False


def split_keys(buffer: str) -> Iterator[str]:
    """
    Split a read buffer into the raw sequences of individual keys.

    Held or fast-typed keys can arrive together in one read. Escape
    sequences run up to their final byte (0x40-0x7e); a lone escape at
    the end of the buffer is a key of its own.
    """
    index = 0
    while index < len(buffer):
        if buffer[index] == ESCAPE and buffer[index + 1:index + 2] in ("[", "O"):
            end = index + 2
            while end < len(buffer) and not "\x40" <= buffer[end] <= "\x7e":
                end += 1
            yield buffer[index:end + 1]
            index = end + 1
        else:
            yield buffer[index]
            index += 1


def decode_keys(buffer: str) -> Iterator[KeyPress]:
    """Decode every recognized key in a read buffer, in order."""
    for sequence in split_keys(buffer):
        key = decode_key(sequence)
        if key is not None:
            yield key


def decode_key(sequence: str) -> Optional[KeyPress]:
    """
    Decode one key's worth of raw input.

    Args:
        sequence: Characters produced by a single key press.

    Returns:
        The decoded key, or None for empty or unrecognized input.
    """
    if not sequence:
        return None

    if sequence in _SPECIAL:
        return KeyPress(_SPECIAL[sequence])

    if sequence.startswith(ESCAPE):
        if len(sequence) == 3 and sequence[1] in "[O":
            name = _ARROWS.get(sequence[2])
            if name is not None:
                return KeyPress(name)
        return None

    if len(sequence) != 1:
        return None

    code = ord(sequence)
    # Ctrl-A .. Ctrl-Z arrive as 0x01 .. 0x1a
    if 1 <= code <= 26:
        return KeyPress(chr(code + ord("a") - 1), ctrl=True)
    if sequence.isprintable():
        return KeyPress(sequence.lower())
    return None
