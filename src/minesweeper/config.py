"""
Difficulty presets and level resolution.

The level is taken from an explicit argument first, then from the LEVEL
environment variable; unknown or missing levels use the default board.
"""
import logging
import os
from typing import Mapping, Optional

from .board import BoardConfig

logger = logging.getLogger(__name__)


LEVEL_ENV_VAR = "LEVEL"

# Preset difficulty levels (rows x cols, mines)
EASY = BoardConfig(8, 8, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)
DEFAULT = EASY

DIFFICULTY_PRESETS = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def resolve_config(
    level: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BoardConfig:
    """
    Pick the board configuration for a difficulty level.

    Args:
        level: Level name; overrides the environment when given.
        environ: Environment mapping (default: os.environ).

    Returns:
        The matching preset, or DEFAULT.
    """
    if level is None:
        environ = os.environ if environ is None else environ
        level = environ.get(LEVEL_ENV_VAR)
    if level is None:
        return DEFAULT

    config = DIFFICULTY_PRESETS.get(level.strip().lower())
    if config is None:
        logger.warning("Unknown level %r, using default board", level)
        return DEFAULT
    return config
