"""
Difficulty level configurations for Maze Dash
Each level binds one enemy move delay for the whole session
"""

from utils.constants import (
    PLAYER_MOVE_DELAY, DIFFICULTY_SLOW, DIFFICULTY_NORMAL, DIFFICULTY_FAST,
    DIFFICULTY_NAMES
)
from utils.helpers import clamp


class DifficultyConfig:
    """Configuration for a single difficulty level"""
    def __init__(self, **kwargs):
        self.name = kwargs.get('name', DIFFICULTY_NORMAL)
        self.label = kwargs.get('label', self.name.title())

        # Enemy speed relative to the player
        self.multiplier = kwargs.get('multiplier', 1.0)

        # Frames between enemy moves, truncated to whole frames
        self.enemy_move_delay = int(PLAYER_MOVE_DELAY / self.multiplier)

    def __repr__(self):
        return f"DifficultyConfig(name={self.name}, enemy_move_delay={self.enemy_move_delay})"


# ========== DIFFICULTY LEVEL DEFINITIONS ==========

LEVEL_SLOW = DifficultyConfig(
    name=DIFFICULTY_SLOW,
    label='Slow',
    multiplier=0.5
)

LEVEL_NORMAL = DifficultyConfig(
    name=DIFFICULTY_NORMAL,
    label='Normal',
    multiplier=0.7
)

LEVEL_FAST = DifficultyConfig(
    name=DIFFICULTY_FAST,
    label='Fast',
    multiplier=1.0
)

DIFFICULTY_LEVELS = {
    DIFFICULTY_SLOW: LEVEL_SLOW,
    DIFFICULTY_NORMAL: LEVEL_NORMAL,
    DIFFICULTY_FAST: LEVEL_FAST,
}


def get_difficulty(name):
    """
    Look up a difficulty level by name

    Raises:
        ValueError: if the name is not one of DIFFICULTY_NAMES
    """
    try:
        return DIFFICULTY_LEVELS[name]
    except KeyError:
        raise ValueError(f"Unknown difficulty: {name!r}") from None


def step_difficulty(name, offset):
    """
    Move the menu selection left (-1) or right (+1), stopping at the ends
    """
    index = clamp(DIFFICULTY_NAMES.index(name) + offset, 0, len(DIFFICULTY_NAMES) - 1)
    return DIFFICULTY_NAMES[index]
