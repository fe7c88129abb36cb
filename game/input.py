"""
Input intents - what the core accepts from the keyboard layer
"""

from enum import Enum, auto

from utils.constants import (
    DIFFICULTY_FAST, DIFFICULTY_NORMAL, DIFFICULTY_SLOW, DOWN, LEFT, RIGHT, UP
)


class Intent(Enum):
    """Discrete player intents, one per key transition"""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    FIRE = auto()
    PAUSE = auto()
    EXIT = auto()
    SELECT_SLOW = auto()
    SELECT_NORMAL = auto()
    SELECT_FAST = auto()
    SELECT_PREVIOUS = auto()
    SELECT_NEXT = auto()
    START = auto()


MOVE_DIRECTIONS = {
    Intent.MOVE_UP: UP,
    Intent.MOVE_DOWN: DOWN,
    Intent.MOVE_LEFT: LEFT,
    Intent.MOVE_RIGHT: RIGHT,
}

DIFFICULTY_INTENTS = {
    Intent.SELECT_SLOW: DIFFICULTY_SLOW,
    Intent.SELECT_NORMAL: DIFFICULTY_NORMAL,
    Intent.SELECT_FAST: DIFFICULTY_FAST,
}


def direction_of(intent):
    """Unit step for a move intent, None for anything else"""
    return MOVE_DIRECTIONS.get(intent)
