"""
Game State Machine - session states and the transitions between them
"""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states"""
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()


# States that end a session; only a restart or the menu leaves them
TERMINAL_STATES = (GameState.LEVEL_COMPLETE, GameState.GAME_OVER)

# Every state may go back to the menu or (re)start play
ALLOWED_TRANSITIONS = {
    GameState.MENU: {GameState.MENU, GameState.PLAYING},
    GameState.PLAYING: {
        GameState.MENU, GameState.PLAYING, GameState.PAUSED,
        GameState.LEVEL_COMPLETE, GameState.GAME_OVER,
    },
    GameState.PAUSED: {GameState.MENU, GameState.PLAYING},
    GameState.LEVEL_COMPLETE: {GameState.MENU, GameState.PLAYING},
    GameState.GAME_OVER: {GameState.MENU, GameState.PLAYING},
}


class GameStateManager:
    """
    Tracks the session state.

    state_data carries whatever the last transition passed along
    (final score, time bonus) for the screens that display it.
    """
    def __init__(self):
        self.current_state = GameState.MENU
        self.previous_state = None
        self.state_data = {}

    def transition_to(self, new_state, **kwargs):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value
            **kwargs: Details for the new state

        Raises:
            ValueError: if the move is not in ALLOWED_TRANSITIONS
        """
        if new_state not in ALLOWED_TRANSITIONS[self.current_state]:
            raise ValueError(
                f"Illegal state transition {self.current_state.name} -> {new_state.name}"
            )

        self.previous_state = self.current_state
        self.current_state = new_state
        self.state_data = kwargs
        logger.debug("State %s -> %s", self.previous_state.name, new_state.name)

    def is_state(self, state):
        return self.current_state == state

    def is_terminal(self):
        """Game over or level complete"""
        return self.current_state in TERMINAL_STATES

    def can_pause(self):
        return self.current_state == GameState.PLAYING

    def can_resume(self):
        return self.current_state == GameState.PAUSED

    def get_state_name(self):
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
