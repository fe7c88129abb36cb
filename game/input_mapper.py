"""
Keyboard to intent mapping
"""

import pygame

from game.input import Intent, direction_of

ARROW_INTENTS = {
    pygame.K_UP: Intent.MOVE_UP,
    pygame.K_DOWN: Intent.MOVE_DOWN,
    pygame.K_LEFT: Intent.MOVE_LEFT,
    pygame.K_RIGHT: Intent.MOVE_RIGHT,
}

KEY_INTENTS = {
    pygame.K_SPACE: Intent.FIRE,
    pygame.K_p: Intent.PAUSE,
    pygame.K_ESCAPE: Intent.EXIT,
    pygame.K_RETURN: Intent.START,
    pygame.K_1: Intent.SELECT_SLOW,
    pygame.K_2: Intent.SELECT_NORMAL,
    pygame.K_3: Intent.SELECT_FAST,
}


class InputMapper:
    """
    Turns pygame key events into intents and tracks held arrows.

    Each KEYDOWN yields at most one intent. Movement is sampled every
    frame from the most recently pressed arrow still held.
    """
    def __init__(self):
        self._held = []

    def handle_event(self, event):
        """
        Args:
            event: pygame event

        Returns:
            Intent or None
        """
        if event.type == pygame.KEYDOWN:
            if event.key in ARROW_INTENTS:
                if event.key not in self._held:
                    self._held.append(event.key)
                return ARROW_INTENTS[event.key]
            return KEY_INTENTS.get(event.key)

        if event.type == pygame.KEYUP and event.key in self._held:
            self._held.remove(event.key)

        return None

    def move_direction(self):
        """Held direction (dx, dy) or None"""
        if not self._held:
            return None
        return direction_of(ARROW_INTENTS[self._held[-1]])

    def release_all(self):
        """Forget held keys (focus loss)"""
        self._held.clear()
