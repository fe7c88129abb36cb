"""
Player entity with health, inventory and facing
"""

from entities.mover import TimedMover, toward
from utils.constants import (
    PLAYER_MAX_HEALTH, PLAYER_MOVE_DELAY, PLAYER_START_DIRECTION
)


class Player(TimedMover):
    """
    Player controlled through move intents
    """
    def __init__(self, x, y, move_delay=PLAYER_MOVE_DELAY):
        super().__init__(x, y, move_delay)
        self.start_x = x
        self.start_y = y

        self.health = PLAYER_MAX_HEALTH
        self.inventory = 0
        self.direction = PLAYER_START_DIRECTION

    def move(self, grid, direction):
        """
        Request one step in a direction for this frame.

        The facing follows the request even when the step is refused,
        so the stun gun can be aimed at a wall.

        Args:
            grid: TileGrid
            direction: (dx, dy) unit vector or None when no key is held

        Returns:
            True if the player changed tile
        """
        if self.move_timer == 0 and direction is not None:
            self.direction = direction

        if direction is None:
            choose_step = _no_step
        else:
            choose_step = toward(*direction)

        return self.advance(grid, choose_step)

    def take_hit(self):
        """
        Lose one health point
        Returns True if player died
        """
        self.health = max(0, self.health - 1)
        return self.health == 0

    def respawn(self):
        """Return to the start tile"""
        self.place(self.start_x, self.start_y)

    def collect_item(self):
        """Add an item to the inventory"""
        self.inventory += 1

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), hp={self.health}, items={self.inventory})"


def _no_step(grid, mover):
    return None
