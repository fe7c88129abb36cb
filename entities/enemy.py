"""
Enemy entities
Roaming enemies that wander at random and can be frozen by the stun gun
"""

import random

from entities.mover import TimedMover, random_step
from utils.colors import COLOR_ENEMY, COLOR_ENEMY_FROZEN
from utils.constants import FREEZE_DURATION


class Enemy(TimedMover):
    """
    Roaming enemy
    """
    def __init__(self, x, y, move_delay):
        """
        Args:
            x, y: Grid position
            move_delay: Frames between moves, set by the session difficulty
        """
        super().__init__(x, y, move_delay)

        # Freeze state
        self.frozen = False
        self.freeze_timer = 0

    def freeze(self, duration=FREEZE_DURATION):
        """Stun the enemy; a second hit restarts the timer"""
        self.frozen = True
        self.freeze_timer = duration

    def update(self, grid, rng):
        """
        Update enemy for one frame

        Args:
            grid: TileGrid
            rng: random.Random used to pick a step

        Returns:
            True if enemy moved
        """
        if self.frozen:
            self.freeze_timer -= 1
            if self.freeze_timer <= 0:
                self.frozen = False
                self.freeze_timer = 0
            # Frozen enemies keep their cooldown and visual position as is
            return False

        moved = self.advance(grid, random_step(rng))
        self.smooth()
        return moved

    def is_harmful(self):
        """Frozen enemies cannot damage the player"""
        return not self.frozen

    def get_color(self):
        """Get RGB color for rendering"""
        return COLOR_ENEMY_FROZEN if self.frozen else COLOR_ENEMY

    def __repr__(self):
        state = f"frozen {self.freeze_timer}" if self.frozen else "roaming"
        return f"Enemy(pos=({self.x},{self.y}), {state})"


class EnemyManager:
    """
    Manages all enemies in the level
    """
    def __init__(self, rng=None):
        self.enemies = []
        self.rng = rng or random.Random()

    def add_enemy(self, x, y, move_delay):
        """Add an enemy to the level"""
        enemy = Enemy(x, y, move_delay)
        self.enemies.append(enemy)
        return enemy

    def update(self, grid):
        """
        Update all enemies

        Returns:
            list: Enemies that moved this frame
        """
        moved = []
        for enemy in self.enemies:
            if enemy.update(grid, self.rng):
                moved.append(enemy)
        return moved

    def get_harmful(self):
        """Enemies able to damage the player, in list order"""
        return [enemy for enemy in self.enemies if enemy.is_harmful()]

    def get_frozen(self):
        """Enemies currently frozen"""
        return [enemy for enemy in self.enemies if enemy.frozen]

    def clear(self):
        """Remove all enemies"""
        self.enemies.clear()

    def __len__(self):
        return len(self.enemies)

    def __iter__(self):
        return iter(self.enemies)

    def __repr__(self):
        return f"EnemyManager(enemies={len(self.enemies)})"
