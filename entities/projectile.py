"""
Stun gun projectiles
Lifecycle: fired active, deactivated on wall/bounds/enemy, then pruned
"""

import math

from utils.constants import FREEZE_DURATION, PROJECTILE_HIT_RANGE, PROJECTILE_SPEED


class Projectile:
    """
    Single projectile travelling along a cardinal direction
    """
    def __init__(self, x, y, dir_x, dir_y, speed=PROJECTILE_SPEED, visual_x=None, visual_y=None):
        """
        Args:
            x, y: Grid-scale position
            dir_x, dir_y: Unit direction
            speed: Tiles per frame
            visual_x, visual_y: Render position (defaults to x, y)
        """
        self.x = float(x)
        self.y = float(y)
        self.visual_x = float(x if visual_x is None else visual_x)
        self.visual_y = float(y if visual_y is None else visual_y)
        self.dir_x = dir_x
        self.dir_y = dir_y
        self.speed = speed
        self.active = True

    def advance(self):
        """Move one frame along the direction"""
        step_x = self.dir_x * self.speed
        step_y = self.dir_y * self.speed
        self.x += step_x
        self.y += step_y
        self.visual_x += step_x
        self.visual_y += step_y

    def cell(self):
        """Grid cell containing the projectile"""
        return math.floor(self.x), math.floor(self.y)

    def hits(self, enemy):
        """Half-tile box test, independent per axis"""
        return (abs(self.x - enemy.x) < PROJECTILE_HIT_RANGE and
                abs(self.y - enemy.y) < PROJECTILE_HIT_RANGE)

    def __repr__(self):
        state = "active" if self.active else "spent"
        return f"Projectile(pos=({self.x:.2f},{self.y:.2f}), dir=({self.dir_x},{self.dir_y}), {state})"


class ProjectileManager:
    """
    Manages live projectiles and their hits on enemies
    """
    def __init__(self, freeze_duration=FREEZE_DURATION):
        self.projectiles = []
        self.freeze_duration = freeze_duration

    def fire(self, player):
        """
        Fire from the player's tile along the player's facing

        Returns:
            Projectile: The new projectile
        """
        dir_x, dir_y = player.direction
        projectile = Projectile(
            player.x, player.y, dir_x, dir_y,
            visual_x=player.visual_x, visual_y=player.visual_y
        )
        self.projectiles.append(projectile)
        return projectile

    def update(self, grid, enemies):
        """
        Advance every projectile and resolve collisions

        Args:
            grid: TileGrid
            enemies: Enemies in hit-test order

        Returns:
            list: Enemies frozen this frame
        """
        frozen = []

        for projectile in self.projectiles:
            if not projectile.active:
                continue

            # Check before moving so a projectile sharing a tile with an enemy
            # freezes it in the same update (point-blank, or walked into)
            enemy = self._resolve_hit(projectile, enemies)
            if enemy is not None:
                frozen.append(enemy)
                continue

            projectile.advance()

            cx, cy = projectile.cell()
            if not grid.can_move(cx, cy):
                projectile.active = False
                continue

            enemy = self._resolve_hit(projectile, enemies)
            if enemy is not None:
                frozen.append(enemy)

        self.projectiles = [p for p in self.projectiles if p.active]
        return frozen

    def _resolve_hit(self, projectile, enemies):
        """Freeze the first enemy in range and spend the projectile"""
        for enemy in enemies:
            if projectile.hits(enemy):
                projectile.active = False
                enemy.freeze(self.freeze_duration)
                return enemy
        return None

    def clear(self):
        """Remove all projectiles"""
        self.projectiles.clear()

    def __len__(self):
        return len(self.projectiles)
