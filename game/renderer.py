"""
Renderer - draws a FrameSnapshot with pygame
"""

import math

import pygame

from entities.particle import ParticleKind
from maze.grid import Tile
from utils.colors import (
    COLOR_BG, COLOR_ENEMY_EYES, COLOR_ITEM, COLOR_PLAYER, COLOR_PROJECTILE,
    COLOR_WALL, COLOR_WALL_EDGE
)
from utils.constants import TILE_SIZE


class Renderer:
    """
    Draws the play field. Reads snapshots only, never the live session.
    """
    def __init__(self, tile_size=TILE_SIZE):
        self.tile_size = tile_size

    def draw(self, screen, snapshot):
        """Draw map, effects and entities"""
        screen.fill(COLOR_BG)
        self._draw_map(screen, snapshot.tiles)

        # Particles sit behind player and enemies
        self._draw_particles(screen, snapshot.particles)
        self._draw_projectiles(screen, snapshot.projectiles)
        self._draw_enemies(screen, snapshot.enemies)
        self._draw_player(screen, snapshot.player)

    def _center(self, x, y):
        """Pixel centre of a (possibly fractional) tile position"""
        ts = self.tile_size
        return int(x * ts + ts / 2), int(y * ts + ts / 2)

    def _draw_map(self, screen, tiles):
        """Draw walls and items"""
        ts = self.tile_size
        rows, cols = tiles.shape

        for y in range(rows):
            for x in range(cols):
                tile = tiles[y, x]
                rect = (x * ts, y * ts, ts, ts)

                if tile == Tile.WALL:
                    pygame.draw.rect(screen, COLOR_WALL, rect)
                    pygame.draw.rect(screen, COLOR_WALL_EDGE, rect, 1)
                elif tile == Tile.ITEM:
                    pad = 10
                    pygame.draw.rect(
                        screen, COLOR_ITEM,
                        (x * ts + pad, y * ts + pad, ts - pad * 2, ts - pad * 2),
                        border_radius=4
                    )

    def _draw_particles(self, screen, particles):
        """Circles fading with life; confetti as spinning rectangles"""
        for particle in particles:
            alpha = int(255 * particle.opacity)
            if alpha <= 0:
                continue
            color = (*particle.color[:3], alpha)
            size = max(1, int(particle.size))

            if particle.kind is ParticleKind.CONFETTI:
                surf = pygame.Surface((size, size * 2), pygame.SRCALPHA)
                surf.fill(color)
                surf = pygame.transform.rotate(surf, -math.degrees(particle.rotation or 0.0))
                rect = surf.get_rect(center=(int(particle.x), int(particle.y)))
                screen.blit(surf, rect)
            else:
                surf = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
                pygame.draw.circle(surf, color, (size, size), size)
                screen.blit(surf, (int(particle.x - size), int(particle.y - size)))

    def _draw_projectiles(self, screen, projectiles):
        """Draw stun projectiles"""
        radius = max(2, self.tile_size // 8)
        for projectile in projectiles:
            pygame.draw.circle(
                screen, COLOR_PROJECTILE,
                self._center(projectile.visual_x, projectile.visual_y), radius
            )

    def _draw_enemies(self, screen, enemies):
        """Draw enemies; color comes from the frozen flag"""
        radius = self.tile_size // 2 - 5
        for enemy in enemies:
            cx, cy = self._center(enemy.visual_x, enemy.visual_y)
            pygame.draw.circle(screen, enemy.color, (cx, cy), radius)

            # Eyes
            pygame.draw.circle(screen, COLOR_ENEMY_EYES, (cx - 5, cy - 3), 3)
            pygame.draw.circle(screen, COLOR_ENEMY_EYES, (cx + 5, cy - 3), 3)

    def _draw_player(self, screen, player):
        """Draw player with a facing marker"""
        ts = self.tile_size
        pad = 5
        x0 = int(player.visual_x * ts) + pad
        y0 = int(player.visual_y * ts) + pad
        pygame.draw.rect(screen, COLOR_PLAYER, (x0, y0, ts - pad * 2, ts - pad * 2), border_radius=6)

        cx, cy = self._center(player.visual_x, player.visual_y)
        dx, dy = player.direction
        tip = (cx + dx * (ts // 2 - pad), cy + dy * (ts // 2 - pad))
        pygame.draw.line(screen, COLOR_ENEMY_EYES, (cx, cy), tip, 3)
