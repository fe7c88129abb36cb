"""
Tile grid - static map lookup and move legality
"""

from enum import IntEnum

import numpy as np

from utils.constants import DIRS


class Tile(IntEnum):
    """Tile kinds stored in the grid"""
    EMPTY = 0
    WALL = 1
    ITEM = 2
    PLAYER_START = 3
    ENEMY_START = 4


# Dungeon layout: four rooms joined by corridors. Never modified.
MAP_TEMPLATE = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 3, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 0, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 0, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 0, 1, 1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 0, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 4, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 2, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


class TileGrid:
    """
    Working copy of a map template.
    Cells are indexed as tiles[y, x].
    """
    def __init__(self, template=MAP_TEMPLATE):
        """
        Args:
            template: Sequence of rows of tile values, left untouched
        """
        self.template = np.array(template, dtype=np.int8)
        self.template.setflags(write=False)
        self.rows, self.cols = self.template.shape
        self.tiles = self.template.copy()

    @classmethod
    def from_template(cls, template):
        """Build a working grid from a template, which is copied"""
        return cls(template)

    def reset(self):
        """Reinitialize the working copy from the template"""
        self.tiles = self.template.copy()

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def tile_at(self, x, y):
        """Tile kind at (x, y); out-of-bounds cells read as walls"""
        if not self.in_bounds(x, y):
            return Tile.WALL
        return Tile(int(self.tiles[y, x]))

    def is_wall(self, x, y):
        """Check for a wall tile (in bounds only)"""
        return self.in_bounds(x, y) and bool(self.tiles[y, x] == Tile.WALL)

    def can_move(self, x, y):
        """A destination is legal iff it is in bounds and not a wall"""
        if not self.in_bounds(x, y):
            return False
        return bool(self.tiles[y, x] != Tile.WALL)

    def legal_steps(self, x, y):
        """Cardinal steps from (x, y) whose destination is legal"""
        return [(dx, dy) for dx, dy in DIRS if self.can_move(x + dx, y + dy)]

    def is_adjacent_to_wall(self, x, y):
        """Check whether any of the 4 neighbours is a wall"""
        return any(self.is_wall(x + dx, y + dy) for dx, dy in DIRS)

    def take_spawns(self, tile):
        """
        Consume every spawn tile of a kind

        Returns:
            list: (x, y) positions in row-major order, now EMPTY
        """
        ys, xs = np.nonzero(self.tiles == tile)
        positions = [(int(x), int(y)) for y, x in zip(ys, xs)]
        for x, y in positions:
            self.tiles[y, x] = Tile.EMPTY
        return positions

    def count_items(self):
        """Number of items left on the map"""
        return int(np.count_nonzero(self.tiles == Tile.ITEM))

    def collect_item(self, x, y):
        """
        Pick up the item at (x, y)

        Returns:
            bool: True if an item was there
        """
        if not self.in_bounds(x, y) or self.tiles[y, x] != Tile.ITEM:
            return False
        self.tiles[y, x] = Tile.EMPTY
        return True

    def copy_tiles(self):
        """Read-only copy of the current tiles for rendering"""
        tiles = self.tiles.copy()
        tiles.setflags(write=False)
        return tiles

    def __repr__(self):
        return f"TileGrid({self.cols}x{self.rows}, items={self.count_items()})"
