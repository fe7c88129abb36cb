"""
Timed movement shared by every mobile entity
"""

from utils.constants import MOVE_SMOOTHING
from utils.helpers import lerp, random_choice


class TimedMover:
    """
    Grid mover limited to one step every move_delay frames.

    The grid position is the only one used by game logic; the visual
    position trails it and exists for rendering.
    """
    def __init__(self, x, y, move_delay):
        """
        Args:
            x, y: Grid position
            move_delay: Frames to wait after each move
        """
        self.x = x
        self.y = y
        self.visual_x = float(x)
        self.visual_y = float(y)
        self.move_timer = 0
        self.move_delay = move_delay

    def advance(self, grid, choose_step):
        """
        Run one frame of movement scheduling

        Args:
            grid: TileGrid to move on
            choose_step: Callable (grid, mover) -> (dx, dy) or None

        Returns:
            True if the entity moved this frame
        """
        if self.move_timer > 0:
            self.move_timer -= 1
            return False

        # Ready: a refused or blocked step leaves the timer at zero
        step = choose_step(grid, self)
        if step is None:
            return False

        dx, dy = step
        self.x += dx
        self.y += dy
        self.move_timer = self.move_delay
        return True

    def smooth(self, factor=MOVE_SMOOTHING):
        """Ease the visual position toward the grid position"""
        self.visual_x = lerp(self.visual_x, self.x, factor)
        self.visual_y = lerp(self.visual_y, self.y, factor)

    def place(self, x, y):
        """Snap grid and visual position to a tile"""
        self.x = x
        self.y = y
        self.visual_x = float(x)
        self.visual_y = float(y)


def toward(dx, dy):
    """Step strategy that takes (dx, dy) when the destination is legal"""
    def choose_step(grid, mover):
        if grid.can_move(mover.x + dx, mover.y + dy):
            return (dx, dy)
        return None
    return choose_step


def random_step(rng):
    """Step strategy picking uniformly among the legal cardinal steps"""
    def choose_step(grid, mover):
        return random_choice(rng, grid.legal_steps(mover.x, mover.y))
    return choose_step
