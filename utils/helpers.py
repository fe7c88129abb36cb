"""
Helper utility functions for Maze Dash
"""

from utils.constants import TILE_SIZE


def clamp(value, min_value, max_value):
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def lerp(a, b, t):
    """Linear interpolation between a and b by factor t (0-1)"""
    return a + (b - a) * t


def random_range(rng, min_val, max_val):
    """Generate random float between min and max"""
    return rng.uniform(min_val, max_val)


def random_choice(rng, items):
    """Safely choose random item from list"""
    if not items:
        return None
    return rng.choice(items)


def tile_center(x, y):
    """Pixel coordinates of the centre of a (possibly fractional) tile"""
    return (x * TILE_SIZE + TILE_SIZE / 2, y * TILE_SIZE + TILE_SIZE / 2)


def format_time(seconds):
    """Format seconds to MM:SS string"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"
