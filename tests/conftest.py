from __future__ import annotations

import random

import pytest

from game.save_manager import SaveManager
from game.session import GameSession
from maze.grid import Tile, TileGrid

# Small closed room used by most movement tests:
#   #####
#   #...#
#   #...#
#   #...#
#   #####
ROOM = (
    (1, 1, 1, 1, 1),
    (1, 0, 0, 0, 1),
    (1, 0, 0, 0, 1),
    (1, 0, 0, 0, 1),
    (1, 1, 1, 1, 1),
)


class FakeClock:
    """Manually advanced seconds source"""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def stamp_room(player=None, enemies=(), items=()):
    """ROOM with spawn and item tiles stamped at (x, y) positions"""
    rows = [list(row) for row in ROOM]
    if player is not None:
        x, y = player
        rows[y][x] = int(Tile.PLAYER_START)
    for x, y in enemies:
        rows[y][x] = int(Tile.ENEMY_START)
    for x, y in items:
        rows[y][x] = int(Tile.ITEM)
    return tuple(tuple(row) for row in rows)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def room() -> TileGrid:
    return TileGrid(ROOM)


@pytest.fixture
def save_manager(tmp_path) -> SaveManager:
    return SaveManager(save_dir=tmp_path / "saves")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_session(save_manager, rng, clock):
    """
    Build a session on ROOM (or an explicit template).

    Keyword arguments player/enemies/items are stamped into ROOM.
    """
    def _make(template=None, difficulty: str = 'normal', **marks) -> GameSession:
        if template is None:
            template = stamp_room(**marks)
        return GameSession(
            save_manager=save_manager,
            template=template,
            rng=rng,
            clock=clock,
            difficulty=difficulty,
        )
    return _make
