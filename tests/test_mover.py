from __future__ import annotations

import pytest

from entities.mover import TimedMover, random_step, toward
from entities.player import Player
from maze.grid import TileGrid
from utils.constants import DOWN, LEFT, PLAYER_MOVE_DELAY, RIGHT, UP


def test_move_sets_cooldown_then_counts_down(room) -> None:
    mover = TimedMover(1, 1, move_delay=3)

    assert mover.advance(room, toward(*RIGHT)) is True
    assert (mover.x, mover.y) == (2, 1)
    assert mover.move_timer == 3

    for expected in (2, 1, 0):
        assert mover.advance(room, toward(*RIGHT)) is False
        assert mover.move_timer == expected
    assert (mover.x, mover.y) == (2, 1)

    assert mover.advance(room, toward(*RIGHT)) is True
    assert (mover.x, mover.y) == (3, 1)


def test_blocked_step_leaves_timer_at_zero(room) -> None:
    mover = TimedMover(1, 1, move_delay=3)

    assert mover.advance(room, toward(*UP)) is False
    assert mover.move_timer == 0
    assert (mover.x, mover.y) == (1, 1)


def test_smoothing_is_visual_only(room) -> None:
    mover = TimedMover(1, 1, move_delay=3)
    mover.advance(room, toward(*RIGHT))

    assert (mover.visual_x, mover.visual_y) == (1.0, 1.0)
    mover.smooth()
    assert mover.visual_x == pytest.approx(1.25)
    mover.smooth()
    assert mover.visual_x == pytest.approx(1.4375)
    assert mover.x == 2


def test_place_snaps_visual_position() -> None:
    mover = TimedMover(1, 1, move_delay=3)
    mover.visual_x = 2.7
    mover.place(3, 2)
    assert (mover.x, mover.y, mover.visual_x, mover.visual_y) == (3, 2, 3.0, 2.0)


def test_random_step_only_picks_legal_moves(room, rng) -> None:
    mover = TimedMover(2, 2, move_delay=0)
    choose = random_step(rng)

    for _ in range(200):
        mover.advance(room, choose)
        assert room.can_move(mover.x, mover.y)


def test_random_step_with_no_legal_move(rng) -> None:
    cell = TileGrid(((1, 1, 1), (1, 0, 1), (1, 1, 1)))
    mover = TimedMover(1, 1, move_delay=5)

    assert mover.advance(cell, random_step(rng)) is False
    assert mover.move_timer == 0


class TestPlayer:
    def test_starts_facing_up_with_full_health(self) -> None:
        player = Player(1, 1)
        assert player.direction == UP
        assert player.health == 3
        assert player.move_delay == PLAYER_MOVE_DELAY

    def test_facing_follows_refused_step(self, room) -> None:
        player = Player(1, 1)
        assert player.move(room, LEFT) is False
        assert player.direction == LEFT

    def test_facing_fixed_during_cooldown(self, room) -> None:
        player = Player(1, 1)
        assert player.move(room, RIGHT) is True
        player.move(room, DOWN)
        assert player.direction == RIGHT

    def test_no_direction_keeps_timer(self, room) -> None:
        player = Player(1, 1)
        assert player.move(room, None) is False
        assert player.move_timer == 0
        assert player.direction == UP

    def test_take_hit_and_respawn(self, room) -> None:
        player = Player(1, 1)
        player.move(room, RIGHT)

        assert player.take_hit() is False
        player.respawn()
        assert (player.x, player.y) == (1, 1)
        assert (player.visual_x, player.visual_y) == (1.0, 1.0)

        player.take_hit()
        assert player.take_hit() is True
        assert player.health == 0
