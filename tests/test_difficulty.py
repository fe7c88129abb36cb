from __future__ import annotations

import pytest

from maze.difficulty import DifficultyConfig, get_difficulty, step_difficulty
from utils.constants import PLAYER_MOVE_DELAY


@pytest.mark.parametrize(
    ("name", "delay"),
    [("slow", 16), ("normal", 11), ("fast", 8)],
)
def test_enemy_move_delay_per_difficulty(name: str, delay: int) -> None:
    assert get_difficulty(name).enemy_move_delay == delay


def test_slow_is_twice_the_player_delay() -> None:
    assert get_difficulty("slow").enemy_move_delay == 2 * PLAYER_MOVE_DELAY


def test_unknown_difficulty_raises() -> None:
    with pytest.raises(ValueError):
        get_difficulty("nightmare")


def test_step_difficulty_clamps_at_the_ends() -> None:
    assert step_difficulty("slow", -1) == "slow"
    assert step_difficulty("slow", 1) == "normal"
    assert step_difficulty("normal", 1) == "fast"
    assert step_difficulty("fast", 1) == "fast"


@pytest.mark.parametrize("name", ["slow", "normal", "fast"])
def test_every_enemy_gets_the_session_delay(make_session, name: str) -> None:
    session = make_session(
        player=(1, 1), enemies=[(3, 1), (3, 3), (1, 3)], items=[(2, 2)]
    )
    session.start(name)

    delays = {enemy.move_delay for enemy in session.enemy_manager}
    assert delays == {get_difficulty(name).enemy_move_delay}

    for _ in range(30):
        session.step()
    assert {enemy.move_delay for enemy in session.enemy_manager} == delays


def test_move_delay_follows_speed_multiplier() -> None:
    assert DifficultyConfig(multiplier=0.25).enemy_move_delay == 4 * PLAYER_MOVE_DELAY
    assert DifficultyConfig().enemy_move_delay == PLAYER_MOVE_DELAY
