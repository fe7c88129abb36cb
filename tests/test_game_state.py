from __future__ import annotations

import pytest

from game.game_state import GameState, GameStateManager


def test_starts_in_menu() -> None:
    manager = GameStateManager()
    assert manager.is_state(GameState.MENU)
    assert not manager.can_pause()


def test_transition_keeps_details_and_history() -> None:
    manager = GameStateManager()
    manager.transition_to(GameState.PLAYING, difficulty="slow")
    manager.transition_to(GameState.GAME_OVER, score=150)

    assert manager.previous_state is GameState.PLAYING
    assert manager.state_data == {"score": 150}
    assert manager.is_terminal()


def test_pause_and_resume_guards() -> None:
    manager = GameStateManager()
    manager.transition_to(GameState.PLAYING)
    assert manager.can_pause()

    manager.transition_to(GameState.PAUSED)
    assert manager.can_resume()
    assert not manager.can_pause()


@pytest.mark.parametrize(
    ("path", "illegal"),
    [
        ([], GameState.GAME_OVER),
        ([], GameState.PAUSED),
        ([GameState.PLAYING, GameState.PAUSED], GameState.LEVEL_COMPLETE),
        ([GameState.PLAYING, GameState.GAME_OVER], GameState.PAUSED),
    ],
)
def test_illegal_transitions_raise(path: list, illegal: GameState) -> None:
    manager = GameStateManager()
    for state in path:
        manager.transition_to(state)

    with pytest.raises(ValueError):
        manager.transition_to(illegal)
