from __future__ import annotations

import pytest

from entities.particle import ParticleKind
from game.game_state import GameState
from game.input import Intent
from game.session import GameSession
from utils.constants import DOWN, RIGHT

# Dead end: the enemy's only legal step is onto the player start
#   ####
#   #PE#
#   ####
DEAD_END = (
    (1, 1, 1, 1),
    (1, 3, 4, 1),
    (1, 1, 1, 1),
)


@pytest.fixture
def session(make_session) -> GameSession:
    s = make_session(player=(1, 1), enemies=[(3, 3)], items=[(3, 1), (1, 3)])
    s.start()
    return s


def _hold_enemies(session: GameSession) -> None:
    for enemy in session.enemy_manager:
        enemy.move_timer = 10_000


def test_new_session_waits_in_menu(make_session) -> None:
    s = make_session(player=(1, 1), items=[(3, 3)])
    snapshot = s.step(RIGHT)

    assert snapshot.state is GameState.MENU
    assert snapshot.frame == 0
    assert (snapshot.player.x, snapshot.player.y) == (1, 1)


def test_template_without_player_start_is_rejected(make_session) -> None:
    with pytest.raises(ValueError):
        make_session(items=[(2, 2)])


def test_unknown_difficulty_is_rejected(session) -> None:
    with pytest.raises(ValueError):
        session.start("insane")


def test_menu_selection_and_start(make_session) -> None:
    s = make_session(player=(1, 1), enemies=[(3, 3)], items=[(2, 2)])

    s.handle_intent(Intent.MOVE_LEFT)
    s.handle_intent(Intent.MOVE_LEFT)
    assert s.selected_difficulty == "slow"

    s.handle_intent(Intent.SELECT_NEXT)
    s.handle_intent(Intent.SELECT_NEXT)
    s.handle_intent(Intent.SELECT_NEXT)
    assert s.selected_difficulty == "fast"

    s.handle_intent(Intent.SELECT_SLOW)
    s.handle_intent(Intent.START)

    assert s.state_manager.is_state(GameState.PLAYING)
    assert [enemy.move_delay for enemy in s.enemy_manager] == [16]


def test_player_moves_once_per_cooldown(session) -> None:
    _hold_enemies(session)
    snapshot = session.step(DOWN)
    assert (snapshot.player.x, snapshot.player.y) == (1, 2)

    for _ in range(8):
        snapshot = session.step(DOWN)
    assert (snapshot.player.x, snapshot.player.y) == (1, 2)

    snapshot = session.step(DOWN)
    assert (snapshot.player.x, snapshot.player.y) == (1, 3)


def test_move_leaves_a_trail_and_walls_sparkle(session) -> None:
    _hold_enemies(session)
    session.step(RIGHT)

    particles = session.particle_system
    assert 2 <= particles.count(ParticleKind.TRAIL) <= 3
    # (2, 1) touches the top wall
    assert 3 <= particles.count(ParticleKind.SPARKLE) <= 5


def test_item_pickup_scores(session) -> None:
    _hold_enemies(session)
    session.step(RIGHT)
    for _ in range(9):
        session.step(RIGHT)

    assert session.player.inventory == 1
    assert session.score_manager.current_score == 100
    assert session.grid.count_items() == 1
    assert session.state_manager.is_state(GameState.PLAYING)


def test_last_item_completes_level_with_time_bonus(make_session, clock, save_manager) -> None:
    s = make_session(player=(1, 1), items=[(2, 1)])
    s.start()
    clock.now = 25.0

    snapshot = s.step(RIGHT)

    assert snapshot.state is GameState.LEVEL_COMPLETE
    assert snapshot.state_data["time_bonus"] == 750
    assert snapshot.score == 850
    assert snapshot.high_score == 850
    assert save_manager.load_high_score() == 850

    # Frames stop once the level is over
    assert s.step(RIGHT).frame == snapshot.frame


def test_time_spent_paused_does_not_cut_the_bonus(make_session, clock) -> None:
    s = make_session(player=(1, 1), items=[(2, 1)])
    s.start()
    s.handle_intent(Intent.PAUSE)
    clock.now = 60.0
    assert s.snapshot().elapsed_seconds == 0

    s.handle_intent(Intent.PAUSE)
    snapshot = s.step(RIGHT)

    assert snapshot.state is GameState.LEVEL_COMPLETE
    assert snapshot.state_data["time_bonus"] == 1000
    assert snapshot.state_data["elapsed"] == 0


def test_timer_stops_at_game_over(session, clock) -> None:
    _hold_enemies(session)
    session.enemy_manager.enemies[0].place(2, 1)
    session.player.health = 1
    clock.now = 5.0

    assert session.step(RIGHT).state is GameState.GAME_OVER
    clock.now = 50.0
    assert session.snapshot().elapsed_seconds == 5


def test_first_high_score_crossing_starts_confetti(make_session) -> None:
    s = make_session(player=(1, 1), items=[(2, 1), (3, 3)])
    s.start()
    s.step(RIGHT)

    assert s.particle_system.confetti_active
    assert s.particle_system.count(ParticleKind.CONFETTI) == 5


def test_enemy_contact_costs_health_and_respawns(session) -> None:
    _hold_enemies(session)
    enemy = session.enemy_manager.enemies[0]
    enemy.place(2, 1)

    session.step(RIGHT)

    player = session.player
    assert player.health == 2
    assert (player.x, player.y) == (1, 1)
    assert (player.visual_x, player.visual_y) == (1.0, 1.0)
    assert session.score_manager.current_score == 0
    assert 12 <= session.particle_system.count(ParticleKind.EXPLOSION) <= 16


def test_frozen_enemy_on_player_tile_is_harmless(session) -> None:
    enemy = session.enemy_manager.enemies[0]
    enemy.place(1, 1)
    enemy.freeze()

    for _ in range(10):
        session.step()

    assert session.player.health == 3
    assert session.state_manager.is_state(GameState.PLAYING)


def test_no_grace_period_after_respawn(make_session) -> None:
    s = make_session(template=DEAD_END, difficulty="fast")
    s.start()

    s.step()
    assert s.player.health == 2

    # The enemy now sits on the start tile and hits again every frame
    s.step()
    assert s.player.health == 1

    snapshot = s.step()
    assert snapshot.state is GameState.GAME_OVER
    assert snapshot.player.health == 0
    assert snapshot.score == 0


def test_stun_gun_freezes_enemy_in_line(session) -> None:
    _hold_enemies(session)
    enemy = session.enemy_manager.enemies[0]
    enemy.place(1, 3)

    session.player.direction = DOWN
    session.handle_intent(Intent.FIRE)
    assert len(session.projectile_manager) == 1

    for _ in range(4):
        session.step()

    assert enemy.frozen
    assert len(session.projectile_manager) == 0
    assert session.snapshot().enemies[0].frozen


def test_fire_ignored_outside_play(make_session) -> None:
    s = make_session(player=(1, 1), items=[(2, 2)])
    s.handle_intent(Intent.FIRE)
    assert s.fire() is None
    assert len(s.projectile_manager) == 0


def test_pause_and_resume(session) -> None:
    session.step()
    session.handle_intent(Intent.PAUSE)

    frame = session.frame_count
    session.step(DOWN)
    assert session.frame_count == frame
    assert session.state_manager.is_state(GameState.PAUSED)

    session.handle_intent(Intent.PAUSE)
    assert session.state_manager.is_state(GameState.PLAYING)


def test_exit_to_menu_resets_session_but_not_high_score(session) -> None:
    _hold_enemies(session)
    for _ in range(10):
        session.step(RIGHT)
    assert session.score_manager.current_score == 100

    session.handle_intent(Intent.EXIT)

    assert session.state_manager.is_state(GameState.MENU)
    assert session.score_manager.current_score == 0
    assert session.score_manager.high_score == 100
    assert session.grid.count_items() == 2
    assert (session.player.x, session.player.y) == (1, 1)


def test_restart_after_game_over(make_session) -> None:
    s = make_session(template=DEAD_END, difficulty="fast")
    s.start()
    for _ in range(3):
        s.step()
    assert s.state_manager.is_state(GameState.GAME_OVER)

    s.handle_intent(Intent.START)

    assert s.state_manager.is_state(GameState.PLAYING)
    assert s.player.health == 3
    assert s.frame_count == 0
    assert len(s.particle_system) == 0


def test_step_is_not_reentrant(session, monkeypatch) -> None:
    monkeypatch.setattr(session.particle_system, "update", lambda: session.step())

    with pytest.raises(RuntimeError):
        session.step()

    monkeypatch.undo()
    session.step()


def test_snapshot_is_read_only(session) -> None:
    snapshot = session.snapshot()

    with pytest.raises(ValueError):
        snapshot.tiles[1, 1] = 1
    with pytest.raises(AttributeError):
        snapshot.score = 10

    assert snapshot.items_total == 2
    assert snapshot.difficulty == "normal"
    assert snapshot.enemies[0].color == (233, 69, 96)
