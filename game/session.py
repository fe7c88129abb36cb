"""
Game session - owns the world and runs one ordered frame at a time
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np

from entities.enemy import EnemyManager
from entities.particle import ParticleKind, ParticleSystem
from entities.player import Player
from entities.projectile import ProjectileManager
from game.collision import CollisionHandler
from game.game_state import GameState, GameStateManager
from game.input import DIFFICULTY_INTENTS, Intent
from game.save_manager import SaveManager
from game.score_manager import ScoreManager
from maze.difficulty import get_difficulty, step_difficulty
from maze.grid import MAP_TEMPLATE, Tile, TileGrid
from utils.constants import (
    DIFFICULTY_NORMAL, SCORE_HIT_PENALTY, SCORE_ITEM, TILE_SIZE
)
from utils.helpers import tile_center

logger = logging.getLogger(__name__)


# ========== READ-ONLY FRAME SNAPSHOT ==========

@dataclass(frozen=True)
class PlayerView:
    x: int
    y: int
    visual_x: float
    visual_y: float
    health: int
    inventory: int
    direction: tuple[int, int]


@dataclass(frozen=True)
class EnemyView:
    x: int
    y: int
    visual_x: float
    visual_y: float
    frozen: bool
    freeze_timer: int
    color: tuple[int, int, int]


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    visual_x: float
    visual_y: float
    direction: tuple[int, int]


@dataclass(frozen=True)
class ParticleView:
    kind: ParticleKind
    x: float
    y: float
    size: float
    color: tuple[int, int, int]
    opacity: float
    rotation: Optional[float]  # confetti only


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    """Everything the renderer may read for one frame"""
    tiles: np.ndarray  # read-only copy, indexed [y, x]
    player: PlayerView
    enemies: tuple[EnemyView, ...]
    projectiles: tuple[ProjectileView, ...]
    particles: tuple[ParticleView, ...]
    score: int
    high_score: int
    state: GameState
    difficulty: str
    items_total: int
    frame: int
    elapsed_seconds: int
    state_data: dict  # copy of the terminal-state details (score, time bonus)


class GameSession:
    """
    Owns grid, entities, projectiles, particles and score for one player.

    All mutation happens inside handle_intent() and step(); the renderer
    only sees FrameSnapshot objects.
    """
    def __init__(self, save_manager=None, template=MAP_TEMPLATE, rng=None,
                 clock=time.monotonic, difficulty=DIFFICULTY_NORMAL):
        """
        Args:
            save_manager: High score storage (defaults to ./saves)
            template: Map template rows
            rng: random.Random shared by enemies and particles
            clock: Seconds source for the time bonus
            difficulty: Initially selected difficulty name
        """
        self.rng = rng or random.Random()
        self.grid = TileGrid.from_template(template)
        self.state_manager = GameStateManager()
        self.collision_handler = CollisionHandler()

        self.enemy_manager = EnemyManager(self.rng)
        self.projectile_manager = ProjectileManager()
        self.particle_system = ParticleSystem(
            width=self.grid.cols * TILE_SIZE,
            height=self.grid.rows * TILE_SIZE,
            rng=self.rng
        )

        self.save_manager = save_manager or SaveManager()
        self.score_manager = ScoreManager(
            self.save_manager,
            on_new_high_score=self.particle_system.start_confetti,
            clock=clock
        )
        self.score_manager.init()

        self.selected_difficulty = get_difficulty(difficulty).name
        self.difficulty = get_difficulty(self.selected_difficulty)

        self.player = None
        self.items_total = 0
        self.frame_count = 0
        self._stepping = False

        self._build_level()

    # ---------- session control ----------

    def start(self, difficulty=None):
        """
        Start a new session

        Args:
            difficulty: Difficulty name, defaults to the current selection
        """
        if difficulty is not None:
            self.selected_difficulty = get_difficulty(difficulty).name
        self.difficulty = get_difficulty(self.selected_difficulty)

        self._build_level()
        self.score_manager.reset()
        self.state_manager.transition_to(GameState.PLAYING, difficulty=self.difficulty.name)
        logger.info(
            "Session started: difficulty=%s enemies=%d items=%d",
            self.difficulty.name, len(self.enemy_manager), self.items_total
        )

    def restart(self):
        """Start again with the same difficulty"""
        self.start(self.selected_difficulty)

    def exit_to_menu(self):
        """Abandon the session and return to the start screen"""
        self._build_level()
        self.score_manager.reset()
        self.score_manager.stop_clock()
        self.state_manager.transition_to(GameState.MENU)

    def pause(self):
        """Pause the game"""
        if self.state_manager.can_pause():
            self.score_manager.stop_clock()
            self.state_manager.transition_to(GameState.PAUSED)
            return True
        return False

    def resume(self):
        """Resume the game"""
        if self.state_manager.can_resume():
            self.score_manager.resume_clock()
            self.state_manager.transition_to(GameState.PLAYING)
            return True
        return False

    def select_difficulty(self, name):
        """Choose the difficulty for the next start"""
        self.selected_difficulty = get_difficulty(name).name

    def fire(self):
        """
        Fire the stun gun along the player's facing

        Returns:
            Projectile or None when not playing
        """
        if not self.is_playing():
            return None
        return self.projectile_manager.fire(self.player)

    def _build_level(self):
        """Fresh map copy, entities and effects"""
        self.frame_count = 0
        self.grid.reset()
        self.projectile_manager.clear()
        self.particle_system.clear()
        self.enemy_manager.clear()

        starts = self.grid.take_spawns(Tile.PLAYER_START)
        if not starts:
            raise ValueError("Map template has no player start tile")
        px, py = starts[-1]
        self.player = Player(px, py)

        for x, y in self.grid.take_spawns(Tile.ENEMY_START):
            self.enemy_manager.add_enemy(x, y, self.difficulty.enemy_move_delay)

        self.items_total = self.grid.count_items()

    # ---------- input ----------

    def handle_intent(self, intent):
        """Apply one discrete intent according to the current state"""
        state = self.state_manager.current_state

        if state == GameState.MENU:
            if intent in DIFFICULTY_INTENTS:
                self.select_difficulty(DIFFICULTY_INTENTS[intent])
            elif intent in (Intent.SELECT_PREVIOUS, Intent.MOVE_LEFT):
                self.selected_difficulty = step_difficulty(self.selected_difficulty, -1)
            elif intent in (Intent.SELECT_NEXT, Intent.MOVE_RIGHT):
                self.selected_difficulty = step_difficulty(self.selected_difficulty, 1)
            elif intent == Intent.START:
                self.start()

        elif state == GameState.PLAYING:
            if intent == Intent.FIRE:
                self.fire()
            elif intent == Intent.PAUSE:
                self.pause()
            elif intent == Intent.EXIT:
                self.exit_to_menu()

        elif state == GameState.PAUSED:
            if intent == Intent.PAUSE:
                self.resume()
            elif intent == Intent.EXIT:
                self.exit_to_menu()

        elif self.state_manager.is_terminal():
            if intent in (Intent.START, Intent.FIRE):
                self.restart()
            elif intent == Intent.EXIT:
                self.exit_to_menu()

    # ---------- frame ----------

    def is_playing(self):
        return self.state_manager.is_state(GameState.PLAYING)

    def step(self, move=None):
        """
        Run one frame

        Args:
            move: Held direction (dx, dy) or None

        Returns:
            FrameSnapshot: State after the frame
        """
        if self._stepping:
            raise RuntimeError("GameSession.step() is not re-entrant")

        if self.is_playing():
            self._stepping = True
            try:
                self._run_frame(move)
            finally:
                self._stepping = False

        return self.snapshot()

    def _run_frame(self, move):
        self.frame_count += 1
        player = self.player

        # Player
        trail_origin = tile_center(player.visual_x, player.visual_y)
        if player.move(self.grid, move):
            self.particle_system.create_trail(*trail_origin, playing=self.is_playing())
            self._on_player_moved()
        player.smooth()

        if self.is_playing():
            # Enemies
            self.enemy_manager.update(self.grid)
            self._check_enemy_contact()

        if self.is_playing():
            # Stun gun
            for enemy in self.projectile_manager.update(self.grid, self.enemy_manager.enemies):
                logger.debug("Enemy frozen at (%d, %d)", enemy.x, enemy.y)

            if self.grid.is_adjacent_to_wall(player.x, player.y):
                self.particle_system.create_sparkle(*tile_center(player.visual_x, player.visual_y))

        self.particle_system.update()

    def _on_player_moved(self):
        """Item pickup, level completion and contact after a player step"""
        player = self.player

        if self.grid.collect_item(player.x, player.y):
            player.collect_item()
            self.score_manager.add_points(SCORE_ITEM)

            if player.inventory >= self.items_total:
                self.score_manager.stop_clock()
                bonus = self.score_manager.apply_time_bonus()
                self.state_manager.transition_to(
                    GameState.LEVEL_COMPLETE,
                    score=self.score_manager.current_score,
                    time_bonus=bonus,
                    elapsed=self.score_manager.elapsed_seconds()
                )
                logger.info(
                    "Level complete: score=%d time_bonus=%d",
                    self.score_manager.current_score, bonus
                )
                return

        self._check_enemy_contact()

    def _check_enemy_contact(self):
        return self.collision_handler.check_player_enemies(
            self.player, self.enemy_manager, self._on_enemy_hit
        )

    def _on_enemy_hit(self, enemy, x, y):
        """
        Damage, penalty and explosion for one contact

        Returns:
            True if the session ended
        """
        self.particle_system.create_explosion(*tile_center(x, y))
        died = self.player.take_hit()
        self.score_manager.add_points(SCORE_HIT_PENALTY)

        if died:
            self.score_manager.stop_clock()
            self.state_manager.transition_to(
                GameState.GAME_OVER,
                score=self.score_manager.current_score
            )
            logger.info("Game over: score=%d", self.score_manager.current_score)
            return True

        # No grace period after respawning
        self.player.respawn()
        return False

    # ---------- render boundary ----------

    def snapshot(self):
        """Read-only view of the current frame"""
        player = self.player
        return FrameSnapshot(
            tiles=self.grid.copy_tiles(),
            player=PlayerView(
                player.x, player.y, player.visual_x, player.visual_y,
                player.health, player.inventory, tuple(player.direction)
            ),
            enemies=tuple(
                EnemyView(
                    e.x, e.y, e.visual_x, e.visual_y,
                    e.frozen, e.freeze_timer, e.get_color()
                )
                for e in self.enemy_manager
            ),
            projectiles=tuple(
                ProjectileView(p.x, p.y, p.visual_x, p.visual_y, (p.dir_x, p.dir_y))
                for p in self.projectile_manager.projectiles
            ),
            particles=tuple(
                ParticleView(
                    p.kind, p.x, p.y, p.size, p.color, p.opacity,
                    getattr(p, 'rotation', None)
                )
                for p in self.particle_system.particles
            ),
            score=self.score_manager.current_score,
            high_score=self.score_manager.high_score,
            state=self.state_manager.current_state,
            difficulty=self.selected_difficulty,
            items_total=self.items_total,
            frame=self.frame_count,
            elapsed_seconds=self.score_manager.elapsed_seconds(),
            state_data=dict(self.state_manager.state_data),
        )

    def __repr__(self):
        return (f"GameSession(state={self.state_manager.get_state_name()}, "
                f"difficulty={self.difficulty.name}, frame={self.frame_count})")
