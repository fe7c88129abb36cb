"""
Maze Dash - collect every item, dodge the enemies, stun them when cornered
"""

import logging
import os
import sys

os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

from game.game_state import GameState
from game.input_mapper import InputMapper
from game.renderer import Renderer
from game.session import GameSession
from game.ui_manager import UIManager
from utils.constants import FPS, PANEL_H, TILE_SIZE, GAME_TITLE, GAME_VERSION

logger = logging.getLogger(__name__)


class MazeDashGame:
    """
    Main game class
    """
    def __init__(self, session=None):
        pygame.init()

        # Core simulation
        self.session = session or GameSession()

        # Screen sized to the map plus the HUD panel
        self.maze_h = self.session.grid.rows * TILE_SIZE
        self.screen_w = self.session.grid.cols * TILE_SIZE
        self.screen_h = self.maze_h + PANEL_H
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        # Managers
        self.input_mapper = InputMapper()
        self.renderer = Renderer()
        self.ui_manager = UIManager()

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.WINDOWFOCUSLOST:
                self.input_mapper.release_all()
                continue

            intent = self.input_mapper.handle_event(event)
            if intent is None:
                continue

            # ESC on the start screen quits
            if self.session.state_manager.is_state(GameState.MENU) and event.key == pygame.K_ESCAPE:
                self.running = False
                return

            self.session.handle_intent(intent)

    def update(self):
        """Advance the simulation by one frame"""
        return self.session.step(self.input_mapper.move_direction())

    def render(self, snapshot):
        """Render current game state"""
        state = snapshot.state

        if state == GameState.MENU:
            self.renderer.draw(self.screen, snapshot)
            self.ui_manager.draw_menu(
                self.screen, GAME_TITLE, snapshot.difficulty, snapshot.high_score
            )
            pygame.display.flip()
            return

        self.renderer.draw(self.screen, snapshot)
        self.ui_manager.draw_hud(
            self.screen, snapshot, self.maze_h, self.screen_w, PANEL_H
        )

        if state == GameState.PAUSED:
            self.ui_manager.draw_paused(self.screen)

        elif state == GameState.LEVEL_COMPLETE:
            data = snapshot.state_data
            self.ui_manager.draw_level_complete(
                self.screen,
                data.get('score', snapshot.score),
                data.get('time_bonus', 0),
                data.get('elapsed', snapshot.elapsed_seconds)
            )

        elif state == GameState.GAME_OVER:
            self.ui_manager.draw_game_over(
                self.screen, snapshot.state_data.get('score', snapshot.score)
            )

        pygame.display.flip()

    def run(self):
        """Main game loop"""
        logger.info("%s v%s started", GAME_TITLE, GAME_VERSION)

        while self.running:
            self.clock.tick(FPS)

            self.handle_events()
            snapshot = self.update()
            self.render(snapshot)

        pygame.quit()
        sys.exit()


def main():
    """Entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    game = MazeDashGame()
    game.run()


if __name__ == "__main__":
    main()
