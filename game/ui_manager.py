"""
UI Manager - HUD panel and the full-screen menu, pause and result screens
"""

import pygame
from utils.colors import (
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM, COLOR_TEXT_DANGER,
    COLOR_PANEL_BG, COLOR_MENU_SELECTION, COLOR_MENU_OVERLAY, COLOR_ENEMY
)
from utils.helpers import format_time, format_score
from maze.difficulty import DIFFICULTY_LEVELS
from utils.constants import DIFFICULTY_NAMES, PLAYER_MAX_HEALTH

COLOR_HEALTH_EMPTY = (60, 60, 80)

MENU_HELP = (
    "LEFT/RIGHT or 1-3: Difficulty | ENTER: Start",
    "Arrows: Move | SPACE: Stun gun | P: Pause | ESC: Menu",
)
RESTART_HELP = (
    "Press ENTER or SPACE to play again",
    "Press ESC for menu",
)


class UIManager:
    """
    Draws everything that is text rather than maze.

    Font sizes: small for help and panel stats, medium for prompts,
    large for scores and menu options, title for screen headings.
    """
    def __init__(self, font_name="consolas"):
        pygame.font.init()
        self.fonts = {
            'small': pygame.font.SysFont(font_name, 14),
            'medium': pygame.font.SysFont(font_name, 18),
            'large': pygame.font.SysFont(font_name, 28, bold=True),
            'title': pygame.font.SysFont(font_name, 48, bold=True),
        }

    def _text(self, screen, message, size, color, center):
        """Render one line centred on a point; returns its rect"""
        surface = self.fonts[size].render(message, True, color)
        rect = surface.get_rect(center=center)
        screen.blit(surface, rect)
        return rect

    def _column(self, screen, lines, size, color, top, spacing):
        """Stack centred lines down the middle of the screen"""
        mid_x = screen.get_width() // 2
        for i, line in enumerate(lines):
            self._text(screen, line, size, color, (mid_x, top + i * spacing))

    def draw_hud(self, screen, snapshot, panel_y, screen_w, panel_h):
        """
        Draw the status panel under the maze

        Args:
            screen: Pygame screen
            snapshot: FrameSnapshot for this frame
            panel_y: Top of the panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        self._draw_health(screen, snapshot.player.health, 10, panel_y + 10)

        mid_x = screen_w // 2
        self._text(screen, format_score(snapshot.score), 'large', COLOR_TEXT,
                   (mid_x, panel_y + 20))
        self._text(screen, f"High: {format_score(snapshot.high_score)}", 'small',
                   COLOR_TEXT_HIGHLIGHT, (mid_x, panel_y + 45))

        label = DIFFICULTY_LEVELS[snapshot.difficulty].label
        right = (
            f"Items: {snapshot.player.inventory}/{snapshot.items_total}",
            f"{label} | {format_time(snapshot.elapsed_seconds)}",
        )
        for row, line in enumerate(right):
            surface = self.fonts['small'].render(line, True, COLOR_TEXT)
            screen.blit(surface, (screen_w - 190, panel_y + 10 + row * 20))

    def _draw_health(self, screen, health, x, y):
        """One block per life, dimmed once lost"""
        screen.blit(self.fonts['small'].render("Health:", True, COLOR_TEXT), (x, y + 3))

        for slot in range(PLAYER_MAX_HEALTH):
            color = COLOR_ENEMY if slot < health else COLOR_HEALTH_EMPTY
            pygame.draw.rect(screen, color, (x + 70 + slot * 26, y, 20, 20), border_radius=4)

    def draw_menu(self, screen, title, selected_difficulty, high_score):
        """
        Start screen with difficulty selection

        Args:
            screen: Pygame screen
            title: Game title
            selected_difficulty: Selected difficulty name
            high_score: Best score so far
        """
        mid_x = screen.get_width() // 2
        self._draw_overlay(screen)

        self._text(screen, title, 'title', COLOR_TEXT_HIGHLIGHT, (mid_x, 90))
        self._text(screen, f"High score: {format_score(high_score)}", 'medium',
                   COLOR_TEXT, (mid_x, 140))

        for i, name in enumerate(DIFFICULTY_NAMES):
            chosen = name == selected_difficulty
            rect = self._text(
                screen, f"{i + 1}. {DIFFICULTY_LEVELS[name].label}", 'large',
                COLOR_TEXT_HIGHLIGHT if chosen else COLOR_TEXT, (mid_x, 220 + i * 50)
            )
            if chosen:
                pygame.draw.rect(screen, COLOR_MENU_SELECTION, rect.inflate(40, 16), 3,
                                 border_radius=8)

        self._column(screen, MENU_HELP, 'small', COLOR_TEXT_DIM,
                     screen.get_height() - 70, 22)

    def _draw_overlay(self, screen):
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

    def draw_level_complete(self, screen, score, time_bonus, time_taken):
        """Result screen after the last item is collected"""
        mid_y = screen.get_height() // 2
        self._draw_overlay(screen)

        self._text(screen, "LEVEL COMPLETE!", 'title', COLOR_TEXT_HIGHLIGHT,
                   (screen.get_width() // 2, mid_y - 100))
        summary = (
            f"Score: {format_score(score)}",
            f"Time bonus: {format_score(time_bonus)}",
            f"Time: {format_time(time_taken)}",
        )
        self._column(screen, summary, 'large', COLOR_TEXT, mid_y - 20, 40)
        self._draw_restart_prompt(screen)

    def draw_game_over(self, screen, score):
        """Result screen after the last life is lost"""
        mid_x, mid_y = screen.get_width() // 2, screen.get_height() // 2
        self._draw_overlay(screen)

        self._text(screen, "GAME OVER", 'title', COLOR_TEXT_DANGER, (mid_x, mid_y - 50))
        self._text(screen, f"Score: {format_score(score)}", 'large', COLOR_TEXT,
                   (mid_x, mid_y + 20))
        self._draw_restart_prompt(screen)

    def _draw_restart_prompt(self, screen):
        self._column(screen, RESTART_HELP, 'medium', COLOR_TEXT_DIM,
                     screen.get_height() - 110, 30)

    def draw_paused(self, screen):
        mid_x, mid_y = screen.get_width() // 2, screen.get_height() // 2
        self._draw_overlay(screen)

        self._text(screen, "PAUSED", 'title', COLOR_TEXT_HIGHLIGHT, (mid_x, mid_y - 50))
        self._text(screen, "Press P to resume", 'large', COLOR_TEXT, (mid_x, mid_y + 20))
