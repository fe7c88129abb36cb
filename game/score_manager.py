"""
Score tracking - current score, time bonus and the persisted high score
"""

import logging
import math
import time

from utils.constants import SCORE_TIME_BONUS_BASE, SCORE_TIME_BONUS_PER_SECOND

logger = logging.getLogger(__name__)


class ScoreManager:
    """
    Tracks the session score against the all-time high score
    """
    def __init__(self, save_manager, on_new_high_score=None, clock=time.monotonic):
        """
        Args:
            save_manager: SaveManager used to load and persist the high score
            on_new_high_score: Callback fired once per session when the
                previous high score is first beaten
            clock: Seconds source for the time bonus
        """
        self.save_manager = save_manager
        self.on_new_high_score = on_new_high_score
        self.clock = clock

        self.current_score = 0
        self.high_score = 0
        self.start_time = clock()
        self.stopped_at = None
        self._celebrated = False

    def init(self):
        """Load the persisted high score"""
        self.high_score = self.save_manager.load_high_score()
        return self.high_score

    def reset(self):
        """Start a new session"""
        self.current_score = 0
        self.start_time = self.clock()
        self.stopped_at = None
        self._celebrated = False

    def add_points(self, points):
        """Add (or subtract) points; the score never goes below zero"""
        self.current_score = max(0, self.current_score + points)
        self.check_high_score()

    def check_high_score(self):
        """
        Promote the current score to high score when it is beaten

        Returns:
            bool: True if the high score changed
        """
        if self.current_score <= self.high_score:
            return False

        self.high_score = self.current_score
        self.save_manager.save_high_score(self.high_score)

        if not self._celebrated:
            self._celebrated = True
            logger.info("New high score: %d", self.high_score)
            if self.on_new_high_score is not None:
                self.on_new_high_score()

        return True

    def elapsed_seconds(self):
        """Whole seconds of play since the session started, pauses excluded"""
        now = self.clock() if self.stopped_at is None else self.stopped_at
        return math.floor(now - self.start_time)

    def stop_clock(self):
        """Hold the elapsed time while paused or once the session has ended"""
        if self.stopped_at is None:
            self.stopped_at = self.clock()

    def resume_clock(self):
        """Restart the clock; the stopped span does not count"""
        if self.stopped_at is not None:
            self.start_time += self.clock() - self.stopped_at
            self.stopped_at = None

    def calculate_time_bonus(self):
        """Level completion bonus, shrinking 10 points per second"""
        return max(0, SCORE_TIME_BONUS_BASE - self.elapsed_seconds() * SCORE_TIME_BONUS_PER_SECOND)

    def apply_time_bonus(self):
        """Add the time bonus and return it"""
        bonus = self.calculate_time_bonus()
        self.add_points(bonus)
        return bonus

    def __repr__(self):
        return f"ScoreManager(score={self.current_score}, high={self.high_score})"
