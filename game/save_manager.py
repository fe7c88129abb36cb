"""
Save/Load System - persists the high score to JSON
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from utils.constants import HIGH_SCORE_FILE, SAVE_DIR

logger = logging.getLogger(__name__)


class SaveManager:
    """
    Best-effort high score storage.
    Neither method raises: bad data reads as 0 and failed writes return False.
    """
    def __init__(self, save_dir=SAVE_DIR, filename=HIGH_SCORE_FILE):
        """
        Args:
            save_dir: Directory to store the high score file
            filename: Name of the JSON file inside save_dir
        """
        self.save_dir = Path(save_dir)
        self.save_path = self.save_dir / filename

    def load_high_score(self):
        """
        Load the stored high score

        Returns:
            int: Stored score, or 0 if missing or corrupt
        """
        try:
            if not self.save_path.exists():
                return 0

            with open(self.save_path, 'r') as f:
                data = json.load(f)

        except (OSError, ValueError) as e:
            logger.warning("Failed to load high score: %s", e)
            return 0

        score = data.get('score', 0) if isinstance(data, dict) else None
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            logger.warning("Ignoring corrupt high score data in %s", self.save_path)
            return 0

        return score

    def save_high_score(self, value, timestamp=None):
        """
        Save the high score

        Args:
            value: Score to store
            timestamp: datetime of the record, defaults to now

        Returns:
            bool: True if save successful
        """
        if timestamp is None:
            timestamp = datetime.now()

        try:
            self.save_dir.mkdir(parents=True, exist_ok=True)

            data = {
                'score': int(value),
                'date': timestamp.isoformat()
            }
            with open(self.save_path, 'w') as f:
                json.dump(data, f, indent=2)

            return True

        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to save high score: %s", e)
            return False
