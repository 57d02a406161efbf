"""Best-score persistence in a small JSON file."""

from __future__ import annotations

import json
import logging
import os

from .config import HIGH_SCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: str = HIGH_SCORE_FILE) -> None:
        self.path = path

    def load(self) -> int:
        """Stored best score, or 0 if there is none or it cannot be read."""
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get("high_score", 0)))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> bool:
        """Write the score; failures are logged and reported as False."""
        tmp = self.path + ".tmp"
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({"high_score": int(score)}, f)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return False
        logger.debug("Saved high score %d to %s", score, self.path)
        return True
