"""Best-score persistence.

A single JSON file holds the best score ever reported. ``submit`` is a
monotone max: a lower score never overwrites a higher one.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from config import HIGH_SCORE_FILE

SAVE_VERSION = 1

logger = logging.getLogger(__name__)


def load_high_score(path: Path) -> int:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return 0
    except (OSError, ValueError):
        logger.warning("could not read high score from %s, starting at 0", path)
        return 0
    if not isinstance(data, dict):
        return 0
    try:
        return max(0, int(data.get("high_score", 0)))
    except (TypeError, ValueError):
        return 0


def write_high_score(path: Path, score: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "high_score": int(score),
        "version": SAVE_VERSION,
        "saved_at": datetime.now().isoformat(timespec="seconds"),
    }
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, ensure_ascii=True, indent=2)
    tmp.replace(path)
    return path


class HighScoreStore:
    def __init__(self, path: Path | str = HIGH_SCORE_FILE) -> None:
        self.path = Path(path)
        self.best = load_high_score(self.path)

    def is_new_best(self, score: int) -> bool:
        return int(score) > self.best

    def submit(self, score: int) -> bool:
        """Record ``score`` if it beats the stored best. Returns True if it did."""
        score = int(score)
        if score <= self.best:
            return False
        self.best = score
        write_high_score(self.path, score)
        logger.info("new high score %d saved to %s", score, self.path)
        return True


__all__ = ["HighScoreStore", "load_high_score", "write_high_score"]
