# storage.py
"""High-score persistence: one integer under a fixed key."""
from pathlib import Path
from typing import Dict, Union
import json
import logging

from .config import DEFAULT_SCORES_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class MemoryStore:
    """Keeps the high score for this session only."""

    def __init__(self, key: str = HIGH_SCORE_KEY):
        self.key = key
        self._data: Dict[str, int] = {}

    def load_high_score(self) -> int:
        return self._data.get(self.key, 0)

    def save_high_score(self, value: int) -> None:
        self._data[self.key] = int(value)


class JsonFileStore:
    """
    Stores the high score in a small JSON object on disk.

    Read/write problems are logged and never raised: a failed read gives 0,
    a failed write leaves the caller's in-memory value as the only copy.
    Other keys already in the file are preserved.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORES_FILE, key: str = HIGH_SCORE_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read(self) -> dict:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning("Could not read scores from %s: %s", self.path, e)
            return {}
        try:
            data = json.loads(text or "{}")
        except ValueError as e:
            logger.warning("Ignoring malformed scores file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring scores file %s: expected a JSON object", self.path)
            return {}
        return data

    def load_high_score(self) -> int:
        value = self._read().get(self.key, 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid high score %r in %s", value, self.path)
            return 0
        return value

    def save_high_score(self, value: int) -> None:
        data = self._read()
        data[self.key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
            return
        logger.debug("Saved high score %d to %s", value, self.path)
