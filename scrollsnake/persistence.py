"""Best-score storage."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore(ABC):
    """A single named integer that only ever grows."""

    @abstractmethod
    def load(self) -> int:
        ...

    @abstractmethod
    def save(self, value: int) -> None:
        ...


class MemoryHighScoreStore(HighScoreStore):
    def __init__(self, initial: int = 0):
        self.value = initial

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        if value > self.value:
            self.value = value


class JsonHighScoreStore(HighScoreStore):
    """Keeps the best score in a small JSON file, e.g. {"snakeHighScore": 7}.

    Anything unreadable counts as "no high score yet".
    """

    def __init__(self, path, key: str = HIGH_SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring high score file %s: not a JSON object", self.path)
            return {}
        return data

    def _value(self, data: dict) -> int:
        value = data.get(self.key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            if value is not None:
                logger.debug("Invalid stored %s=%r, using 0", self.key, value)
            return 0
        return value

    def load(self) -> int:
        return self._value(self._read())

    def save(self, value: int) -> None:
        data = self._read()
        if value <= self._value(data):
            return
        data[self.key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)
