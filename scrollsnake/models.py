"""Data models."""

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

from .constants import DEFAULT_COLOR, GAME_SIZE, INITIAL_LENGTH, SEG_SIZE
from .persistence import HighScoreStore

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -SEG_SIZE)
    DOWN = (0, SEG_SIZE)
    LEFT = (-SEG_SIZE, 0)
    RIGHT = (SEG_SIZE, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameStatus(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


def _wrap(value):
    """Sign-preserving remainder by the cell size (C fmod, not Euclidean)."""
    if abs(value) < SEG_SIZE:
        return value
    wrapped = math.fmod(value, SEG_SIZE)
    return int(wrapped) if isinstance(value, int) else wrapped


@dataclass
class Camera:
    """Background scroll offset, trailing the creature's motion."""

    offset_x: float = 0
    offset_y: float = 0

    def shift(self, dx: float, dy: float) -> None:
        self.offset_x = _wrap(self.offset_x - dx)
        self.offset_y = _wrap(self.offset_y - dy)

    def reset(self) -> None:
        self.offset_x = 0
        self.offset_y = 0


@dataclass
class Creature:
    color: str = DEFAULT_COLOR
    segments: list = field(default_factory=list)
    direction: Direction = Direction.RIGHT
    segments_to_keep: int = INITIAL_LENGTH
    camera: Camera = field(default_factory=Camera)

    def __post_init__(self):
        if not self.segments:
            self.reset()

    def reset(self) -> None:
        self.segments = [Cell(-i * SEG_SIZE, 0) for i in range(INITIAL_LENGTH)]
        self.direction = Direction.RIGHT
        self.segments_to_keep = len(self.segments)
        self.camera.reset()

    @property
    def head(self) -> Cell:
        return self.segments[0]

    @property
    def body(self) -> list:
        return self.segments[1:]

    def move(self) -> Cell:
        head = self.head
        new_head = Cell(head.x + self.direction.dx, head.y + self.direction.dy)
        self.segments.insert(0, new_head)
        if len(self.segments) > self.segments_to_keep:
            self.segments.pop()
        # growth is consumed once per extend()
        self.segments_to_keep = len(self.segments)
        self.camera.shift(self.direction.dx, self.direction.dy)
        return new_head

    def extend(self) -> None:
        self.segments_to_keep = len(self.segments) + 1

    def set_direction(self, direction: Direction) -> bool:
        """Point the creature at `direction` unless that would reverse it.

        Returns True when the direction was accepted. Requests between two
        ticks overwrite each other, the last one wins.
        """
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        return True


@dataclass
class Food:
    x: int = 0
    y: int = 0

    @property
    def cell(self) -> Cell:
        return Cell(self.x, self.y)

    def refresh(self, rng: Optional[random.Random] = None) -> Cell:
        """Move to a random cell-aligned position inside the play area.

        The creature's cells are not excluded, food may land on the body.
        """
        rng = rng or random
        num_segments = GAME_SIZE // SEG_SIZE - 2
        self.x = (rng.randrange(num_segments) - num_segments // 2) * SEG_SIZE
        self.y = (rng.randrange(num_segments) - num_segments // 2) * SEG_SIZE
        return self.cell


class Score:
    def __init__(self, store: HighScoreStore):
        self.store = store
        self.current = 0
        self.best = store.load()

    def increase(self) -> None:
        self.current += 1

    def save_best(self) -> bool:
        if self.current <= self.best:
            return False
        self.best = self.current
        self.store.save(self.best)
        logger.info("New best score: %d", self.best)
        return True

    def reset(self) -> None:
        self.save_best()
        self.current = 0
