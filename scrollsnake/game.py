"""Core game state and logic."""

import logging
import random
from typing import Optional

from .constants import DEFAULT_COLOR, MAX_COORD, SNAKE_COLORS
from .models import Creature, Direction, Food, GameStatus, Score
from .persistence import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)


def valid_color(color: Optional[str]) -> str:
    if color not in SNAKE_COLORS:
        return DEFAULT_COLOR
    return color


def out_of_bounds(x: int, y: int) -> bool:
    return x > MAX_COORD or x < -MAX_COORD or y > MAX_COORD or y < -MAX_COORD


class GameSession:
    """One player's run: creature, food, score and the Playing/GameOver state."""

    def __init__(self, store: Optional[HighScoreStore] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.score = Score(store or MemoryHighScoreStore())
        self.food = Food()
        self.creature: Optional[Creature] = None
        self.selected_color = DEFAULT_COLOR
        self.status = GameStatus.GAME_OVER
        self.started = False
        self.runs = 0

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def select_color(self, color: Optional[str]) -> str:
        self.selected_color = valid_color(color)
        return self.selected_color

    def start(self, color: Optional[str] = None) -> None:
        if color is not None:
            self.select_color(color)
        self.creature = Creature(color=self.selected_color)
        self.food.refresh(self.rng)
        self.score.reset()
        self.started = True
        self._enter_playing()

    def restart(self) -> None:
        if self.creature is None:
            self.start()
            return
        self.creature.reset()
        self.creature.color = self.selected_color
        self.food.refresh(self.rng)
        self.score.reset()
        self._enter_playing()

    def _enter_playing(self) -> None:
        self.status = GameStatus.PLAYING
        self.runs += 1
        logger.info("Run %d started (best %d)", self.runs, self.score.best)

    def _enter_game_over(self, reason: str) -> None:
        self.status = GameStatus.GAME_OVER
        logger.info("Game over (%s) with score %d", reason, self.score.current)
        self.score.save_best()

    def tick(self) -> GameStatus:
        if self.status != GameStatus.PLAYING:
            return self.status

        head = self.creature.move()

        if head == self.food.cell:
            self.food.refresh(self.rng)
            self.creature.extend()
            self.score.increase()

        if out_of_bounds(head.x, head.y):
            self._enter_game_over("wall")
        elif head in self.creature.body:
            self._enter_game_over("self")

        return self.status

    def handle_direction(self, direction: Direction) -> None:
        """Steer while playing, restart after game over, ignore before start."""
        if not self.started:
            return
        if self.game_over:
            self.restart()
            return
        self.creature.set_direction(direction)
