import random

import pytest

from scrollsnake.game import GameSession
from scrollsnake.models import Cell
from scrollsnake.persistence import MemoryHighScoreStore


class FixedRandom:
    """randrange() always returns the same index."""

    def __init__(self, index):
        self.index = index

    def randrange(self, stop):
        return self.index


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def session(store):
    s = GameSession(store=store, rng=random.Random(1234))
    s.start()
    return s


def place_food(session, x, y):
    session.food.x, session.food.y = x, y
    return Cell(x, y)
