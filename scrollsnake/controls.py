"""Keyboard input to direction requests."""

from typing import Optional

from .game import GameSession
from .models import Direction

KEY_DIRECTIONS = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


def map_key(key: Optional[str]) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def apply_key(session: GameSession, key: Optional[str]) -> bool:
    """Forward a directional key to the session. Returns False for other keys."""
    direction = map_key(key)
    if direction is None:
        return False
    session.handle_direction(direction)
    return True
