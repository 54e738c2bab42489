"""WebSocket connection management and frame serialization."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import WebSocket

from .constants import FOOD_RADIUS, GAME_SIZE, SEG_SIZE, SNAKE_COLORS, TICK_INTERVAL
from .game import GameSession
from .ticker import TickScheduler

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    session: GameSession
    scheduler: Optional[TickScheduler] = None


class ConnectionManager:
    def __init__(self):
        self.connections: dict[WebSocket, Connection] = {}

    def connect(self, ws: WebSocket, session: GameSession) -> Connection:
        conn = Connection(session=session)
        self.connections[ws] = conn
        logger.info("Client connected (%d open)", len(self.connections))
        return conn

    def disconnect(self, ws: WebSocket):
        conn = self.connections.pop(ws, None)
        if conn is None:
            return
        if conn.scheduler is not None:
            conn.scheduler.cancel()
        logger.info("Client disconnected (%d open)", len(self.connections))

    def close_all(self):
        for ws in list(self.connections):
            self.disconnect(ws)

    async def send_frame(self, ws: WebSocket, session: GameSession):
        await ws.send_text(build_frame_msg(session))


def build_frame(session: GameSession) -> dict:
    creature = session.creature
    frame = {
        "offset": [0, 0],
        "snake": None,
        "food": [session.food.x, session.food.y],
        "food_radius": FOOD_RADIUS,
        "score": session.score.current,
        "best": session.score.best,
        "game_over": session.game_over,
    }
    if creature is not None:
        frame["offset"] = [creature.camera.offset_x, creature.camera.offset_y]
        frame["snake"] = {
            "segments": [[c.x, c.y] for c in creature.segments],
            "direction": [creature.direction.dx, creature.direction.dy],
            "color": creature.color,
        }
    return frame


def build_frame_msg(session: GameSession) -> str:
    return json.dumps({"type": "frame", **build_frame(session)})


def build_config_msg() -> str:
    return json.dumps({
        "type": "config",
        "game_size": GAME_SIZE,
        "seg_size": SEG_SIZE,
        "tick_ms": int(TICK_INTERVAL * 1000),
        "colors": SNAKE_COLORS,
    })
