"""FastAPI application — HTTP route, WebSocket endpoint, per-connection game loop."""

import json
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .connection_manager import Connection, ConnectionManager, build_config_msg
from .constants import HIGH_SCORE_FILE, HOST, PORT
from .controls import apply_key
from .game import GameSession
from .models import GameStatus
from .persistence import JsonHighScoreStore
from .ticker import Ticker, TickScheduler

logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
HTML_PATH = os.path.join(ROOT_DIR, "index.html")
STATIC_DIR = os.path.join(ROOT_DIR, "static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Best score file: %s", HIGH_SCORE_FILE)
    yield
    manager.close_all()


app = FastAPI(lifespan=lifespan)
manager = ConnectionManager()
store = JsonHighScoreStore(HIGH_SCORE_FILE)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/")
async def serve_index():
    return FileResponse(HTML_PATH, media_type="text/html")


def frame_callback(ws: WebSocket, conn: Connection, ticker: Ticker):
    session = conn.session

    async def on_frame(now: float):
        if ticker.ready(now) and session.tick() == GameStatus.GAME_OVER:
            # draw the game over screen once, then idle until a restart
            conn.scheduler.stop()
        try:
            await manager.send_frame(ws, session)
        except WebSocketDisconnect:
            logger.debug("Client closed during a frame")
            conn.scheduler.stop()

    return on_frame


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    session = GameSession(store=store)
    conn = manager.connect(ws, session)
    ticker = Ticker()
    conn.scheduler = TickScheduler(frame_callback(ws, conn, ticker))
    try:
        await ws.send_text(build_config_msg())
        await manager.send_frame(ws, session)
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except ValueError:
                logger.debug("Ignoring malformed message: %.80s", raw)
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("type") == "start":
                if session.started:
                    session.select_color(msg.get("color"))
                else:
                    session.start(msg.get("color"))
                    conn.scheduler.start()
            elif msg.get("type") == "color":
                session.select_color(msg.get("color"))
            elif msg.get("type") == "input":
                was_over = session.game_over
                if apply_key(session, msg.get("key")) and not session.game_over:
                    if was_over:
                        # first frame of the new run ticks at once
                        ticker.reset()
                    conn.scheduler.start()
            else:
                logger.debug("Ignoring message type %r", msg.get("type"))
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WebSocket session failed")
    finally:
        manager.disconnect(ws)


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    logger.info("Snake server starting on http://localhost:%d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
