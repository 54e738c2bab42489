"""Game constants."""

import os

GAME_SIZE = 600
SEG_SIZE = 20
MAX_COORD = GAME_SIZE // 2 - SEG_SIZE
INITIAL_LENGTH = 3
FOOD_RADIUS = 10

TICK_INTERVAL = 0.1
FRAME_RATE = 60

SNAKE_COLORS = [
    "#00ff00", "#00ffff", "#ff00ff", "#ffcc00",
    "#ff6600", "#66ccff", "#ffffff",
]
DEFAULT_COLOR = SNAKE_COLORS[0]

HIGH_SCORE_KEY = "snakeHighScore"

HOST = os.environ.get("SCROLLSNAKE_HOST", "0.0.0.0")
PORT = int(os.environ.get("SCROLLSNAKE_PORT", "8765"))
HIGH_SCORE_FILE = os.environ.get("SCROLLSNAKE_HIGH_SCORE_FILE", "snake_highscore.json")
