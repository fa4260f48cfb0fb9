from __future__ import annotations

ROWS, COLS = 20, 20
SQUARE = 20
WIDTH, HEIGHT = COLS * SQUARE, ROWS * SQUARE

UPS = 10  # logical updates per second
FPS = 60
MAX_CATCH_UP = 5

TITLE = "RustySnake"

FOOD_SEED = (1, 1)
RESPAWN_ATTEMPTS = 1000

BACKGROUND = (0, 255, 0)
SNAKE_COLOR = (255, 0, 0)
FOOD_COLOR = (255, 255, 255)
