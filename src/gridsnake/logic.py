from __future__ import annotations

import logging
import random

import pygame

from . import config
from .snake import Snake
from .state import Direction, Food, Game

log = logging.getLogger(__name__)

KEY_MAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def new_game(
    rows: int = config.ROWS,
    cols: int = config.COLS,
    seed: int | None = None,
    food: tuple[int, int] = config.FOOD_SEED,
) -> Game:
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must be at least 1x1, got {cols}x{rows}")

    rng = random.Random(seed)
    snake = Snake((cols // 2, rows // 2), Direction.DOWN)

    fx, fy = food
    if 0 <= fx < cols and 0 <= fy < rows and not snake.is_collide(fx, fy):
        first_food: Food | None = Food(fx, fy)
    else:
        first_food = respawn_food(snake, rows, cols, rng)
    if first_food is None:
        # 1x1 grid: nowhere to put food but under the snake.
        log.warning("no free cell for the first food, placing it under the snake at %s", snake.head)
        first_food = Food(*snake.head)

    game = Game(rows=rows, cols=cols, snake=snake, food=first_food, rng=rng)
    log.info("new game %dx%d, snake at %s, food at %s", cols, rows, snake.head, first_food.cell)
    return game


def food_update(food: Food, snake: Snake) -> bool:
    """True if the snake's head is on the food."""
    return snake.head == food.cell


def respawn_food(
    snake: Snake,
    rows: int,
    cols: int,
    rng: random.Random,
    max_attempts: int = config.RESPAWN_ATTEMPTS,
) -> Food | None:
    for _ in range(max_attempts):
        x = rng.randrange(cols)
        y = rng.randrange(rows)
        if not snake.is_collide(x, y):
            return Food(x, y)

    free = [(x, y) for y in range(rows) for x in range(cols) if not snake.is_collide(x, y)]
    if not free:
        log.warning("no free cell left for food")
        return None
    log.warning("food sampling gave up after %d attempts, picking from %d free cells", max_attempts, len(free))
    return Food(*rng.choice(free))


def update(game: Game) -> bool:
    """One fixed-rate tick. Returns False once the game is over."""
    if game.over:
        return False

    if not game.snake.update(game.eaten, game.rows, game.cols):
        game.over = True
        log.info("game over, score %d, length %d", game.score, len(game.snake))
        return False

    if game.eaten:
        game.score += 1
        game.eaten = False

    game.eaten = food_update(game.food, game.snake)
    if game.eaten:
        food = respawn_food(game.snake, game.rows, game.cols, game.rng)
        # Full grid: leave the food; the pending growth ends the game next tick.
        if food is not None:
            game.food = food
            log.debug("food respawned at %s", food.cell)
    return True


def press(game: Game, direction: Direction) -> bool:
    if game.over:
        return False
    return game.snake.turn(direction)


def handle_input(game: Game, events) -> None:
    for event in events:
        if event.type != pygame.KEYDOWN:
            continue
        direction = KEY_MAP.get(event.key)
        if direction is not None:
            press(game, direction)
