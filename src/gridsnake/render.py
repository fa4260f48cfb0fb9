from __future__ import annotations

from typing import Iterable

import pygame

from . import config
from .state import Cell, Game


def cell_rect(cell: Cell, square: int) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(x * square, y * square, square, square)


def draw_cells(screen: pygame.Surface, cells: Iterable[Cell], color, square: int) -> None:
    for cell in cells:
        pygame.draw.rect(screen, color, cell_rect(cell, square))


def draw_state(screen: pygame.Surface, game: Game, square: int = config.SQUARE) -> None:
    """Background, then the snake, then the food on top."""
    screen.fill(config.BACKGROUND)
    draw_cells(screen, game.snake.body, config.SNAKE_COLOR, square)
    draw_cells(screen, [game.food.cell], config.FOOD_COLOR, square)
