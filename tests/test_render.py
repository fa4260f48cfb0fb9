import pygame

from gridsnake import config
from gridsnake.logic import new_game
from gridsnake.render import cell_rect, draw_state
from gridsnake.snake import Snake
from gridsnake.state import Direction, Food


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_draw_state_paints_background_snake_and_food():
    game = new_game(rows=3, cols=3)
    game.snake = Snake.from_cells([(1, 1), (1, 2)], Direction.UP)
    game.food = Food(0, 0)
    surface = pygame.Surface((30, 30))

    draw_state(surface, game, square=10)

    assert _rgb(surface, 15, 15) == config.SNAKE_COLOR
    assert _rgb(surface, 12, 28) == config.SNAKE_COLOR
    assert _rgb(surface, 5, 5) == config.FOOD_COLOR
    assert _rgb(surface, 9, 9) == config.FOOD_COLOR
    assert _rgb(surface, 25, 25) == config.BACKGROUND
    assert _rgb(surface, 10, 0) == config.BACKGROUND


def test_draw_state_clears_previous_frame():
    game = new_game(rows=3, cols=3)
    game.food = Food(0, 0)
    surface = pygame.Surface((30, 30))
    surface.fill((1, 2, 3))

    draw_state(surface, game, square=10)

    assert _rgb(surface, 29, 29) == config.BACKGROUND


def test_cell_rect_scales_grid_to_pixels():
    assert cell_rect((0, 0), 20) == pygame.Rect(0, 0, 20, 20)
    assert cell_rect((3, 2), 20) == pygame.Rect(60, 40, 20, 20)


def test_food_is_drawn_over_snake():
    game = new_game(rows=3, cols=3)
    game.food = Food(*game.snake.head)
    surface = pygame.Surface((30, 30))

    draw_state(surface, game, square=10)

    assert _rgb(surface, 15, 15) == config.FOOD_COLOR
