from .snake import Snake
from .state import Body, Direction, Food, Game

__all__ = ["Body", "Direction", "Food", "Game", "Snake"]
