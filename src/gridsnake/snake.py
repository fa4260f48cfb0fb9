from __future__ import annotations

import logging
from typing import Iterable

from .state import Body, Cell, Direction, add_vectors

log = logging.getLogger(__name__)


class Snake:
    def __init__(self, head: Cell, direction: Direction = Direction.DOWN):
        self.body = Body([head])
        self.direction = direction

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], direction: Direction = Direction.DOWN) -> Snake:
        cells = list(cells)
        if not cells:
            raise ValueError("snake needs at least one cell")
        snake = cls(cells[0], direction)
        snake.body = Body(cells)
        return snake

    @property
    def head(self) -> Cell:
        return self.body.front()

    @property
    def cells(self) -> list[Cell]:
        return list(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def is_collide(self, x: int, y: int) -> bool:
        return (x, y) in self.body

    def turn(self, direction: Direction) -> bool:
        if direction.reverses(self.direction):
            log.debug("rejected reversal %s while moving %s", direction.name, self.direction.name)
            return False
        if direction is not self.direction:
            log.debug("direction %s -> %s", self.direction.name, direction.name)
        self.direction = direction
        return True

    def update(self, eaten: bool, rows: int, cols: int) -> bool:
        """Advance one cell. Returns False when the move hits a wall or the body.

        With ``eaten`` the tail is kept and the snake grows by one cell.
        """
        x, y = add_vectors(self.head, self.direction.step)
        if x < 0 or x >= cols or y < 0 or y >= rows:
            log.debug("wall collision at %s", (x, y))
            return False

        if not eaten:
            self.body.pop_back()

        # Checked before the head is pushed, so the vacated tail cell is free.
        if self.is_collide(x, y):
            log.debug("self collision at %s", (x, y))
            return False

        self.body.push_front((x, y))
        return True

    def __repr__(self) -> str:
        return f"Snake({self.cells!r}, {self.direction.name})"
