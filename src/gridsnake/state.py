from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from .snake import Snake

Cell = tuple[int, int]
# (x, y); x grows rightwards, y grows downwards.


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def step(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))

    def reverses(self, other: Direction) -> bool:
        return other is self.opposite


class Body:
    """Ordered cells of a snake, head first, tail last.

    Membership is a linear scan; a body never outgrows the grid.
    """

    def __init__(self, cells: Iterable[Cell] = ()):
        self._cells: deque[Cell] = deque(cells)

    def push_front(self, cell: Cell) -> None:
        self._cells.appendleft(cell)

    def pop_back(self) -> Cell:
        return self._cells.pop()

    def front(self) -> Cell:
        return self._cells[0]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return any(cell == c for c in self._cells)

    def __repr__(self) -> str:
        return f"Body({list(self._cells)!r})"


@dataclass(frozen=True)
class Food:
    x: int
    y: int

    @property
    def cell(self) -> Cell:
        return (self.x, self.y)


@dataclass
class Game:
    """Everything one running game owns. Passed explicitly to logic and render."""

    rows: int
    cols: int
    snake: Snake
    food: Food
    score: int = 0
    eaten: bool = False  # growth pending for the next update
    over: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False)
