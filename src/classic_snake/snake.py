"""Snake body representation and direction handling."""

from __future__ import annotations

import enum
from collections import deque

from classic_snake.board import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return OPPOSITES[self]

    def is_opposite(self, other: Direction) -> bool:
        """Return True if *other* would be a 180° reversal of this one."""
        return self.opposite is other

    def shift(self, cell: Cell) -> Cell:
        """Return *cell* moved one unit in this direction."""
        dx, dy = self.value
        x, y = cell
        return x + dx, y + dy

    def to_json(self) -> str:
        return self.name.lower()


# Pairs that would cause an instant 180° reversal.
OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. A set of occupied
    cells is kept alongside the deque so lookups stay O(1).
    """

    def __init__(self, start: Cell) -> None:
        self.body: deque[Cell] = deque([start])
        self._occupied: set[Cell] = {start}

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head position without moving."""
        return direction.shift(self.head)

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self._occupied

    def push_head(self, cell: Cell) -> None:
        """Prepend a new head segment."""
        self.body.appendleft(cell)
        self._occupied.add(cell)

    def pop_tail(self) -> Cell:
        """Remove and return the tail segment."""
        vacated = self.body.pop()
        self._occupied.discard(vacated)
        return vacated

    def cells(self) -> tuple[Cell, ...]:
        return tuple(self.body)
