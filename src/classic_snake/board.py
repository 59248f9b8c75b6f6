"""Board representation for the snake game."""

from __future__ import annotations

from collections.abc import Iterator

Cell = tuple[int, int]


class Board:
    """Fixed-size rectangular grid of cells.

    Coordinates use (x, y) ordering: ``x`` grows to the right and ``y``
    grows downwards, both 0-indexed. The board only knows its dimensions;
    what occupies a cell is tracked by the engine.
    """

    __slots__ = ("_width", "_height")

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells on the board."""
        return self._width * self._height

    def contains(self, cell: Cell) -> bool:
        """Check whether a cell lies within the board."""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield x, y

    def to_dict(self) -> dict:
        """Serialize board dimensions to a dictionary."""
        return {"width": self._width, "height": self._height}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._width, self._height) == (other._width, other._height)

    def __hash__(self) -> int:
        return hash((self._width, self._height))

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height})"
