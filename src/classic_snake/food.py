"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from classic_snake.board import Board, Cell
    from classic_snake.snake import Snake

logger = logging.getLogger(__name__)

# Rejected draws allowed before falling back to the free-cell set.
MAX_REJECTIONS = 32
# Fraction of the board the snake may cover before skipping rejection
# sampling altogether.
DENSE_OCCUPANCY = 0.5


class FoodSpawner:
    """Picks food cells uniformly at random among cells not on the snake.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Sparse boards use rejection sampling; dense boards, or a run of
    unlucky draws, sample from the explicit list of free cells.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        max_rejections: int = MAX_REJECTIONS,
    ) -> None:
        if max_rejections < 0:
            raise ValueError("max_rejections must be >= 0.")
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_rejections = max_rejections

    def spawn(self, snake: Snake) -> Cell | None:
        """Return a random cell not occupied by *snake*.

        Returns ``None`` when the snake covers the whole board.
        """
        if len(snake) >= self.board.size:
            logger.warning("No free cells available for food placement.")
            return None

        if len(snake) < self.board.size * DENSE_OCCUPANCY:
            for _ in range(self.max_rejections + 1):
                cell = self._random_cell()
                if not snake.occupies(cell):
                    logger.debug("Food placed at %s.", cell)
                    return cell

        return self._choose_free(snake)

    def _random_cell(self) -> Cell:
        x = int(self.rng.integers(self.board.width))
        y = int(self.rng.integers(self.board.height))
        return x, y

    def _choose_free(self, snake: Snake) -> Cell:
        free = [cell for cell in self.board.cells() if not snake.occupies(cell)]
        cell = free[int(self.rng.integers(len(free)))]
        logger.debug("Food placed at %s from %d free cells.", cell, len(free))
        return cell
