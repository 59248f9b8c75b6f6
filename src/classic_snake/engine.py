"""Tick-based game engine composing board, snake, and food logic."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from classic_snake.board import Board, Cell
from classic_snake.config import GameConfig
from classic_snake.food import FoodSpawner
from classic_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

ScoreObserver = Callable[[int], None]


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of the engine, handed to renderers."""

    snake: tuple[Cell, ...]
    direction: Direction
    pending_direction: Direction
    food: Cell | None
    score: int
    is_over: bool
    tick_interval_ms: int
    steps: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Return the snapshot as a JSON-serializable dict."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "direction": self.direction.to_json(),
            "pending_direction": self.pending_direction.to_json(),
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "is_over": self.is_over,
            "tick_interval_ms": self.tick_interval_ms,
            "steps": self.steps,
        }


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the snake, its direction, the food cell, the score and
    the game-over flag. A driver feeds it direction intents through
    :meth:`request_direction` and advances it with :meth:`tick`; both are
    no-ops once the game is over, until :meth:`reset` starts a new game.
    """

    def __init__(
        self,
        board: Board | None = None,
        start: Cell | None = None,
        score_increment: int = 10,
        initial_tick_ms: int = 300,
        target_tick_ms: int = 150,
        tick_step_ms: int = 3,
        seed: int | None = None,
        score_observer: ScoreObserver | None = None,
    ) -> None:
        self.board = board if board is not None else Board()
        if self.board.size < 2:
            raise ValueError("Board must hold at least two cells.")
        self.start = (
            start if start is not None
            else (self.board.width // 2, self.board.height // 2)
        )
        if not self.board.contains(self.start):
            raise ValueError(f"Start cell {self.start} lies outside the board.")
        if target_tick_ms > initial_tick_ms:
            raise ValueError("target_tick_ms must not exceed initial_tick_ms.")
        if score_increment < 1:
            raise ValueError("score_increment must be at least 1.")
        if tick_step_ms < 0:
            raise ValueError("tick_step_ms must be >= 0.")

        self.score_increment = score_increment
        self.initial_tick_ms = initial_tick_ms
        self.target_tick_ms = target_tick_ms
        self.tick_step_ms = tick_step_ms
        self.score_observer = score_observer

        self.rng = np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(self.board, rng=self.rng)

        self.reset()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        score_observer: ScoreObserver | None = None,
    ) -> GameEngine:
        """Build an engine from a validated :class:`GameConfig`."""
        return cls(
            board=Board(config.grid_width, config.grid_height),
            start=config.start,
            score_increment=config.score_increment,
            initial_tick_ms=config.initial_tick_ms,
            target_tick_ms=config.target_tick_ms,
            tick_step_ms=config.tick_step_ms,
            seed=config.seed,
            score_observer=score_observer,
        )

    # ------------------------------------------------------------------
    # Driver API
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a new game, discarding all previous state."""
        self._snake = Snake(self.start)
        self._direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self._score = 0
        self._is_over = False
        self._steps = 0
        self._tick_interval_ms = self.initial_tick_ms
        self._food = self.food_spawner.spawn(self._snake)
        self._notify_score()

    def request_direction(self, direction: Direction) -> None:
        """Queue a direction change for the next tick.

        Reversals of the direction the snake is currently moving in are
        ignored, as are all requests after game over.
        """
        if self._is_over:
            return
        if direction.is_opposite(self._direction):
            return
        self._pending_direction = direction

    def tick(self) -> None:
        """Advance the game by one step."""
        if self._is_over:
            return

        self._direction = self._pending_direction
        new_head = self._snake.next_head(self._direction)

        # --- boundary check ---
        if not self.board.contains(new_head):
            self._end_game("wall")
            return

        # --- self-collision check ---
        # Checked against the whole pre-move body, so the cell the tail is
        # about to vacate still counts as occupied.
        if self._snake.occupies(new_head):
            self._end_game("self")
            return

        # --- move ---
        self._snake.push_head(new_head)
        self._steps += 1

        if new_head == self._food:
            self._score += self.score_increment
            self._notify_score()
            self._food = self.food_spawner.spawn(self._snake)
            if self._food is None:
                self._end_game("board full")
        else:
            self._snake.pop_tail()

    def advance_speed(self) -> None:
        """Shorten the tick interval by one step, down to the target."""
        if self._tick_interval_ms > self.target_tick_ms:
            self._tick_interval_ms = max(
                self.target_tick_ms, self._tick_interval_ms - self.tick_step_ms,
            )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def snake(self) -> tuple[Cell, ...]:
        return self._snake.cells()

    @property
    def head(self) -> Cell:
        return self._snake.head

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def food(self) -> Cell | None:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def tick_interval_ms(self) -> int:
        """Delay the driver should wait before the next tick."""
        return self._tick_interval_ms

    @property
    def state(self) -> GameState:
        """Return an immutable snapshot of the current game."""
        return GameState(
            snake=self._snake.cells(),
            direction=self._direction,
            pending_direction=self._pending_direction,
            food=self._food,
            score=self._score,
            is_over=self._is_over,
            tick_interval_ms=self._tick_interval_ms,
            steps=self._steps,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        state = self.state.to_dict()
        state["board"] = self.board.to_dict()
        return state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _notify_score(self) -> None:
        if self.score_observer is not None:
            self.score_observer(self._score)

    def _end_game(self, reason: str) -> None:
        """Mark the game as over."""
        self._is_over = True
        logger.info(
            "Game over (%s) after %d steps with score %d.",
            reason, self._steps, self._score,
        )
