"""Asyncio driver that ticks the engine and publishes state to a renderer."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from classic_snake.engine import GameEngine, GameState
from classic_snake.snake import Direction

logger = logging.getLogger(__name__)

Renderer = Callable[[GameState], Awaitable[None] | None]


class GameLoop:
    """Drives a :class:`GameEngine` at the engine's current tick interval.

    Each iteration ticks the engine, hands the snapshot to the renderer
    and advances the speed ramp. The loop ends by itself once the game is
    over; :meth:`start` resets the engine and replaces any running loop.
    """

    def __init__(
        self,
        engine: GameEngine,
        renderer: Renderer | None = None,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def request_direction(self, direction: Direction) -> None:
        """Forward a direction intent to the engine."""
        self.engine.request_direction(direction)

    def start(self) -> asyncio.Task:
        """Reset the engine and schedule a fresh loop task.

        Must be called from within a running event loop.
        """
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self.engine.reset()
        self._task = asyncio.create_task(self._run())
        logger.info("Game loop started.")
        return self._task

    async def stop(self) -> None:
        """Cancel the running loop, if any, and wait for it to finish."""
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    async def wait(self) -> None:
        """Wait until the current loop ends."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    async def _run(self) -> None:
        try:
            while True:
                self.engine.tick()
                await self._publish(self.engine.state)
                self.engine.advance_speed()
                if self.engine.is_over:
                    logger.info(
                        "Game loop finished with score %d.", self.engine.score,
                    )
                    break
                await asyncio.sleep(self.engine.tick_interval_ms / 1000.0)
        except asyncio.CancelledError:
            logger.info("Game loop cancelled.")
        except Exception:
            logger.exception("Game loop error.")

    async def _publish(self, state: GameState) -> None:
        if self.renderer is None:
            return
        result = self.renderer(state)
        if inspect.isawaitable(result):
            await result
