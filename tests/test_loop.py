"""Tests for the asyncio GameLoop driver."""

from __future__ import annotations

import asyncio

import pytest

from classic_snake.board import Board
from classic_snake.engine import GameEngine
from classic_snake.loop import GameLoop
from classic_snake.snake import Direction


def _fast_engine(**kwargs) -> GameEngine:
    kwargs.setdefault("board", Board(5, 5))
    kwargs.setdefault("initial_tick_ms", 1)
    kwargs.setdefault("target_tick_ms", 1)
    kwargs.setdefault("seed", 0)
    return GameEngine(**kwargs)


async def _until(predicate, attempts: int = 100) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


class TestGameLoopRun:
    @pytest.mark.asyncio
    async def test_runs_until_game_over(self):
        states = []
        game_loop = GameLoop(_fast_engine(), renderer=states.append)
        game_loop.start()
        await game_loop.wait()
        assert states
        assert states[-1].is_over
        assert not any(s.is_over for s in states[:-1])
        assert not game_loop.running

    @pytest.mark.asyncio
    async def test_speed_advances_after_each_tick(self):
        states = []
        engine = _fast_engine(initial_tick_ms=10, target_tick_ms=1, tick_step_ms=1)
        game_loop = GameLoop(engine, renderer=states.append)
        game_loop.start()
        await game_loop.wait()
        for i, state in enumerate(states):
            assert state.tick_interval_ms == 10 - i
        assert engine.tick_interval_ms == 10 - len(states)

    @pytest.mark.asyncio
    async def test_start_resets_engine(self):
        engine = _fast_engine()
        engine.tick()
        engine.tick()
        engine.tick()
        assert engine.is_over
        states = []
        game_loop = GameLoop(engine, renderer=states.append)
        game_loop.start()
        await game_loop.wait()
        assert states[0].snake[0] == (3, 2)
        assert states[0].score == 0

    @pytest.mark.asyncio
    async def test_async_renderer_awaited(self):
        seen = []

        async def renderer(state):
            await asyncio.sleep(0)
            seen.append(state.steps)

        game_loop = GameLoop(_fast_engine(), renderer=renderer)
        game_loop.start()
        await game_loop.wait()
        assert seen

    @pytest.mark.asyncio
    async def test_no_renderer(self):
        engine = _fast_engine()
        game_loop = GameLoop(engine)
        game_loop.start()
        await game_loop.wait()
        assert engine.is_over


class TestGameLoopControl:
    @pytest.mark.asyncio
    async def test_stop_cancels_running_loop(self):
        states = []
        engine = _fast_engine(
            board=Board(20, 20), initial_tick_ms=10_000, target_tick_ms=10_000,
        )
        game_loop = GameLoop(engine, renderer=states.append)
        game_loop.start()
        await _until(lambda: states)
        assert game_loop.running
        await game_loop.stop()
        assert not game_loop.running
        assert len(states) == 1
        assert not engine.is_over

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        game_loop = GameLoop(_fast_engine())
        await game_loop.stop()
        await game_loop.wait()
        assert not game_loop.running

    @pytest.mark.asyncio
    async def test_wait_after_immediate_stop(self):
        game_loop = GameLoop(_fast_engine())
        task = game_loop.start()
        await game_loop.stop()
        await game_loop.wait()
        assert task.done()
        assert not game_loop.running

    @pytest.mark.asyncio
    async def test_restart_replaces_previous_loop(self):
        states = []
        engine = _fast_engine(
            board=Board(20, 20), initial_tick_ms=10_000, target_tick_ms=10_000,
        )
        game_loop = GameLoop(engine, renderer=states.append)
        first = game_loop.start()
        await _until(lambda: states)
        second = game_loop.start()
        await _until(lambda: first.done())
        assert first is not second
        assert game_loop.running
        await game_loop.stop()
        assert second.done()

    def test_request_direction_forwarded(self):
        engine = _fast_engine(
            board=Board(20, 20), initial_tick_ms=10_000, target_tick_ms=10_000,
        )
        game_loop = GameLoop(engine)
        game_loop.request_direction(Direction.UP)
        assert engine.pending_direction == Direction.UP
        game_loop.request_direction(Direction.LEFT)
        assert engine.pending_direction == Direction.UP

    @pytest.mark.asyncio
    async def test_renderer_error_ends_loop(self):
        def renderer(state):
            raise RuntimeError("display gone")

        game_loop = GameLoop(_fast_engine(), renderer=renderer)
        game_loop.start()
        await game_loop.wait()
        assert not game_loop.running
