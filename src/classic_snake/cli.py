"""Terminal launcher for Classic Snake."""

from __future__ import annotations

import argparse
import asyncio
import curses
import logging
import sys

from pydantic import ValidationError

from classic_snake.config import GameConfig
from classic_snake.engine import GameEngine, GameState
from classic_snake.keymap import direction_for_key
from classic_snake.loop import GameLoop
from classic_snake.render import render_text

logger = logging.getLogger(__name__)

_CURSES_KEYS: dict[int, str] = {
    curses.KEY_UP: "ArrowUp",
    curses.KEY_DOWN: "ArrowDown",
    curses.KEY_LEFT: "ArrowLeft",
    curses.KEY_RIGHT: "ArrowRight",
}

# Seconds between keyboard polls while a game is running.
_INPUT_POLL = 0.01


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Classic single-player snake in the terminal.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    for name, help_text in (
        ("play", "Play a game in the terminal."),
        ("dump-config", "Print or save the effective configuration."),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument(
            "--config", type=str, default=None,
            help="Path to a JSON config file.",
        )
        p.add_argument("--width", type=int, default=None, help="Grid columns.")
        p.add_argument("--height", type=int, default=None, help="Grid rows.")
        p.add_argument("--seed", type=int, default=None)
        if name == "dump-config":
            p.add_argument(
                "--output", type=str, default=None,
                help="Write the config to this path instead of stdout.",
            )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    if args.width is not None:
        overrides["canvas_width"] = args.width * config.cell_size
    if args.height is not None:
        overrides["canvas_height"] = args.height * config.cell_size
    if args.seed is not None:
        overrides["seed"] = args.seed

    if overrides:
        d = config.model_dump()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _key_name(code: int) -> str | None:
    """Translate a curses key code into a key name, or ``None``."""
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if 0 <= code < 256:
        return chr(code)
    return None


async def _play(stdscr, config: GameConfig) -> int:
    stdscr.nodelay(True)
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal does not support hiding the cursor.")

    engine = GameEngine.from_config(config)

    def draw(state: GameState) -> None:
        stdscr.erase()
        text = render_text(state, engine.board)
        if not state.is_over:
            text += "\nq: quit"
        else:
            text += "\nr: restart  q: quit"
        for row, line in enumerate(text.splitlines()):
            try:
                stdscr.addstr(row, 0, line)
            except curses.error:
                # Terminal is smaller than the board.
                break
        stdscr.refresh()

    game_loop = GameLoop(engine, renderer=draw)
    game_loop.start()
    draw(engine.state)

    while True:
        key = _key_name(stdscr.getch())
        if key in ("q", "Q"):
            break
        if key in ("r", "R") and not game_loop.running:
            game_loop.start()
            draw(engine.state)
        elif key is not None:
            direction = direction_for_key(key)
            if direction is not None:
                game_loop.request_direction(direction)
        await asyncio.sleep(_INPUT_POLL)

    await game_loop.stop()
    return engine.score


def _run_play(args: argparse.Namespace) -> int:
    config = _load_config(args)
    score = curses.wrapper(lambda stdscr: asyncio.run(_play(stdscr, config)))
    print(f"Final score: {score}")  # noqa: T201
    return 0


def _run_dump_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if args.output:
        config.save(args.output)
    else:
        print(config.model_dump_json(indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        filename=args.log_file,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "dump-config": _run_dump_config,
    }
    try:
        return handlers[args.command](args)
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)  # noqa: T201
        return 2


if __name__ == "__main__":
    sys.exit(main())
