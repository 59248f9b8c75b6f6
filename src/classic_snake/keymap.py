"""Translation of raw key names and direction words into directions."""

from __future__ import annotations

from classic_snake.snake import Direction

KEY_BINDINGS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "W": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
    "S": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "A": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
    "D": Direction.RIGHT,
}

_DIRECTION_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Return the direction bound to *key*, or ``None`` if unbound."""
    return KEY_BINDINGS.get(key)


def parse_direction(name: str) -> Direction | None:
    """Parse ``"up"``/``"down"``/``"left"``/``"right"`` in any case."""
    return _DIRECTION_MAP.get(name.strip().lower())
