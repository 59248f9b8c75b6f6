"""Plain-text rendering of game state snapshots."""

from __future__ import annotations

from classic_snake.board import Board
from classic_snake.engine import GameState
from classic_snake.snake import Direction

EMPTY = "."
BODY = "o"
FOOD = "@"

HEADS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


def render_lines(state: GameState, board: Board) -> list[str]:
    """Draw the board as one string per row."""
    rows = [[EMPTY] * board.width for _ in range(board.height)]
    if state.food is not None:
        fx, fy = state.food
        rows[fy][fx] = FOOD
    for x, y in state.snake[1:]:
        rows[y][x] = BODY
    hx, hy = state.head
    rows[hy][hx] = HEADS[state.direction]
    return ["".join(row) for row in rows]


def render_text(state: GameState, board: Board) -> str:
    """Draw the board followed by the score line and, if over, a banner."""
    lines = render_lines(state, board)
    lines.append(f"Score: {state.score}")
    if state.is_over:
        lines.append("Game over!")
    return "\n".join(lines)
