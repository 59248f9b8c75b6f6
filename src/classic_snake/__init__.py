"""Classic Snake: single-player game engine."""

from classic_snake.board import Board, Cell
from classic_snake.config import GameConfig
from classic_snake.engine import GameEngine, GameState
from classic_snake.loop import GameLoop
from classic_snake.snake import Direction

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameState",
]
