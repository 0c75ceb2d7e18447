"""Classic Snake — board simulation, game loop and Tk front end."""

from classic_snake.board import Board, Outcome
from classic_snake.config import Difficulty, GameConfig, Theme
from classic_snake.grid import CellState, Grid
from classic_snake.loop import GameLoop, GameResult
from classic_snake.snake import Direction

__all__ = [
    "Board",
    "CellState",
    "Difficulty",
    "Direction",
    "GameConfig",
    "GameLoop",
    "GameResult",
    "Grid",
    "Outcome",
    "Theme",
]
