"""Fixed-tick game loop: render, sleep, step."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from classic_snake.board import Board, Outcome
from classic_snake.config import Difficulty, GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Summary of a finished game."""

    food_eaten: int
    final_score: int
    ticks: int
    outcome: Outcome
    difficulty: Difficulty

    def summary(self) -> str:
        """Game-over text shown to the player."""
        lines = [
            f"Food eaten: {self.food_eaten}",
            f"Difficulty: {self.difficulty.label}",
            f"Final score: {self.final_score}",
        ]
        if self.outcome is Outcome.WON:
            lines.insert(0, "The snake filled the board!")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "food_eaten": self.food_eaten,
            "final_score": self.final_score,
            "ticks": self.ticks,
            "outcome": self.outcome.value,
            "difficulty": self.difficulty.value,
        }


class GameLoop:
    """Drives a :class:`Board` until the game ends.

    *render* is called with the board before every tick and *sleep*
    receives the delay in seconds; both are injectable so the loop can
    run headless.
    """

    def __init__(
        self,
        board: Board,
        config: GameConfig,
        render: Callable[[Board], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.board = board
        self.config = config
        self.render = render
        self.sleep = sleep

    def current_delay_ms(self) -> int:
        return self.config.delay_ms(self.board.score)

    def tick(self) -> bool:
        """Render, wait one delay, then step. Returns the step result."""
        self.render(self.board)
        self.sleep(self.current_delay_ms() / 1000)
        return self.board.step()

    def run(self) -> GameResult:
        """Run ticks until the board reports the game is over."""
        logger.info(
            "Starting %s game on a %dx%d board.",
            self.config.difficulty.value, self.board.size, self.board.size,
        )
        while self.tick():
            pass
        return self.result()

    def result(self) -> GameResult:
        return result_for(self.board, self.config)


def result_for(board: Board, config: GameConfig) -> GameResult:
    """Build the :class:`GameResult` for a board played under *config*."""
    return GameResult(
        food_eaten=board.score,
        final_score=config.final_score(board.score),
        ticks=board.tick,
        outcome=board.outcome,
        difficulty=config.difficulty,
    )
