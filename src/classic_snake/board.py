"""Step-based board simulation for a single snake."""

from __future__ import annotations

import enum
import logging
import threading

import numpy as np

from classic_snake.food import FoodSpawner
from classic_snake.grid import CellState, Grid
from classic_snake.snake import Direction

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Macro-state of a board."""

    RUNNING = "running"
    COLLIDED = "collided"
    WON = "won"


class Board:
    """Single-snake board on a wrap-around square grid.

    The snake is never stored as a list of segments. Each cell it
    occupies carries a fadeout counter that is set to ``length - 1``
    when the head enters the cell and decremented once per tick; the
    cell frees itself when the counter runs out, so the tail follows
    the head's path without any bookkeeping.
    """

    def __init__(
        self,
        size: int = 40,
        initial_length: int = 3,
        walls: bool = False,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if initial_length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.grid = Grid(size)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        if walls:
            self.grid.build_border()

        self.size = size
        self.walls = walls
        self.start_length = initial_length
        self.length = initial_length
        self.direction = Direction.RIGHT
        self.x = self.y = size // 2
        self.tick = 0
        self.outcome = Outcome.RUNNING
        self._direction_changed = False
        self._lock = threading.Lock()

        self.grid.set(self.head_index, CellState.SNAKE, initial_length - 1)

        self.food = FoodSpawner(self.grid, rng=self.rng)
        self.food.spawn()

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate as ``(x, y)``."""
        return self.x, self.y

    @property
    def head_index(self) -> int:
        return self.grid.index(self.x, self.y)

    @property
    def score(self) -> int:
        """Food eaten so far."""
        return self.length - self.start_length

    @property
    def running(self) -> bool:
        return self.outcome is Outcome.RUNNING

    def index_of(self, x: int, y: int) -> int:
        return self.grid.index(x, y)

    def get_position_state(self, index: int) -> CellState:
        """Return the state of the cell at *index* for rendering."""
        return self.grid.get(index)

    def fadeout_at(self, index: int) -> int:
        return int(self.grid.fadeout[index])

    def states(self) -> np.ndarray:
        """Return a read-only ``(size, size)`` copy of the cell states."""
        square = self.grid.states.reshape(self.size, self.size).copy()
        square.flags.writeable = False
        return square

    def set_direction(self, direction: Direction) -> None:
        """Accept at most one non-reversing direction change per tick."""
        with self._lock:
            if self._direction_changed:
                return
            if direction.is_reversal_of(self.direction):
                return
            self.direction = direction
            self._direction_changed = True

    def step(self) -> bool:
        """Advance the board by one tick.

        Returns ``False`` once the game has ended, either because the head
        ran into the snake or a wall, or because the snake filled every
        cell and no food can be placed.
        """
        with self._lock:
            if not self.running:
                return False

            dx, dy = self.direction.value
            next_x, next_y = self.grid.wrap(self.x + dx, self.y + dy)
            index = self.grid.index(next_x, next_y)

            state = self.grid.get(index)
            if state in (CellState.SNAKE, CellState.WALL):
                self._finish(Outcome.COLLIDED)
                return False

            ate = state == CellState.FOOD
            if ate:
                self.length += 1
                self.food.spawn()

            self.grid.fade()
            self.grid.set(index, CellState.SNAKE, self.length - 1)

            self.x, self.y = next_x, next_y
            self._direction_changed = False
            self.tick += 1

            if ate and self.food.position is None:
                self._finish(Outcome.WON)
                return False
            return True

    def to_dict(self) -> dict:
        """Return the full, serializable board state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "length": self.length,
            "head": list(self.head),
            "direction": self.direction.name,
            "outcome": self.outcome.value,
            "grid": self.grid.to_dict(),
            "food": self.food.to_dict(),
        }

    def _finish(self, outcome: Outcome) -> None:
        self.outcome = outcome
        logger.info(
            "Game %s at tick %d with score %d.",
            outcome.value, self.tick, self.score,
        )
