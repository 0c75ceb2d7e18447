"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from classic_snake.grid import CellState

if TYPE_CHECKING:
    from classic_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places single food items on free grid cells.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Cells are drawn uniformly from the whole grid and rejected until a
    FREE one comes up; a full grid is detected up front so the draw
    always terminates.
    """

    def __init__(self, grid: Grid, rng: np.random.Generator | None = None) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: int | None = None

    def spawn(self) -> int | None:
        """Place food on a random free cell.

        Returns the chosen index, or ``None`` if no free cell is left.
        """
        if self.grid.free_count() == 0:
            logger.warning("No free cells available for food placement.")
            self.position = None
            return None

        cells = len(self.grid)
        while True:
            index = int(self.rng.integers(0, cells))
            if self.grid.states[index] == CellState.FREE:
                break

        self.grid.set(index, CellState.FOOD)
        self.position = index
        logger.debug("Food placed at %s.", self.grid.coords(index))
        return index

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        if self.position is None:
            return {"position": None}
        return {"position": list(self.grid.coords(self.position))}
