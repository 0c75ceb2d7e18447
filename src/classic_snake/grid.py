"""Grid representation for the snake board."""

from __future__ import annotations

import enum

import numpy as np


class CellState(enum.IntEnum):
    """Integer codes stored in the grid's state array."""

    FREE = 0
    SNAKE = 1
    FOOD = 2
    WALL = 3


class Grid:
    """NumPy-backed square grid of cell states and fadeout counters.

    Cells are addressed either by ``(x, y)`` or by the flat index
    ``y * size + x``. Coordinates outside ``[0, size)`` wrap around.
    """

    def __init__(self, size: int = 40) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.states = np.full(size * size, CellState.FREE, dtype=np.int8)
        self.fadeout = np.zeros(size * size, dtype=np.int32)

    def __len__(self) -> int:
        return self.size * self.size

    def index(self, x: int, y: int) -> int:
        """Return the flat index of a coordinate, wrapping it first."""
        x, y = self.wrap(x, y)
        return y * self.size + x

    def coords(self, index: int) -> tuple[int, int]:
        """Return the ``(x, y)`` coordinate of a flat index."""
        y, x = divmod(index, self.size)
        return x, y

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return x % self.size, y % self.size

    def get(self, index: int) -> CellState:
        """Return the state of the cell at *index*."""
        if not 0 <= index < len(self):
            raise IndexError(f"Cell index {index} out of range.")
        return CellState(self.states[index])

    def set(self, index: int, state: CellState, fadeout: int = 0) -> None:
        self.states[index] = state
        self.fadeout[index] = fadeout

    def build_border(self) -> None:
        """Mark the outermost rows and columns as walls."""
        self.states[self.border_indices()] = CellState.WALL

    def border_indices(self) -> list[int]:
        """Return the flat indices of every border cell."""
        mask = np.zeros((self.size, self.size), dtype=bool)
        mask[0, :] = mask[-1, :] = True
        mask[:, 0] = mask[:, -1] = True
        return np.flatnonzero(mask).tolist()

    def fade(self) -> None:
        """Advance every snake cell's fadeout by one tick.

        FOOD and WALL cells are untouched. Any other cell whose counter is
        already zero becomes FREE; the rest count down by one.
        """
        live = (self.states != CellState.FOOD) & (self.states != CellState.WALL)
        expired = live & (self.fadeout == 0)
        self.states[expired] = CellState.FREE
        self.fadeout[live & ~expired] -= 1

    def free_count(self) -> int:
        return int(np.count_nonzero(self.states == CellState.FREE))

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.states == state))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "size": self.size,
            "states": self.states.reshape(self.size, self.size).tolist(),
            "fadeout": self.fadeout.reshape(self.size, self.size).tolist(),
        }
