"""Tkinter window that paints the board and forwards arrow keys."""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox

from classic_snake.board import Board
from classic_snake.config import GameConfig, Palette
from classic_snake.grid import CellState
from classic_snake.loop import GameResult, result_for
from classic_snake.snake import Direction

logger = logging.getLogger(__name__)

TITLE = "Snake v1.0"

KEY_DIRECTIONS: dict[str, Direction] = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}


def hex_color(rgb: tuple[int, int, int]) -> str:
    """Convert an RGB triple to a Tk colour string."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def window_title(board: Board) -> str:
    return f"Snake - Food: {board.score}"


class BoardView:
    """Tk presentation layer for a :class:`Board`.

    Ticks are scheduled with ``after()`` so key presses and board steps
    run on the same Tk event loop.
    """

    def __init__(self, root: tk.Tk, board: Board, config: GameConfig) -> None:
        self.root = root
        self.board = board
        self.config = config
        self.palette: Palette = config.theme.palette
        self.result: GameResult | None = None
        self._after_id: str | None = None
        self._colors = {state: hex_color(self.palette.color_for(state)) for state in CellState}

        self.root.title(window_title(board))
        self.root.resizable(False, False)
        self.canvas = tk.Canvas(
            root,
            width=config.screen_size,
            height=config.screen_size,
            bg=self._colors[CellState.FREE],
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack()
        self._cells = self._build_cells()
        self.root.bind("<Key>", self.on_key)

    def _build_cells(self) -> list[int]:
        cell = self.config.screen_size / self.board.size
        items = []
        for index in range(self.board.size * self.board.size):
            y, x = divmod(index, self.board.size)
            items.append(self.canvas.create_rectangle(
                x * cell, y * cell, (x + 1) * cell, (y + 1) * cell,
                width=0,
            ))
        return items

    def render(self) -> None:
        """Repaint every cell from the current board state."""
        for index, item in enumerate(self._cells):
            state = self.board.get_position_state(index)
            self.canvas.itemconfigure(item, fill=self._colors[state])
        self.root.title(window_title(self.board))

    def on_key(self, event: tk.Event) -> None:
        direction = KEY_DIRECTIONS.get(event.keysym)
        if direction is not None:
            self.board.set_direction(direction)

    def start(self) -> None:
        self.render()
        self._schedule()

    def _schedule(self) -> None:
        delay = self.config.delay_ms(self.board.score)
        self._after_id = self.root.after(delay, self._advance)

    def _advance(self) -> None:
        self._after_id = None
        if self.board.step():
            self.render()
            self._schedule()
            return
        self.render()
        self._game_over()

    def _game_over(self) -> None:
        self.result = result_for(self.board, self.config)
        logger.info("Game over: %s", self.result.to_dict())
        messagebox.showerror("Game over!", self.result.summary(), parent=self.root)
        self.root.destroy()


def run_window(config: GameConfig) -> GameResult | None:
    """Open a window, play one game and return its result.

    Returns ``None`` if the window was closed before the game ended.
    """
    root = tk.Tk()
    view = BoardView(root, config.build_board(), config)
    view.start()
    root.mainloop()
    return view.result
