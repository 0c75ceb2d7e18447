"""Tests for the Tk view."""

import pytest

tk = pytest.importorskip("tkinter")

from classic_snake.board import Board  # noqa: E402
from classic_snake.config import GameConfig, Theme  # noqa: E402
from classic_snake.grid import CellState  # noqa: E402
from classic_snake.snake import Direction  # noqa: E402
from classic_snake.view import (  # noqa: E402
    KEY_DIRECTIONS,
    BoardView,
    hex_color,
    window_title,
)


class TestHelpers:
    def test_hex_color(self):
        assert hex_color((255, 0, 0)) == "#ff0000"
        assert hex_color((36, 204, 68)) == "#24cc44"

    def test_arrow_keys(self):
        assert KEY_DIRECTIONS["Up"] is Direction.UP
        assert KEY_DIRECTIONS["Left"] is Direction.LEFT
        assert len(KEY_DIRECTIONS) == 4

    def test_window_title(self):
        board = Board(size=10, seed=0)
        board.length += 2
        assert window_title(board) == "Snake - Food: 2"


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("No display available.")
    window.withdraw()
    yield window
    try:
        window.destroy()
    except tk.TclError:
        pass


class _Key:
    def __init__(self, keysym):
        self.keysym = keysym


class TestBoardView:
    def test_render_paints_cells(self, root):
        config = GameConfig(board_size=10, screen_size=100, theme=Theme.PASTEL, seed=0)
        board = config.build_board()
        view = BoardView(root, board, config)
        view.render()
        head = view._cells[board.head_index]
        expected = hex_color(Theme.PASTEL.palette.color_for(CellState.SNAKE))
        assert view.canvas.itemcget(head, "fill") == expected

    def test_arrow_key_sets_direction(self, root):
        config = GameConfig(board_size=10, screen_size=100, seed=0)
        board = config.build_board()
        view = BoardView(root, board, config)
        view.on_key(_Key("Up"))
        assert board.direction is Direction.UP
        view.on_key(_Key("space"))
        assert board.direction is Direction.UP
