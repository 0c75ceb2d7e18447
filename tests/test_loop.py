"""Tests for the game loop."""

import pytest

from classic_snake.board import Board, Outcome
from classic_snake.config import Difficulty, GameConfig
from classic_snake.loop import GameLoop, GameResult


class _Recorder:
    def __init__(self):
        self.renders = []
        self.sleeps = []

    def render(self, board: Board) -> None:
        self.renders.append(board.tick)

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


@pytest.fixture
def walled_config():
    return GameConfig(difficulty=Difficulty.MEDIUM, board_size=10, seed=4)


class TestGameLoop:
    def test_runs_until_collision(self, walled_config):
        rec = _Recorder()
        board = walled_config.build_board()
        result = GameLoop(board, walled_config, rec.render, rec.sleep).run()
        assert result.outcome is Outcome.COLLIDED
        assert result.ticks == board.tick
        assert result.food_eaten == board.score
        assert result.final_score == board.score * 2

    def test_render_and_sleep_before_every_step(self, walled_config):
        rec = _Recorder()
        board = walled_config.build_board()
        result = GameLoop(board, walled_config, rec.render, rec.sleep).run()
        # One render/sleep per successful step plus the fatal one.
        assert len(rec.renders) == result.ticks + 1
        assert len(rec.sleeps) == len(rec.renders)
        assert rec.renders == list(range(result.ticks + 1))

    def test_first_delay_is_start_delay(self, walled_config):
        rec = _Recorder()
        board = walled_config.build_board()
        GameLoop(board, walled_config, rec.render, rec.sleep).run()
        assert rec.sleeps[0] == pytest.approx(0.175)

    def test_delay_follows_score(self, walled_config):
        board = walled_config.build_board()
        loop = GameLoop(board, walled_config, lambda b: None, lambda s: None)
        board.length += 5
        assert loop.current_delay_ms() == 165

    def test_tick_returns_step_result(self):
        cfg = GameConfig(board_size=10, seed=0)
        board = cfg.build_board()
        loop = GameLoop(board, cfg, lambda b: None, lambda s: None)
        assert loop.tick() is True
        assert board.tick == 1


class TestGameResult:
    def test_summary(self):
        result = GameResult(
            food_eaten=4, final_score=12, ticks=80,
            outcome=Outcome.COLLIDED, difficulty=Difficulty.HARD,
        )
        assert result.summary() == "Food eaten: 4\nDifficulty: Hard\nFinal score: 12"

    def test_summary_on_win(self):
        result = GameResult(
            food_eaten=10, final_score=10, ticks=200,
            outcome=Outcome.WON, difficulty=Difficulty.EASY,
        )
        assert result.summary().startswith("The snake filled the board!")

    def test_to_dict(self):
        result = GameResult(
            food_eaten=1, final_score=2, ticks=3,
            outcome=Outcome.COLLIDED, difficulty=Difficulty.MEDIUM,
        )
        assert result.to_dict() == {
            "food_eaten": 1,
            "final_score": 2,
            "ticks": 3,
            "outcome": "collided",
            "difficulty": "medium",
        }
