"""Difficulty presets, colour themes and game configuration."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from classic_snake.board import Board
from classic_snake.grid import CellState

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class DifficultySettings:
    """Tuning values attached to a :class:`Difficulty`."""

    initial_length: int
    start_delay_ms: int
    speed_increase_ms: int
    walls: bool
    score_multiplier: int


class Difficulty(enum.Enum):
    """Difficulty levels offered at startup."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def settings(self) -> DifficultySettings:
        return _DIFFICULTY_SETTINGS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_DIFFICULTY_SETTINGS: dict[Difficulty, DifficultySettings] = {
    Difficulty.EASY: DifficultySettings(3, 200, 2, walls=False, score_multiplier=1),
    Difficulty.MEDIUM: DifficultySettings(10, 175, 2, walls=True, score_multiplier=2),
    Difficulty.HARD: DifficultySettings(20, 145, 3, walls=True, score_multiplier=3),
}


@dataclass(frozen=True)
class Palette:
    """One colour per cell state."""

    background: RGB
    snake: RGB
    food: RGB
    wall: RGB

    def color_for(self, state: CellState) -> RGB:
        return {
            CellState.FREE: self.background,
            CellState.SNAKE: self.snake,
            CellState.FOOD: self.food,
            CellState.WALL: self.wall,
        }[state]


class Theme(enum.Enum):
    """Colour themes offered at startup."""

    DEFAULT = "default"
    BLACK_ON_WHITE = "black-on-white"
    WHITE_ON_BLACK = "white-on-black"
    RETRO_GREEN = "retro-green"
    RETRO_AMBER = "retro-amber"
    PASTEL = "pastel"

    @property
    def palette(self) -> Palette:
        return _THEME_PALETTES[self]

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()


_WHITE: RGB = (255, 255, 255)
_BLACK: RGB = (0, 0, 0)
_GREEN: RGB = (36, 204, 68)
_AMBER: RGB = (255, 191, 0)

_THEME_PALETTES: dict[Theme, Palette] = {
    Theme.DEFAULT: Palette(_WHITE, (0, 255, 0), (255, 0, 0), (64, 64, 64)),
    Theme.BLACK_ON_WHITE: Palette(_WHITE, _BLACK, _BLACK, _BLACK),
    Theme.WHITE_ON_BLACK: Palette(_BLACK, _WHITE, _WHITE, _WHITE),
    Theme.RETRO_GREEN: Palette(_BLACK, _GREEN, _GREEN, _GREEN),
    Theme.RETRO_AMBER: Palette(_BLACK, _AMBER, _AMBER, _AMBER),
    Theme.PASTEL: Palette(
        (255, 250, 250), (203, 241, 245), (255, 206, 206), (202, 171, 216),
    ),
}


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to start a game.

    Supports JSON serialization so a setup can be replayed with the
    same seed.
    """

    difficulty: Difficulty = Difficulty.EASY
    theme: Theme = Theme.DEFAULT
    board_size: int = 40
    screen_size: int = 600
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_size < 4:
            raise ValueError("board_size must be at least 4.")
        if self.screen_size < self.board_size:
            raise ValueError("screen_size must be at least board_size pixels.")
        # The starting snake may cover at most half of the board.
        if self.difficulty.settings.initial_length > self.board_size * self.board_size // 2:
            raise ValueError("board_size is too small for this difficulty.")

    @property
    def settings(self) -> DifficultySettings:
        return self.difficulty.settings

    def delay_ms(self, score: int) -> int:
        """Tick delay after *score* food items; never negative."""
        delay = self.settings.start_delay_ms - score * self.settings.speed_increase_ms
        return max(0, delay)

    def final_score(self, food_eaten: int) -> int:
        return food_eaten * self.settings.score_multiplier

    def build_board(self) -> Board:
        """Create a fresh board for this configuration."""
        return Board(
            size=self.board_size,
            initial_length=self.settings.initial_length,
            walls=self.settings.walls,
            seed=self.seed,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their values)."""
        d = asdict(self)
        d["difficulty"] = self.difficulty.value
        d["theme"] = self.theme.value
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        if "difficulty" in raw:
            raw["difficulty"] = Difficulty(raw["difficulty"])
        if "theme" in raw:
            raw["theme"] = Theme(raw["theme"])
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
