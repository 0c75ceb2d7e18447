"""Command-line launcher for Classic Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from classic_snake.config import Difficulty, GameConfig, Theme

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Play Snake on a wrap-around grid.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    parser.add_argument(
        "--difficulty", type=str, default=None,
        choices=[d.value for d in Difficulty],
    )
    parser.add_argument(
        "--theme", type=str, default=None,
        choices=[t.value for t in Theme],
    )
    parser.add_argument("--size", type=int, default=None, help="Cells per side.")
    parser.add_argument(
        "--screen-size", type=int, default=None, help="Window side in pixels.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the resolved config to this path and exit.",
    )
    parser.add_argument(
        "--list-themes", action="store_true",
        help="Print the available colour themes and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "difficulty": "difficulty",
        "theme": "theme",
        "size": "board_size",
        "screen_size": "screen_size",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig.from_dict(d)
    return config


def _list_themes() -> int:
    for theme in Theme:
        print(f"{theme.value:<16} {theme.label}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list_themes:
        return _list_themes()

    try:
        config = _resolve_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save_config:
        config.save(args.save_config)
        return 0

    from classic_snake.view import run_window

    result = run_window(config)
    if result is None:
        logger.info("Window closed before the game ended.")
        return 1
    print(result.summary())  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
