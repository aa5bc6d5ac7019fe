"""Command-line launcher for the terminal snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import shutil
import sys
import threading

from term_snake.config import Difficulty, GameConfig
from term_snake.controls import CursesInput
from term_snake.display import CursesRenderer, ThreadedRenderer, ensure_fits
from term_snake.engine import Game, GameOutcome
from term_snake.errors import TerminalTooSmall

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal. Arrow keys, hjkl or wasd steer; q or Esc quits.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument(
        "--size", type=int, default=None,
        help="Square grid size; shorthand for --rows N --cols N.",
    )
    parser.add_argument(
        "--difficulty", type=str, default=None,
        choices=[d.value for d in Difficulty],
    )
    parser.add_argument("--initial-length", type=int, default=None)
    parser.add_argument(
        "--walls", action="store_true", default=None,
        help="Surround the play area with wall cells.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--threaded", action="store_true",
        help="Draw frames on a background display thread.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file; without it logs are discarded.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.size is not None:
        overrides["rows"] = overrides["cols"] = args.size
    flag_map = {
        "rows": "rows",
        "cols": "cols",
        "difficulty": "difficulty",
        "initial_length": "initial_length",
        "walls": "walls",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    return overrides


def build_config(
    args: argparse.Namespace,
    terminal_size: tuple[int, int] | None = None,
) -> GameConfig:
    """Merge the config file, CLI flags and terminal size into a config.

    *terminal_size* is ``(columns, lines)``; it sizes the grid when neither
    the flags nor the config file do.
    """
    base = GameConfig.load(args.config).to_dict() if args.config else {}
    base.update(_overrides(args))
    if terminal_size is not None and not {"rows", "cols"} <= base.keys():
        columns, lines = terminal_size
        fitted = GameConfig.from_terminal(columns, lines)
        base.setdefault("rows", fitted.rows)
        base.setdefault("cols", fitted.cols)
    return GameConfig.from_dict(base)


def _configure_logging(args: argparse.Namespace) -> logging.Handler:
    """Route logs to *--log-file*, or discard them.

    curses owns the terminal during play, so nothing may go to stderr.
    """
    if args.log_file:
        handler: logging.Handler = logging.FileHandler(args.log_file)
    else:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"),
    )
    logging.basicConfig(level=getattr(logging, args.log_level), handlers=[handler])
    return handler


def _play(
    window: curses.window, config: GameConfig, threaded: bool = False,
) -> GameOutcome:
    ensure_fits(window, config.rows, config.cols)
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")
    game = Game(config)

    # One lock serializes curses calls between the input and display threads.
    lock = threading.Lock() if threaded else None
    renderer = CursesRenderer(window, lock=lock)
    if threaded:
        renderer = ThreadedRenderer(renderer)
    try:
        return game.run(renderer, CursesInput(window, lock=lock))
    finally:
        renderer.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args)

    try:
        config = build_config(args, terminal_size=tuple(shutil.get_terminal_size()))
    except (ValueError, TypeError, OSError) as exc:
        parser.error(str(exc))

    logger.info("Starting game with %s", config)
    try:
        outcome = curses.wrapper(_play, config, args.threaded)
    except TerminalTooSmall as exc:
        parser.error(str(exc))
    print(outcome.summary())  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
