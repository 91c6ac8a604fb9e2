from __future__ import annotations

import argparse
import curses
import logging
import time
from typing import Sequence

from boulder.common.config import settings
from boulder.common.types import Action
from boulder.engine.engine import GameEngine
from boulder.frontend.terminal import CursesInput, CursesScreen, CursesSound, action_for_key

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="boulder", description="Terminal boulder digging game")
    parser.add_argument("--level", type=int, default=settings.start_level, help="first level (0-based)")
    parser.add_argument("--seed", type=int, default=settings.random_seed, help="random seed")
    parser.add_argument("--fps", type=int, default=settings.fps, help="main loop ticks per second")
    parser.add_argument(
        "--no-sound", dest="sound", action="store_false", default=settings.sound_enabled
    )
    return parser.parse_args(argv)


def run(stdscr: curses.window, options: argparse.Namespace) -> None:
    curses.curs_set(0)
    stdscr.clear()
    keys = CursesInput(stdscr)
    screen = CursesScreen(stdscr)
    engine = GameEngine(
        CursesSound(),
        seed=options.seed,
        start_level=options.level,
        sound_enabled=options.sound,
        view_width=settings.view_width,
        view_height=settings.view_height,
    )
    screen.draw(engine.snapshot())
    frame = 1.0 / max(1, options.fps)
    while True:
        action = action_for_key(keys.poll())
        if action == Action.QUIT:
            logger.info("Quit on level %s", engine.state.current_level + 1)
            return
        if engine.step(action):
            screen.draw(engine.snapshot())
        time.sleep(frame)


def main(argv: Sequence[str] | None = None) -> None:
    options = parse_args(argv)
    logging.basicConfig(
        filename=settings.log_file,
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        curses.wrapper(run, options)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception:
        logger.exception("Game loop crashed")
        raise
