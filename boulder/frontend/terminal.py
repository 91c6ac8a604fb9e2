from __future__ import annotations

import curses
import logging

from boulder.common.models import ViewSnapshot
from boulder.common.types import Action, Sound
from boulder.frontend.base import InputSource, Screen, SoundSink

logger = logging.getLogger(__name__)

KEY_ACTIONS = {
    ord("a"): Action.LEFT,
    curses.KEY_LEFT: Action.LEFT,
    ord("d"): Action.RIGHT,
    curses.KEY_RIGHT: Action.RIGHT,
    ord("w"): Action.UP,
    curses.KEY_UP: Action.UP,
    ord("s"): Action.DOWN,
    curses.KEY_DOWN: Action.DOWN,
    ord(" "): Action.GHOST,
    ord("\r"): Action.GHOST,
    ord("\n"): Action.GHOST,
    curses.KEY_ENTER: Action.GHOST,
    ord("m"): Action.SOUND,
    ord("n"): Action.NEXT_LEVEL,
    ord("p"): Action.PREV_LEVEL,
    ord("r"): Action.SUICIDE,
    ord("j"): Action.RESPAWN,
    ord("t"): Action.REFILL_TIME,
    ord("q"): Action.QUIT,
}


def action_for_key(key: int | None) -> Action | None:
    """Map a key code to a game action; unknown keys are ignored."""
    if key is None:
        return None
    return KEY_ACTIONS.get(key)


class CursesInput(InputSource):
    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def poll(self) -> int | None:
        key = self.stdscr.getch()
        if key == curses.ERR:
            return None
        return key


class CursesSound(SoundSink):
    """Terminal bell for diamonds; the other sounds are silent."""

    def play(self, sound: Sound) -> None:
        if sound == Sound.DIAMOND:
            curses.beep()


class CursesScreen(Screen):
    def __init__(self, stdscr: curses.window) -> None:
        self.stdscr = stdscr

    def draw(self, view: ViewSnapshot) -> None:
        max_y, max_x = self.stdscr.getmaxyx()
        lines = [view.message.center(len(view.rows[0]) if view.rows else 0)] + view.rows
        for y, line in enumerate(lines[:max_y]):
            try:
                self.stdscr.addstr(y, 0, line[: max_x - 1])
            except curses.error:
                logger.debug("Line %s did not fit the terminal", y)
        self.stdscr.refresh()
