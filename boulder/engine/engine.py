from __future__ import annotations

import logging
import random
from typing import Sequence

from boulder.common.constants import (
    DEFAULT_VIEW_HEIGHT,
    DEFAULT_VIEW_WIDTH,
    IDLE_THRESHOLD,
    INTER_TIME,
    LEVEL_COMPLETE_CYCLES,
    REFRESH_PERIOD,
)
from boulder.common.models import LevelDefinition, ViewSnapshot
from boulder.common.types import Action, GameStatus, HeroState, MoveMode, Sound, Tile, TileKind
from boulder.engine.board import Board
from boulder.engine.creatures import move_creatures
from boulder.engine.hero import kill_hero, move_hero
from boulder.engine.levels import start_level
from boulder.engine.physics import move_rocks, remove_crashes
from boulder.engine.state import GameState
from boulder.frontend.base import SoundSink
from boulder.levels.catalog import LEVELS

logger = logging.getLogger(__name__)

HERO_STEPS = {
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
}
FROZEN_BOARD_ACTIONS = {Action.SOUND, Action.NEXT_LEVEL, Action.PREV_LEVEL}


class GameEngine:
    """Owns the board and game state and advances them one main tick at a time.

    Player input is resolved on every tick. The environment (crash residue,
    falling objects, creatures, win and lose checks, sound) advances on a
    slower cadence of one refresh every ``REFRESH_PERIOD + 1`` ticks.
    """

    def __init__(
        self,
        sound: SoundSink,
        catalog: Sequence[LevelDefinition] = LEVELS,
        seed: int | None = None,
        start_level: int = 0,
        sound_enabled: bool = True,
        view_width: int = DEFAULT_VIEW_WIDTH,
        view_height: int = DEFAULT_VIEW_HEIGHT,
    ) -> None:
        self.sound = sound
        self.catalog = list(catalog)
        self.rng = random.Random(seed)
        self.board = Board()
        self.state = GameState(sound_enabled=sound_enabled)
        self.view_width = min(view_width, self.board.width)
        self.view_height = min(view_height, self.board.height)
        self.status = GameStatus.PLAYING
        self._refresh_countdown = 0
        self._time_countdown = INTER_TIME
        self._advance_countdown = 0
        self.start_level(start_level)

    def start_level(self, index: int) -> None:
        start_level(self.board, self.state, self.catalog, index)
        self.status = GameStatus.PLAYING
        self._advance_countdown = 0
        self._sync_hero()

    def step(self, action: Action | None = None) -> bool:
        """Run one main tick. Returns True when the view should be redrawn."""
        redraw = False
        if action is not None:
            redraw = self.apply(action)
            if redraw:
                self.flush_sound()
        self.decrement_time()
        if self.refresh():
            redraw = True
        return redraw

    def apply(self, action: Action) -> bool:
        """Apply a player action. Returns True if the hero tried to move.

        While a finished level is on display the board is frozen; only the
        sound toggle and level skipping still work.
        """
        state = self.state
        if self._advance_countdown and action not in FROZEN_BOARD_ACTIONS:
            return False
        if action in HERO_STEPS:
            move_hero(self.board, state, *HERO_STEPS[action])
            if action == Action.LEFT:
                state.hero_state = HeroState.LEFT
            elif action == Action.RIGHT:
                state.hero_state = HeroState.RIGHT
            self._sync_hero()
            return True
        if action == Action.GHOST:
            if state.hero_state == HeroState.KILLED:
                self.start_level(state.current_level)
            else:
                state.move_mode = MoveMode.GHOST
        elif action == Action.SOUND:
            state.sound_enabled = not state.sound_enabled
        elif action == Action.NEXT_LEVEL:
            self.start_level(state.current_level + 1)
        elif action == Action.PREV_LEVEL:
            if state.current_level > 0:
                self.start_level(state.current_level - 1)
        elif action == Action.SUICIDE:
            kill_hero(self.board, state)
        elif action == Action.RESPAWN:
            self.board.set(*state.last_hero_pos, TileKind.HERO)
            state.hero_state = HeroState.FACE1
        elif action == Action.REFILL_TIME:
            state.time = state.time_budget
        return False

    def refresh(self) -> bool:
        """Advance the environment when the refresh countdown runs out."""
        if self._refresh_countdown > 0:
            self._refresh_countdown -= 1
            return False
        self._refresh_countdown = REFRESH_PERIOD

        if self._advance_countdown:
            self._advance_countdown -= 1
            if not self._advance_countdown:
                self.start_level(self.state.current_level + 1)
            return True

        remove_crashes(self.board)
        move_rocks(self.board, self.state, self.rng)
        move_creatures(self.board, self.state)
        self.check_status()
        self._sync_hero()
        self.flush_sound()
        return True

    def check_status(self) -> GameStatus:
        state = self.state
        if state.time <= 0:
            if self.status != GameStatus.GAME_OVER:
                logger.info("Time is up on level %s", state.current_level + 1)
            kill_hero(self.board, state)
            self.status = GameStatus.GAME_OVER
        elif not state.diamonds and self.board.find_object(TileKind.DOOR) is None:
            logger.info("Level %s complete", state.current_level + 1)
            self.status = GameStatus.LEVEL_COMPLETE
            self._advance_countdown = LEVEL_COMPLETE_CYCLES
        elif self.board.find_object(TileKind.HERO) is None:
            self.status = GameStatus.DEAD
        else:
            self.status = GameStatus.PLAYING
        return self.status

    def decrement_time(self) -> None:
        """Count down level time and drive the idle animation.

        Time drops by one every ``INTER_TIME + 1`` ticks. The idle animation is
        checked twice per time unit: on the time boundary and half way to it.
        Both stop while the hero is dead, time is out or a level is ending.
        """
        state = self.state
        if state.time <= 0 or state.hero_state == HeroState.KILLED or self._advance_countdown:
            return
        count = self._time_countdown
        self._time_countdown -= 1

        if count == 0:
            state.time -= 1
            self._time_countdown = INTER_TIME

        if count in (0, INTER_TIME // 2):
            self._update_idle_animation()

    def flush_sound(self) -> Sound:
        """Hand the pending sound to the sink and clear it."""
        pending = self.state.sound_to_play
        if pending != Sound.NONE and self.state.sound_enabled:
            self.sound.play(pending)
        self.state.sound_to_play = Sound.NONE
        return pending

    def status_line(self) -> str:
        state = self.state
        if self.status == GameStatus.GAME_OVER:
            return "* Game Over *"
        if self.status == GameStatus.LEVEL_COMPLETE:
            return f"* Level {state.current_level + 2:02d} *"
        return (
            f"L:{state.current_level + 1:02d},D:{state.diamonds:03d},"
            f"T:{state.time:03d},M:{int(state.sound_enabled)}"
        )

    def snapshot(self) -> ViewSnapshot:
        state = self.state
        return ViewSnapshot(
            level=state.current_level + 1,
            diamonds=state.diamonds,
            time=state.time,
            sound_enabled=state.sound_enabled,
            hero_state=state.hero_state,
            status=self.status,
            message=self.status_line(),
            rows=render_view(
                self.board, state.last_hero_pos, self.view_width, self.view_height
            ),
        )

    def _update_idle_animation(self) -> None:
        state = self.state
        if state.hero_state == HeroState.FACE1 and state.move_time - state.time > IDLE_THRESHOLD:
            state.hero_state = HeroState.FACE2
        else:
            state.hero_state = HeroState.FACE1

    def _sync_hero(self) -> None:
        pos = self.board.find_object(TileKind.HERO)
        if pos is None:
            self.state.hero_state = HeroState.KILLED
        else:
            self.state.last_hero_pos = pos


def render_view(board: Board, center: Tile, width: int, height: int) -> list[str]:
    """Return the ``height x width`` window of glyph rows around ``center``.

    The window is clamped so it never leaves the board.
    """
    width = min(width, board.width)
    height = min(height, board.height)
    row, col = center
    start_row = max(0, min(row - height // 2, board.height - height))
    start_col = max(0, min(col - width // 2, board.width - width))
    rows = board.rows()
    return [line[start_col : start_col + width] for line in rows[start_row : start_row + height]]
