from __future__ import annotations

import logging

from boulder.common.types import MoveMode, Sound, TileKind
from boulder.engine.board import Board
from boulder.engine.physics import make_crash
from boulder.engine.state import GameState

logger = logging.getLogger(__name__)

BLOCKING_KINDS = {TileKind.WALL, TileKind.ROCK, TileKind.METAL}


def move_hero(board: Board, state: GameState, d_row: int, d_col: int) -> None:
    """Resolve one player step by (d_row, d_col).

    In ghost mode the target square is cleared and the hero stays put. The
    ghost flag only lasts for a single resolved step.
    """
    pos = board.find_object(TileKind.HERO)
    if pos is None:
        return
    row, col = pos
    t_row, t_col = row + d_row, col + d_col
    target = board.get(t_row, t_col)

    if target == TileKind.DIAMOND:
        if state.diamonds:
            state.diamonds -= 1
        state.request_sound(Sound.DIAMOND)
    elif target == TileKind.ROCK:
        # Rocks are only pushed sideways and only into a tunnel.
        if d_col:
            beyond = t_col + d_col
            if board.get(row, beyond) == TileKind.TUNNEL:
                board.set(row, t_col, TileKind.TUNNEL)
                board.set(row, beyond, TileKind.ROCK)
        target = board.get(t_row, t_col)
    elif target == TileKind.BOX:
        make_crash(board, state, TileKind.CRASH, t_row, t_col)
        return
    elif target == TileKind.FLY:
        make_crash(board, state, TileKind.DIAMOND, t_row, t_col)
        return

    door_locked = target == TileKind.DOOR and state.diamonds > 0
    if target not in BLOCKING_KINDS and board.in_bounds(t_row, t_col) and not door_locked:
        if state.move_mode == MoveMode.REAL:
            board.set(row, col, TileKind.TUNNEL)
            board.set(t_row, t_col, TileKind.HERO)
        else:
            board.set(t_row, t_col, TileKind.TUNNEL)
        if state.sound_to_play == Sound.NONE:
            state.request_sound(Sound.MOVE)

    state.move_mode = MoveMode.REAL
    state.move_time = state.time


def kill_hero(board: Board, state: GameState) -> None:
    pos = board.find_object(TileKind.HERO)
    if pos is None:
        return
    logger.info("Hero destroyed at %s", pos)
    make_crash(board, state, TileKind.CRASH, *pos)
