from __future__ import annotations

import logging
import random

from boulder.common.types import Sound, Tile, TileKind
from boulder.engine.board import Board
from boulder.engine.state import GameState

logger = logging.getLogger(__name__)

FALL_LEFT = -1
FALL_RIGHT = 1

FALLING_KINDS = {TileKind.ROCK, TileKind.DIAMOND}
# Anything a rock or diamond can rest on and roll off.
SUPPORT_KINDS = {
    TileKind.ROCK,
    TileKind.DIAMOND,
    TileKind.WALL,
    TileKind.DOOR,
    TileKind.METAL,
}


def make_crash(board: Board, state: GameState, kind: TileKind, row: int, col: int) -> None:
    """Fill the 3x3 block around (row, col) with ``kind``, leaving metal intact."""
    for j in range(row - 1, row + 2):
        for i in range(col - 1, col + 2):
            if board.get(j, i) != TileKind.METAL:
                board.set(j, i, kind)
    logger.debug("Crash of %s at (%s, %s)", kind.name, row, col)
    state.request_sound(Sound.EXPLOSION)


def remove_crashes(board: Board) -> None:
    """Turn every crash residue back into tunnel."""
    for row in range(board.height - 2, 0, -1):
        for col in range(board.width):
            if board.get(row, col) == TileKind.CRASH:
                board.set(row, col, TileKind.TUNNEL)


def move_rocks(board: Board, state: GameState, rng: random.Random) -> None:
    """Advance every rock and diamond by one step.

    Rows are scanned bottom-up so an object never falls twice in one pass.
    Even rows sweep left to right and odd rows right to left. An object that
    rolled sideways is not visited again in the same pass.
    """
    rolled: set[Tile] = set()
    for row in range(board.height - 2, 0, -1):
        if row % 2:
            cols = range(board.width - 2, 0, -1)
        else:
            cols = range(1, board.width - 1)
        for col in cols:
            if (row, col) in rolled or board.get(row, col) not in FALLING_KINDS:
                continue

            if board.get(row + 1, col) in SUPPORT_KINDS:
                # One random side per tick, even if only the other one is free.
                side = rng.choice((FALL_LEFT, FALL_RIGHT))
                landed = _fall_on_side(board, row, col, side)
                if landed is not None:
                    rolled.add(landed)

            if board.get(row + 1, col) == TileKind.TUNNEL:
                board.set(row + 1, col, board.get(row, col))
                board.set(row, col, TileKind.TUNNEL)
                board.set_falling(row + 1, col, True)

            below = board.get(row + 1, col)
            if below == TileKind.HERO and board.is_falling(row, col):
                logger.info("Hero crushed at (%s, %s)", row + 1, col)
                make_crash(board, state, TileKind.CRASH, row + 1, col)
            elif below == TileKind.BOX:
                make_crash(board, state, TileKind.CRASH, row + 1, col)
            elif below == TileKind.FLY:
                make_crash(board, state, TileKind.DIAMOND, row + 1, col)

            board.set_falling(row, col, False)


def _fall_on_side(board: Board, row: int, col: int, side: int) -> Tile | None:
    target = col + side
    if board.get(row, target) != TileKind.TUNNEL or board.get(row + 1, target) != TileKind.TUNNEL:
        return None
    board.set(row, target, board.get(row, col))
    board.set(row, col, TileKind.TUNNEL)
    board.set_falling(row, target, True)
    return (row, target)
