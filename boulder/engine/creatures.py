from __future__ import annotations

import logging

from boulder.common.types import DIRECTION_DELTAS, Direction, TileKind
from boulder.engine.board import Board
from boulder.engine.physics import make_crash
from boulder.engine.state import GameState

logger = logging.getLogger(__name__)

CREATURE_KINDS = {TileKind.BOX, TileKind.FLY}
# Offsets from the last direction, tried in order: left turn first, then
# straight on, right turn and finally back.
TURN_ORDER = (-1, 0, 1, 2)


def move_creatures(board: Board, state: GameState) -> None:
    """Let every box and fly take at most one step."""
    for row in range(board.height - 2, 0, -1):
        for col in range(1, board.width - 1):
            board.set_mover_active(row, col, False)

    for row in range(board.height - 2, 0, -1):
        for col in range(1, board.width - 1):
            if board.get(row, col) not in CREATURE_KINDS or board.is_mover_active(row, col):
                continue
            last = board.mover_dir(row, col)
            for turn in TURN_ORDER:
                if _move_creature(board, state, row, col, last.turned(turn)):
                    break


def _move_creature(
    board: Board, state: GameState, row: int, col: int, direction: Direction
) -> bool:
    d_row, d_col = DIRECTION_DELTAS[direction]
    t_row, t_col = row + d_row, col + d_col
    kind = board.get(row, col)
    target = board.get(t_row, t_col)

    if target == TileKind.HERO:
        # A box blows the hero up, a fly leaves diamonds behind.
        logger.info("Hero caught by %s at (%s, %s)", kind.name, t_row, t_col)
        crash = TileKind.CRASH if kind == TileKind.BOX else TileKind.DIAMOND
        make_crash(board, state, crash, t_row, t_col)
        return True

    if target == TileKind.TUNNEL:
        board.set(t_row, t_col, kind)
        board.set(row, col, TileKind.TUNNEL)
        board.set_mover_active(t_row, t_col, True)
        board.set_mover_dir(t_row, t_col, direction)
        return True

    return False
