from __future__ import annotations

import logging
from typing import Sequence

from boulder.common.models import LevelDefinition
from boulder.common.types import HeroState
from boulder.engine.board import Board
from boulder.engine.state import GameState

logger = logging.getLogger(__name__)


class LevelOutOfRange(IndexError):
    """Requested level index is not in the catalog."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"level {index} outside catalog of {count}")
        self.index = index
        self.count = count


def load_level(
    board: Board, state: GameState, catalog: Sequence[LevelDefinition], index: int
) -> None:
    """Copy level ``index`` onto the board and take over its goal and budget.

    Nothing is touched when the index is out of range.
    """
    if index < 0 or index >= len(catalog):
        raise LevelOutOfRange(index, len(catalog))
    level = catalog[index]
    board.reset()
    for row in range(board.height):
        for col in range(board.width):
            board.set(row, col, level.kind_at(row, col))
    state.diamonds_required = level.diamonds
    state.time_budget = level.time


def start_level(
    board: Board, state: GameState, catalog: Sequence[LevelDefinition], index: int
) -> int:
    """Load ``index``, falling back to the first level once, and reset counters.

    Returns the level index actually started.
    """
    try:
        load_level(board, state, catalog, index)
    except LevelOutOfRange:
        if index == 0:
            raise RuntimeError("Level catalog has no first level")
        logger.warning("Level %s not found, restarting from the first level", index)
        index = 0
        try:
            load_level(board, state, catalog, index)
        except LevelOutOfRange as exc:
            raise RuntimeError("Level catalog has no first level") from exc

    state.current_level = index
    state.time = state.time_budget
    state.move_time = state.time_budget
    state.diamonds = state.diamonds_required
    state.hero_state = HeroState.FACE1
    logger.info(
        "Started level %s: %s diamonds in %s time units",
        index + 1,
        state.diamonds,
        state.time,
    )
    return index
