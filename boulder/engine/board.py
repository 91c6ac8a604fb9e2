from __future__ import annotations

from boulder.common.constants import LEVELS_HIGH, LEVELS_WIDTH
from boulder.common.types import GLYPHS, Direction, Tile, TileKind
from boulder.engine.state import Cell


class Board:
    """Fixed ``LEVELS_HIGH x LEVELS_WIDTH`` grid of cells.

    Accessors do not check bounds. Levels must be enclosed by Wall or Metal so
    that no rule ever looks past the outermost row or column.
    """

    def __init__(self, height: int = LEVELS_HIGH, width: int = LEVELS_WIDTH) -> None:
        self.height = height
        self.width = width
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def reset(self) -> None:
        for row in self.cells:
            for i in range(len(row)):
                row[i] = Cell()

    def get(self, row: int, col: int) -> TileKind:
        return self.cells[row][col].kind

    def set(self, row: int, col: int, kind: TileKind) -> None:
        self.cells[row][col].kind = kind

    def is_falling(self, row: int, col: int) -> bool:
        return self.cells[row][col].rock_falling

    def set_falling(self, row: int, col: int, value: bool) -> None:
        self.cells[row][col].rock_falling = value

    def is_mover_active(self, row: int, col: int) -> bool:
        return self.cells[row][col].mover_active

    def set_mover_active(self, row: int, col: int, value: bool) -> None:
        self.cells[row][col].mover_active = value

    def mover_dir(self, row: int, col: int) -> Direction:
        return self.cells[row][col].mover_last_dir

    def set_mover_dir(self, row: int, col: int, direction: Direction) -> None:
        self.cells[row][col].mover_last_dir = direction

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def find_object(self, kind: TileKind) -> Tile | None:
        """Return the first interior cell holding ``kind``, scanning top-down."""
        for row in range(1, self.height - 1):
            for col in range(1, self.width - 1):
                if self.cells[row][col].kind == kind:
                    return (row, col)
        return None

    def rows(self) -> list[str]:
        return ["".join(GLYPHS[c.kind] for c in line) for line in self.cells]
