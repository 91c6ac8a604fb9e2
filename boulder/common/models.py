from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from boulder.common.constants import LEVELS_HIGH, LEVELS_WIDTH
from boulder.common.types import KINDS_BY_GLYPH, GameStatus, HeroState, TileKind

BORDER_KINDS = {TileKind.WALL, TileKind.METAL}


class LevelDefinition(BaseModel):
    """Static level layout plus its diamond goal and time budget."""

    name: str = ""
    rows: List[str]
    diamonds: int = Field(ge=0)
    time: int = Field(gt=0)

    @field_validator("rows")
    @classmethod
    def _check_shape(cls, rows: List[str]) -> List[str]:
        if len(rows) != LEVELS_HIGH:
            raise ValueError(f"level must have {LEVELS_HIGH} rows, got {len(rows)}")
        for index, row in enumerate(rows):
            if len(row) != LEVELS_WIDTH:
                raise ValueError(
                    f"row {index} must be {LEVELS_WIDTH} wide, got {len(row)}"
                )
            unknown = set(row) - set(KINDS_BY_GLYPH)
            if unknown:
                raise ValueError(f"row {index} has unknown tiles {sorted(unknown)}")
        return rows

    @model_validator(mode="after")
    def _check_border(self) -> LevelDefinition:
        # Rules read neighbours without bounds checks, so the outer ring must be solid.
        last_row = len(self.rows) - 1
        last_col = len(self.rows[0]) - 1
        for row, line in enumerate(self.rows):
            for col, glyph in enumerate(line):
                on_edge = row in (0, last_row) or col in (0, last_col)
                if on_edge and KINDS_BY_GLYPH[glyph] not in BORDER_KINDS:
                    raise ValueError(f"border tile at ({row}, {col}) must be wall or metal")
        return self

    def kind_at(self, row: int, col: int) -> TileKind:
        return KINDS_BY_GLYPH[self.rows[row][col]]


class ViewSnapshot(BaseModel):
    level: int
    diamonds: int
    time: int
    sound_enabled: bool
    hero_state: HeroState
    status: GameStatus
    message: str
    rows: List[str] = Field(default_factory=list)
