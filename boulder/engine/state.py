from __future__ import annotations

from dataclasses import dataclass

from boulder.common.types import Direction, HeroState, MoveMode, Sound, Tile, TileKind


@dataclass
class Cell:
    """One board square.

    The movement fields only mean something while ``kind`` is a falling
    object (rock_falling) or a creature (mover_active, mover_last_dir).
    """

    kind: TileKind = TileKind.TUNNEL
    rock_falling: bool = False
    mover_active: bool = False
    mover_last_dir: Direction = Direction.NORTH


@dataclass
class GameState:
    current_level: int = 0
    diamonds_required: int = 0
    time_budget: int = 0
    diamonds: int = 0  # left to collect
    time: int = 0  # left to finish
    hero_state: HeroState = HeroState.FACE1
    move_mode: MoveMode = MoveMode.REAL
    last_hero_pos: Tile = (1, 1)
    move_time: int = 0  # value of ``time`` at the last resolved move
    sound_enabled: bool = True
    sound_to_play: Sound = Sound.NONE

    def request_sound(self, sound: Sound) -> None:
        self.sound_to_play = sound
