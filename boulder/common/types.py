from __future__ import annotations

from enum import Enum, IntEnum
from typing import Tuple

Tile = Tuple[int, int]  # (row, col)


class TileKind(IntEnum):
    TUNNEL = 0
    WALL = 1
    HERO = 2
    ROCK = 3
    DIAMOND = 4
    GROUND = 5
    METAL = 6
    BOX = 7
    DOOR = 8
    FLY = 9
    CRASH = 10


GLYPHS = {
    TileKind.TUNNEL: " ",
    TileKind.WALL: "=",
    TileKind.HERO: "R",
    TileKind.ROCK: "o",
    TileKind.DIAMOND: "*",
    TileKind.GROUND: "~",
    TileKind.METAL: "#",
    TileKind.BOX: "@",
    TileKind.DOOR: ">",
    TileKind.FLY: "%",
    TileKind.CRASH: "^",
}
KINDS_BY_GLYPH = {glyph: kind for kind, glyph in GLYPHS.items()}


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turned(self, steps: int) -> Direction:
        return Direction((self + steps) % 4)


DIRECTION_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class HeroState(str, Enum):
    KILLED = "killed"
    FACE1 = "face1"
    FACE2 = "face2"
    RIGHT = "right"
    LEFT = "left"


class MoveMode(str, Enum):
    REAL = "real"
    GHOST = "ghost"


class Sound(str, Enum):
    NONE = "none"
    MOVE = "move"
    DIAMOND = "diamond"
    EXPLOSION = "explosion"


class GameStatus(str, Enum):
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"
    DEAD = "dead"


class Action(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"
    GHOST = "GHOST"  # also respawns when the hero is dead
    SOUND = "SOUND"
    NEXT_LEVEL = "NEXT_LEVEL"
    PREV_LEVEL = "PREV_LEVEL"
    SUICIDE = "SUICIDE"
    RESPAWN = "RESPAWN"
    REFILL_TIME = "REFILL_TIME"
    QUIT = "QUIT"
