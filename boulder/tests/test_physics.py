from boulder.common.types import KINDS_BY_GLYPH, Sound, TileKind
from boulder.engine.board import Board
from boulder.engine.physics import make_crash, move_rocks, remove_crashes
from boulder.engine.state import GameState


class FixedSide:
    """Stands in for random.Random; always rolls to the same side."""

    def __init__(self, index: int) -> None:
        self.index = index

    def choice(self, options):
        return options[self.index]


LEFT = FixedSide(0)
RIGHT = FixedSide(1)


def _board(rows: list[str]) -> Board:
    board = Board(len(rows), len(rows[0]))
    for row, line in enumerate(rows):
        for col, glyph in enumerate(line):
            board.set(row, col, KINDS_BY_GLYPH[glyph])
    return board


def test_rock_falls_straight_down_when_free():
    board = _board(
        [
            "========",
            "=      =",
            "=  o   =",
            "=      =",
            "=      =",
            "========",
        ]
    )
    move_rocks(board, GameState(), LEFT)
    assert board.get(2, 3) == TileKind.TUNNEL
    assert board.get(3, 3) == TileKind.ROCK
    assert board.is_falling(3, 3) is True


def test_rock_rolls_left_off_wall():
    board = _board(
        [
            "========",
            "=      =",
            "=      =",
            "=      =",
            "=      =",
            "=    o==",
            "=    ===",
            "========",
        ]
    )
    move_rocks(board, GameState(), LEFT)
    assert board.get(5, 5) == TileKind.TUNNEL
    assert board.get(5, 4) == TileKind.ROCK
    assert board.is_falling(5, 4) is True


def test_rock_stays_when_chosen_side_is_blocked():
    board = _board(
        [
            "========",
            "=      =",
            "=    o==",
            "=    ===",
            "========",
        ]
    )
    move_rocks(board, GameState(), RIGHT)
    assert board.get(2, 5) == TileKind.ROCK
    assert board.is_falling(2, 5) is False


def test_resting_rock_does_not_hurt_hero():
    board = _board(
        [
            "=======",
            "=  o  =",
            "=  R  =",
            "=======",
        ]
    )
    state = GameState()
    move_rocks(board, state, LEFT)
    assert board.get(2, 3) == TileKind.HERO
    assert state.sound_to_play == Sound.NONE


def test_falling_rock_crushes_hero():
    board = _board(
        [
            "=======",
            "=  o  =",
            "=     =",
            "=  R  =",
            "=     =",
            "=======",
        ]
    )
    state = GameState()
    move_rocks(board, state, LEFT)
    assert board.get(2, 3) == TileKind.ROCK
    move_rocks(board, state, LEFT)
    assert board.find_object(TileKind.HERO) is None
    assert board.get(3, 3) == TileKind.CRASH
    assert state.sound_to_play == Sound.EXPLOSION


def test_rock_on_fly_leaves_diamonds():
    board = _board(
        [
            "=======",
            "=     =",
            "=  o  =",
            "=  %  =",
            "=     =",
            "=======",
        ]
    )
    move_rocks(board, GameState(), LEFT)
    for row in (3, 4):
        for col in (2, 3, 4):
            assert board.get(row, col) == TileKind.DIAMOND


def test_rock_on_box_explodes():
    board = _board(
        [
            "=======",
            "=     =",
            "=  o  =",
            "=  @  =",
            "=     =",
            "=======",
        ]
    )
    move_rocks(board, GameState(), LEFT)
    assert board.get(3, 3) == TileKind.CRASH
    assert board.get(4, 2) == TileKind.CRASH


def test_crash_never_replaces_metal():
    board = _board(
        [
            "######",
            "#~#~~#",
            "#~R~~#",
            "#~~#~#",
            "######",
        ]
    )
    metal = {
        (r, c)
        for r in range(board.height)
        for c in range(board.width)
        if board.get(r, c) == TileKind.METAL
    }
    make_crash(board, GameState(), TileKind.CRASH, 2, 2)
    make_crash(board, GameState(), TileKind.DIAMOND, 1, 1)
    for r, c in metal:
        assert board.get(r, c) == TileKind.METAL


def test_crash_removal_is_idempotent():
    board = _board(
        [
            "=======",
            "=~~~~~=",
            "=~~R~~=",
            "=~~~~~=",
            "=======",
        ]
    )
    make_crash(board, GameState(), TileKind.CRASH, 2, 3)
    remove_crashes(board)
    after_first = board.rows()
    assert "^" not in "".join(after_first)
    remove_crashes(board)
    assert board.rows() == after_first


class ScriptedSides:
    """Hands out roll directions in the order the rocks ask for them."""

    def __init__(self, indexes: list[int]) -> None:
        self.indexes = list(indexes)

    def choice(self, options):
        return options[self.indexes.pop(0)]


def test_even_row_sweeps_left_to_right():
    board = _board(
        [
            "=======",
            "=     =",
            "==o o==",
            "=== ===",
            "=======",
        ]
    )
    # The left rock asks first and rolls right into the gap.
    move_rocks(board, GameState(), ScriptedSides([1, 0]))
    assert board.get(2, 2) == TileKind.TUNNEL
    assert board.get(2, 3) == TileKind.ROCK
    assert board.get(2, 4) == TileKind.ROCK


def test_odd_row_sweeps_right_to_left():
    board = _board(
        [
            "=======",
            "=     =",
            "=     =",
            "==o o==",
            "=== ===",
            "=======",
        ]
    )
    # The right rock asks first and rolls left into the gap.
    move_rocks(board, GameState(), ScriptedSides([0, 1]))
    assert board.get(3, 2) == TileKind.ROCK
    assert board.get(3, 3) == TileKind.ROCK
    assert board.get(3, 4) == TileKind.TUNNEL
