import curses

from boulder.common.types import Action
from boulder.frontend.app import parse_args
from boulder.frontend.terminal import action_for_key


def test_keys_map_to_actions():
    assert action_for_key(ord("a")) == Action.LEFT
    assert action_for_key(curses.KEY_RIGHT) == Action.RIGHT
    assert action_for_key(ord(" ")) == Action.GHOST
    assert action_for_key(13) == Action.GHOST
    assert action_for_key(ord("q")) == Action.QUIT


def test_unknown_keys_are_ignored():
    assert action_for_key(None) is None
    assert action_for_key(ord("z")) is None


def test_cli_overrides():
    options = parse_args(["--level", "2", "--seed", "7", "--no-sound", "--fps", "30"])
    assert options.level == 2
    assert options.seed == 7
    assert options.sound is False
    assert options.fps == 30
