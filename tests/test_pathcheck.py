import pytest

from solong.gamemap import GameMap
from solong.pathcheck import has_valid_path


def _start(game_map):
    return next(game_map.positions("P"))


@pytest.mark.parametrize(
    "lines",
    [
        ["11111", "1PCE1", "11111"],
        ["1111111", "1P0C001", "1010101", "1C000E1", "1111111"],
        ["111111", "1PEC01", "111111"],
    ],
)
def test_reachable_maps_are_valid(lines):
    game_map = GameMap(lines)
    assert has_valid_path(game_map, *_start(game_map)) is True


@pytest.mark.parametrize(
    "lines",
    [
        ["1111111", "1P0C1E1", "1111111"],
        ["1111111", "1P0E1C1", "1111111"],
        ["111111", "1P1CE1", "111111"],
    ],
)
def test_blocked_targets_make_map_invalid(lines):
    game_map = GameMap(lines)
    assert has_valid_path(game_map, *_start(game_map)) is False


def test_map_is_not_modified():
    lines = ["1111111", "1P0C001", "1C000E1", "1111111"]
    game_map = GameMap(lines)
    has_valid_path(game_map, *_start(game_map))
    assert game_map.lines() == lines


def test_start_outside_map_is_invalid():
    game_map = GameMap(["11111", "1PCE1", "11111"])
    assert has_valid_path(game_map, -1, 0) is False