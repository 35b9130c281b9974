import pygame
import pytest

from solong.game import Direction, Game, MoveResult
from solong.gamemap import GameMap
from solong.render import IMAGE_FILES, TILE_SIZE, Renderer, load_images
from solong.xpm import XpmError, XpmImage

COLOURS = {
    "wall": 0x00FF0000,
    "collect": 0x0000FF00,
    "player": 0x000000FF,
    "exit": 0x00FFFF00,
}


def _solid(value):
    return XpmImage(2, 2, ((value, value), (value, value)))


def _images():
    return {name: _solid(value) for name, value in COLOURS.items()}


def _rgb(value):
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def _at(surface, x, y):
    colour = surface.get_at((x * TILE_SIZE, y * TILE_SIZE))
    return (colour.r, colour.g, colour.b)


def _xpm(colour):
    return (
        "/* XPM */\n"
        "static char *img[] = {\n"
        '"2 2 1 1",\n'
        f'"a c {colour}",\n'
        '"aa",\n'
        '"aa"\n'
        "};\n"
    )


def test_load_images_reads_all_files(tmp_path):
    for filename in IMAGE_FILES.values():
        (tmp_path / filename).write_text(_xpm("#FF0000"))
    images = load_images(tmp_path)
    assert set(images) == set(IMAGE_FILES)
    assert images["wall"].pixel(0, 0) == 0xFF0000


def test_load_images_missing_wall(tmp_path):
    with pytest.raises(XpmError, match="Error wall_im"):
        load_images(tmp_path)


def test_load_images_missing_player(tmp_path):
    for name in ("wall", "collect"):
        (tmp_path / IMAGE_FILES[name]).write_text(_xpm("#FF0000"))
    with pytest.raises(XpmError, match="Error player_img"):
        load_images(tmp_path)


def test_window_size_matches_map():
    game = Game(GameMap(["11111", "1PCE1", "11111"]))
    renderer = Renderer(game, _images())
    assert renderer.window_size() == (5 * TILE_SIZE, 3 * TILE_SIZE)


def test_renderer_requires_all_images():
    game = Game(GameMap(["11111", "1PCE1", "11111"]))
    images = _images()
    del images["exit"]
    with pytest.raises(KeyError):
        Renderer(game, images)


def test_draw_places_each_tile():
    game = Game(GameMap(["111111", "1PC0E1", "111111"]))
    renderer = Renderer(game, _images())
    surface = pygame.Surface(renderer.window_size())
    surface.fill((9, 9, 9))
    renderer.draw(surface)
    assert _at(surface, 0, 0) == _rgb(COLOURS["wall"])
    assert _at(surface, 1, 1) == _rgb(COLOURS["player"])
    assert _at(surface, 2, 1) == _rgb(COLOURS["collect"])
    assert _at(surface, 3, 1) == (0, 0, 0)
    assert _at(surface, 4, 1) == _rgb(COLOURS["exit"])


def test_draw_player_on_exit_shows_player():
    game = Game(GameMap(["111111", "1PEC01", "111111"]))
    assert game.step(Direction.RIGHT) is MoveResult.ON_EXIT
    renderer = Renderer(game, _images())
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _at(surface, 2, 1) == _rgb(COLOURS["player"])
    assert _at(surface, 1, 1) == (0, 0, 0)


def test_transparent_pixels_leave_background():
    images = _images()
    images["wall"] = _solid(0xFF000000)
    game = Game(GameMap(["11111", "1PCE1", "11111"]))
    renderer = Renderer(game, images)
    surface = pygame.Surface(renderer.window_size())
    renderer.draw(surface)
    assert _at(surface, 0, 0) == (0, 0, 0)