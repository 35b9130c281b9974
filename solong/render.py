"""Drawing the map tiles onto a pygame surface."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Union

import pygame

from solong.game import Game
from solong.gamemap import COLLECTIBLE, EXIT, PLAYER, PLAYER_ON_EXIT, WALL
from solong.xpm import XpmError, XpmImage, load_xpm

TILE_SIZE = 60
BACKGROUND = (0, 0, 0)

IMAGE_FILES = {
    "wall": "wall.xpm",
    "collect": "collect.xpm",
    "player": "player.xpm",
    "exit": "exit.xpm",
}

_LOAD_ERRORS = {
    "wall": "Error wall_im",
    "collect": "Error collect_img",
    "player": "Error player_img",
    "exit": "Error exit_img",
}

_TILE_IMAGES = {
    WALL: "wall",
    EXIT: "exit",
    COLLECTIBLE: "collect",
    PLAYER: "player",
}


def load_images(directory: Union[str, "os.PathLike[str]"]) -> dict[str, XpmImage]:
    """Load the wall, collectible, player and exit images from ``directory``."""
    images: dict[str, XpmImage] = {}
    for name, filename in IMAGE_FILES.items():
        try:
            images[name] = load_xpm(os.path.join(directory, filename))
        except XpmError as exc:
            raise XpmError(_LOAD_ERRORS[name]) from exc
    return images


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            # The top byte counts transparency, not opacity.
            alpha = 255 - ((value >> 24) & 0xFF)
            surface.set_at(
                (x, y),
                ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha),
            )
    return surface


class Renderer:
    """Draws a game's map with one image per tile."""

    def __init__(self, game: Game, images: Mapping[str, XpmImage]) -> None:
        missing = set(IMAGE_FILES) - set(images)
        if missing:
            raise KeyError(f"missing images: {', '.join(sorted(missing))}")
        self.game = game
        self._surfaces = {name: _to_surface(images[name]) for name in IMAGE_FILES}

    def window_size(self) -> tuple[int, int]:
        """Return the window size in pixels that fits the whole map."""
        game_map = self.game.map
        return game_map.width * TILE_SIZE, game_map.height * TILE_SIZE

    def _blit(self, surface: pygame.Surface, name: str, x: int, y: int) -> None:
        surface.blit(self._surfaces[name], (x * TILE_SIZE, y * TILE_SIZE))

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw every non-floor tile onto it."""
        surface.fill(BACKGROUND)
        for y, line in enumerate(self.game.map.lines()):
            for x, tile in enumerate(line):
                if tile == PLAYER_ON_EXIT:
                    self._blit(surface, "exit", self.game.x, self.game.y)
                    self._blit(surface, "player", self.game.x, self.game.y)
                elif tile in _TILE_IMAGES:
                    self._blit(surface, _TILE_IMAGES[tile], x, y)