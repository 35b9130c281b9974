"""Command-line entry point: validate a map and play it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

import pygame

from solong.game import Direction, Game, MoveResult
from solong.gamemap import MapError, load_map
from solong.pathcheck import has_valid_path
from solong.printf import printf
from solong.render import Renderer, load_images
from solong.xpm import XpmError

IMAGES_DIR = "images"
WINDOW_TITLE = "so_long"

_PYGAME_KEYS = {
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
}


def prepare_game(filename: str) -> Game:
    """Load and validate the map in ``filename`` and start a game on it."""
    game_map = load_map(filename)
    game = Game(game_map)
    if not has_valid_path(game_map, game.x, game.y):
        raise MapError("MAP is not valid")
    return game


def _handle_move(game: Game, direction: Direction) -> MoveResult:
    result = game.step(direction)
    if result is MoveResult.WON:
        printf("You won!")
    elif result is not MoveResult.BLOCKED:
        if result is MoveResult.ON_EXIT:
            printf("collect c\n")
        printf("Step: %d\n", game.moves)
    return result


def run(game: Game, images_dir: str) -> int:
    """Open a window and play ``game`` until it is won or closed."""
    images = load_images(images_dir)
    pygame.init()
    try:
        renderer = Renderer(game, images)
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption(WINDOW_TITLE)
        renderer.draw(screen)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                printf("ESC or X: Bye!")
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            direction = _PYGAME_KEYS.get(event.key)
            if direction is None:
                continue
            result = _handle_move(game, direction)
            if result is MoveResult.WON:
                return 0
            if result is not MoveResult.BLOCKED:
                renderer.draw(screen)
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Arguments must be 2!")
        return 1
    try:
        game = prepare_game(args[0])
        return run(game, IMAGES_DIR)
    except (MapError, XpmError) as exc:
        printf("%s\n", str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())