"""Checking that every collectible and the exit can be reached from the start."""

from __future__ import annotations

from solong.gamemap import COLLECTIBLE, EXIT, WALL, GameMap

_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def has_valid_path(game_map: GameMap, x: int, y: int) -> bool:
    """Return True if a flood fill from ``(x, y)`` reaches every exit and collectible.

    Only the interior of the map (everything inside the outer ring) is
    searched for targets.  The fill walks through any tile that is not a
    wall, exits and collectibles included.  The map itself is left untouched.
    """
    width, height = game_map.width, game_map.height

    def inside(cx: int, cy: int) -> bool:
        return 0 <= cx < width and 0 <= cy < height

    if not inside(x, y):
        return False

    targets = {
        (tx, ty)
        for tile in (EXIT, COLLECTIBLE)
        for tx, ty in game_map.positions(tile)
        if 0 < tx < width - 1 and 0 < ty < height - 1
    }

    visited = {(x, y)}
    stack = [(x, y)]
    opened = False
    while stack:
        cx, cy = stack.pop()
        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if (nx, ny) in visited or not inside(nx, ny):
                continue
            if game_map.tile(nx, ny) == WALL:
                continue
            visited.add((nx, ny))
            opened = True
            stack.append((nx, ny))
    return opened and targets <= visited