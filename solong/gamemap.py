"""Reading, validating and holding the tile grid of a ``.ber`` map."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence
from typing import Union

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
PLAYER = "P"
EXIT = "E"
PLAYER_ON_EXIT = "K"

MAP_EXTENSION = ".ber"
VALID_TILES = frozenset({FLOOR, WALL, COLLECTIBLE, PLAYER, EXIT})

PathLike = Union[str, "os.PathLike[str]"]

_NOT_CLOSED = "Map is not closed/surrounded by walls"


class MapError(ValueError):
    """Raised when a map file cannot be read or is not a valid map."""


class GameMap:
    """A rectangular grid of single-character tiles, indexed by ``(x, y)``."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._rows = [list(line) for line in lines]
        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise ValueError("all rows of a map must have the same width")

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def height(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"GameMap({self.lines()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameMap):
            return NotImplemented
        return self._rows == other._rows

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` and row ``y``."""
        self._check_bounds(x, y)
        return self._rows[y][x]

    def place(self, x: int, y: int, tile: str) -> None:
        """Put ``tile`` at column ``x`` and row ``y``."""
        if len(tile) != 1:
            raise ValueError("a tile is a single character")
        self._check_bounds(x, y)
        self._rows[y][x] = tile

    def positions(self, tile: str) -> Iterator[tuple[int, int]]:
        """Yield every ``(x, y)`` holding ``tile``, row by row."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                if cell == tile:
                    yield x, y

    def count(self, tile: str) -> int:
        """Return how many cells hold ``tile``."""
        return sum(row.count(tile) for row in self._rows)

    def lines(self) -> list[str]:
        """Return the rows as strings."""
        return ["".join(row) for row in self._rows]


def check_extension(filename: PathLike) -> None:
    """Raise MapError unless ``filename`` ends in ``.ber``."""
    name = os.fspath(filename)
    if "." not in name or not name.endswith(MAP_EXTENSION):
        raise MapError("Error: File must have a .ber extension")


def validate_line(line: str, width: int) -> bool:
    """Return True if the first ``width`` characters are all valid tiles."""
    if len(line) < width:
        return False
    return all(ch in VALID_TILES for ch in line[:width])


def count_elements(lines: Iterable[str]) -> dict[str, int]:
    """Count exits, collectibles and player starts over all lines."""
    counts = {EXIT: 0, COLLECTIBLE: 0, PLAYER: 0}
    for line in lines:
        for ch in line.split("\n", 1)[0]:
            if ch in counts:
                counts[ch] += 1
    return counts


def validate_elements(lines: Sequence[str]) -> None:
    """Require one player, one exit and at least one collectible."""
    if not lines:
        raise MapError("The map can not be empty!")
    counts = count_elements(lines)
    if counts[PLAYER] > 1 or counts[EXIT] > 1:
        raise MapError("The map must include only one: P and E")
    if 0 in counts.values():
        raise MapError("The map must include atleast one: C, E and P")


def _all_walls(line: str, width: int) -> bool:
    return len(line) >= width and all(ch == WALL for ch in line[:width])


def validate_shape(lines: Sequence[str]) -> tuple[int, int]:
    """Check walls, rectangularity and tile characters; return (width, height)."""
    if not lines:
        raise MapError("The map can not be empty!")
    width = len(lines[0])
    if not _all_walls(lines[0], width):
        raise MapError(_NOT_CLOSED)
    for line in lines:
        if len(line) != width:
            raise MapError("The Map must be rectangular")
        if not line or line[0] != WALL or line[-1] != WALL:
            raise MapError(_NOT_CLOSED)
        if not validate_line(line, width):
            raise MapError("Map contains invalid characters")
    if not _all_walls(lines[-1], width):
        raise MapError(_NOT_CLOSED)
    return width, len(lines)


def read_map_lines(filename: PathLike) -> list[str]:
    """Read a map file and return its lines without line endings."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Error reading map") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def load_map(filename: PathLike) -> GameMap:
    """Read, validate and return the map stored in ``filename``."""
    check_extension(filename)
    lines = read_map_lines(filename)
    validate_elements(lines)
    validate_shape(lines)
    return GameMap(lines)