"""Game state: player position, collectibles, move counting and key mapping."""

from __future__ import annotations

from enum import Enum

from solong.gamemap import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    PLAYER_ON_EXIT,
    WALL,
    GameMap,
)

KEY_W = 13
KEY_A = 0
KEY_S = 1
KEY_D = 2
KEY_ESC = 53
KEY_LEFT = 123
KEY_RIGHT = 124
KEY_DOWN = 125
KEY_UP = 126


class Direction(Enum):
    """A step of one tile; the value is ``(dx, dy)``."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    ON_EXIT = "on_exit"
    WON = "won"


_KEY_DIRECTIONS = {
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
}


def direction_for_key(keycode: int) -> Direction | None:
    """Return the direction bound to ``keycode``, or None if it moves nothing."""
    return _KEY_DIRECTIONS.get(keycode)


class Game:
    """The player's progress through a map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        try:
            self.x, self.y = next(game_map.positions(PLAYER))
        except StopIteration:
            raise ValueError("the map has no player start") from None
        self.collectibles = game_map.count(COLLECTIBLE)
        self.moves = 0
        self.finished = False

    def _relocate(self, new_x: int, new_y: int, left_behind: str, arrived: str) -> None:
        self.map.place(self.x, self.y, left_behind)
        self.map.place(new_x, new_y, arrived)
        self.x, self.y = new_x, new_y
        self.moves += 1

    def move(self, new_x: int, new_y: int) -> MoveResult:
        """Try to move the player to ``(new_x, new_y)``."""
        if self.finished:
            raise RuntimeError("the game is over")
        target = self.map.tile(new_x, new_y)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        if target == EXIT:
            if self.collectibles == 0:
                self.finished = True
                return MoveResult.WON
            self._relocate(new_x, new_y, FLOOR, PLAYER_ON_EXIT)
            return MoveResult.ON_EXIT
        if self.map.tile(self.x, self.y) == PLAYER_ON_EXIT:
            self._relocate(new_x, new_y, EXIT, PLAYER)
        else:
            self._relocate(new_x, new_y, FLOOR, PLAYER)
        return MoveResult.MOVED

    def step(self, direction: Direction) -> MoveResult:
        """Move the player one tile in ``direction``."""
        return self.move(self.x + direction.dx, self.y + direction.dy)