"""Game state: the player, the enemies that chase them, and the rules of a move."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from mazechase.board import NO_PLAYER, Board, MapError, Position, Tile

MOVE_MOBS_MS = 300
FRAME_MS = 100

KEY_ESC = 0xFF1B
KEY_W = 0x77
KEY_A = 0x61
KEY_S = 0x73
KEY_D = 0x64
KEY_LEFT = 0xFF51
KEY_UP = 0xFF52
KEY_RIGHT = 0xFF53
KEY_DOWN = 0xFF54

Key = Union[int, str]


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class Direction(Enum):
    """A step on the board as (dx, dy)."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


_KEY_CODES = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}

_KEY_NAMES = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}

_ESCAPE_NAMES = {"esc", "escape"}


def direction_for_key(key: Key) -> Optional[Direction]:
    """Map a keysym or a key name (``w``, ``up`` ...) to a direction, or None."""
    if isinstance(key, str):
        return _KEY_NAMES.get(key.lower())
    return _KEY_CODES.get(key)


def _is_escape(key: Key) -> bool:
    if isinstance(key, str):
        return key.lower() in _ESCAPE_NAMES
    return key == KEY_ESC


def _step(pos: Position, dx: int, dy: int) -> Position:
    return Position(pos.x + dx, pos.y + dy)


class GameOver(Exception):
    """Raised when a game ends; ``moves`` holds the player's move count."""

    def __init__(self, moves: int, message: str):
        super().__init__(message)
        self.moves = moves


class GameWon(GameOver):
    """The player reached the exit with every collectible taken."""

    def __init__(self, moves: int):
        super().__init__(moves, f"You won in {moves} moves!")


class GameLost(GameOver):
    """An enemy caught the player."""

    def __init__(self, moves: int):
        super().__init__(moves, "You were caught!")


class GameQuit(GameOver):
    """The player left the game."""

    def __init__(self, moves: int):
        super().__init__(moves, "Game closed.")


@dataclass
class Mob:
    """An enemy walking the board."""

    pos: Position
    old_pos: Position
    mob_id: int
    last_move_ms: int
    direction_x: int = 1
    current_frame: int = 0


MoveListener = Callable[[Position, Tile, Direction], None]
MobListener = Callable[[Mob], None]


class Game:
    """The running state of one game on a validated board.

    Enemy cells are turned into floor when the game starts; the enemies
    themselves live in ``mobs``. ``on_move`` and ``on_mob_move`` are
    called after the player or an enemy has been updated.
    """

    def __init__(
        self,
        board: Board,
        start_ms: Optional[int] = None,
        mob_interval_ms: int = MOVE_MOBS_MS,
        frame_ms: int = FRAME_MS,
    ):
        if start_ms is None:
            start_ms = now_ms()
        self.board = board
        if board.start is not None:
            self.player = Position(*board.start)
        else:
            starts = board.positions(Tile.PLAYER)
            if not starts:
                raise MapError(NO_PLAYER)
            self.player = starts[0]
        self.remaining = len(board.positions(Tile.COLLECTIBLE))
        self.moves = 0
        self.mob_interval_ms = mob_interval_ms
        self.frame_ms = frame_ms
        self.last_update_ms = start_ms
        self.on_move: Optional[MoveListener] = None
        self.on_mob_move: Optional[MobListener] = None
        self.mobs: list[Mob] = []
        for index, pos in enumerate(board.positions(Tile.MOB)):
            self.mobs.append(Mob(pos, pos, index % 4, start_ms - index * frame_ms))
            board.set_tile(pos, Tile.FLOOR)

    def _inside(self, pos: Position) -> bool:
        return 0 <= pos.x < self.board.width and 0 <= pos.y < self.board.height

    def _is_wall(self, pos: Position) -> bool:
        return not self._inside(pos) or self.board.tile(pos) is Tile.WALL

    def handle_key(self, key: Key) -> bool:
        """React to a key: escape quits, movement keys move; return whether the player moved."""
        if _is_escape(key):
            raise GameQuit(self.moves)
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.move(direction)

    def move(self, direction: Direction) -> bool:
        """Move the player one cell; return False when a wall is in the way.

        Raises GameWon when the player steps on the exit with nothing left
        to collect.
        """
        dx, dy = direction.value
        target_pos = _step(self.player, dx, dy)
        if self._is_wall(target_pos):
            return False
        target = self.board.tile(target_pos)
        previous = self.player
        if target is Tile.COLLECTIBLE:
            self.remaining -= 1
            self.board.set_tile(target_pos, Tile.FLOOR)
        if target is not Tile.EXIT:
            self.board.set_tile(target_pos, Tile.PLAYER)
        if self.board.tile(previous) is not Tile.EXIT:
            self.board.set_tile(previous, Tile.FLOOR)
        self.player = target_pos
        self.moves += 1
        if self.on_move is not None:
            self.on_move(previous, target, direction)
        if target is Tile.EXIT and self.remaining == 0:
            raise GameWon(self.moves)
        return True

    def _next_mob_position(self, mob: Mob) -> Position:
        pos = mob.pos
        if pos.y < self.player.y and not self._is_wall(_step(pos, 0, 1)):
            return _step(pos, 0, 1)
        if pos.y > self.player.y and not self._is_wall(_step(pos, 0, -1)):
            return _step(pos, 0, -1)
        ahead = _step(pos, mob.direction_x, 0)
        if not self._is_wall(ahead):
            return ahead
        mob.direction_x = -mob.direction_x
        return pos

    def update_mobs(self, current_ms: Optional[int] = None) -> list[Mob]:
        """Step every enemy whose interval has elapsed and return those enemies.

        Raises GameLost when an enemy steps onto the player.
        """
        if current_ms is None:
            current_ms = now_ms()
        updated: list[Mob] = []
        for mob in self.mobs:
            if current_ms - mob.last_move_ms < self.mob_interval_ms:
                continue
            mob.old_pos = mob.pos
            target = self._next_mob_position(mob)
            if target == self.player:
                raise GameLost(self.moves)
            mob.pos = target
            if self.on_mob_move is not None:
                self.on_mob_move(mob)
            mob.last_move_ms = current_ms
            updated.append(mob)
        return updated