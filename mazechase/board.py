"""Game boards: loading, validation and reachability of maze maps."""

from __future__ import annotations

import os
from collections import deque
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Union

MIN_SIZE = 3
MAX_WIDTH = 30
MAX_HEIGHT = 16

NOT_FOUND = "Map file not found or unreadable."
NO_LINES = "Map file is empty."
EMPTY_LINE = "Map contains an empty line."
NOT_RECTANGULAR = "Map is not rectangular."
TOO_SMALL = "Map is too small (at least 3x3)."
TOO_BIG = "Map is too big (at most 30 wide and 16 high)."
TOP_BOTTOM_OPEN = "Map top or bottom row is not closed by walls."
SIDES_OPEN = "Map left or right column is not closed by walls."
DUPLICATE_START_OR_EXIT = "Map must hold exactly one player and one exit."
INVALID_CHARACTER = "Map contains an invalid character."
NO_COLLECTIBLE = "Map must hold at least one collectible."
NO_MOB = "Map must hold at least one enemy."
NO_PLAYER = "Map must hold a player start."
NO_EXIT = "Map must hold an exit."
COLLECTIBLE_UNREACHABLE = "Not every collectible can be reached."
MOB_UNREACHABLE = "Not every enemy can be reached."
EXIT_UNREACHABLE = "The exit cannot be reached."


class Tile(str, Enum):
    """The characters a map is made of."""

    WALL = "1"
    FLOOR = "0"
    PLAYER = "P"
    EXIT = "E"
    COLLECTIBLE = "C"
    MOB = "X"


class Position(NamedTuple):
    """A cell on the board, column ``x`` and row ``y``."""

    x: int
    y: int


class MapError(ValueError):
    """Raised when a map file cannot be used as a board."""


class Board:
    """A rectangular grid of map characters.

    ``start``, ``exit``, ``collectibles`` and ``mobs`` are filled in by
    :func:`check_content`.
    """

    def __init__(self, rows: list[str]):
        self._cells = [list(row) for row in rows]
        self.height = len(self._cells)
        self.width = len(self._cells[0]) if self._cells else 0
        self.start: Optional[Position] = None
        self.exit: Optional[Position] = None
        self.collectibles = 0
        self.mobs = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Board":
        """Build a board from map lines, checking shape and size."""
        rows: list[str] = []
        for line in lines:
            if line.endswith("\n"):
                line = line[:-1]
            if not line:
                raise MapError(EMPTY_LINE)
            if rows and len(line) != len(rows[0]):
                raise MapError(NOT_RECTANGULAR)
            rows.append(line)
        if not rows:
            raise MapError(NO_LINES)
        height, width = len(rows), len(rows[0])
        if height < MIN_SIZE or width < MIN_SIZE:
            raise MapError(TOO_SMALL)
        if height > MAX_HEIGHT or width > MAX_WIDTH:
            raise MapError(TOO_BIG)
        return cls(rows)

    def _char(self, pos: Position) -> str:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position {tuple(pos)} outside the board")
        return self._cells[y][x]

    def tile(self, pos: Position) -> Tile:
        """Return the tile at ``pos``."""
        char = self._char(pos)
        try:
            return Tile(char)
        except ValueError:
            raise MapError(INVALID_CHARACTER) from None

    def set_tile(self, pos: Position, tile: Tile) -> None:
        """Replace the tile at ``pos``."""
        self._char(pos)
        self._cells[pos[1]][pos[0]] = Tile(tile).value

    def positions(self, tile: Tile) -> list[Position]:
        """Return every position holding ``tile``, row by row."""
        wanted = Tile(tile).value
        return [
            Position(x, y)
            for y, row in enumerate(self._cells)
            for x, char in enumerate(row)
            if char == wanted
        ]

    def reachable(self, start: Position) -> set[Position]:
        """Return the non-wall cells connected to ``start`` by orthogonal steps."""
        start = Position(*start)
        if self._char(start) == Tile.WALL.value:
            return set()
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for step in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                nxt = Position(*step)
                if nxt in seen:
                    continue
                if not (0 <= nxt.x < self.width and 0 <= nxt.y < self.height):
                    continue
                if self._cells[nxt.y][nxt.x] == Tile.WALL.value:
                    continue
                seen.add(nxt)
                queue.append(nxt)
        return seen

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._cells)


def parse_board(text: str) -> Board:
    """Split map text into lines and build a board from them."""
    if not text:
        raise MapError(NO_LINES)
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return Board.from_lines(lines)


def check_walls(board: Board) -> None:
    """Require the border of the board to be made of walls."""
    wall = Tile.WALL.value
    for x in range(board.width):
        if board._char(Position(x, 0)) != wall or board._char(Position(x, board.height - 1)) != wall:
            raise MapError(TOP_BOTTOM_OPEN)
    for y in range(board.height):
        if board._char(Position(0, y)) != wall or board._char(Position(board.width - 1, y)) != wall:
            raise MapError(SIDES_OPEN)


def check_content(board: Board) -> None:
    """Count the board's pieces and require one start, one exit, collectibles and mobs."""
    board.start = None
    board.exit = None
    board.collectibles = 0
    board.mobs = 0
    for y in range(board.height):
        for x in range(board.width):
            pos = Position(x, y)
            char = board._char(pos)
            if char == Tile.COLLECTIBLE.value:
                board.collectibles += 1
            elif char == Tile.MOB.value:
                board.mobs += 1
            elif char == Tile.PLAYER.value and board.start is None:
                board.start = pos
            elif char == Tile.EXIT.value and board.exit is None:
                board.exit = pos
            elif char in (Tile.PLAYER.value, Tile.EXIT.value):
                raise MapError(DUPLICATE_START_OR_EXIT)
            elif char not in (Tile.WALL.value, Tile.FLOOR.value):
                raise MapError(INVALID_CHARACTER)
    if board.collectibles == 0:
        raise MapError(NO_COLLECTIBLE)
    if board.mobs == 0:
        raise MapError(NO_MOB)
    if board.start is None:
        raise MapError(NO_PLAYER)
    if board.exit is None:
        raise MapError(NO_EXIT)


def check_paths(board: Board) -> None:
    """Require every collectible, every mob and the exit to be reachable from the start."""
    if board.start is None:
        raise MapError(NO_PLAYER)
    reached = board.reachable(board.start)
    counts = {tile: 0 for tile in Tile}
    for pos in reached:
        counts[board.tile(pos)] += 1
    if counts[Tile.COLLECTIBLE] != board.collectibles:
        raise MapError(COLLECTIBLE_UNREACHABLE)
    if counts[Tile.MOB] != board.mobs:
        raise MapError(MOB_UNREACHABLE)
    if counts[Tile.EXIT] == 0:
        raise MapError(EXIT_UNREACHABLE)


def load_board(path: Union[str, os.PathLike]) -> Board:
    """Read a map file and return a fully validated board."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(NOT_FOUND) from exc
    board = parse_board(text)
    check_walls(board)
    check_content(board)
    check_paths(board)
    return board