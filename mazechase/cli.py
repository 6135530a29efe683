"""Command line entry point: play a maze map from keys read on standard input."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from mazechase.board import Board, MapError, load_board
from mazechase.game import Game, GameOver, GameQuit, Key

USAGE = "Usage: mazechase <map_file.ber>"
MAP_SUFFIX = ".ber"
STARS = "*" * 32


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map path from the arguments, or raise ValueError on bad usage."""
    if len(argv) != 1 or not argv[0].endswith(MAP_SUFFIX):
        raise ValueError(USAGE)
    return argv[0]


def _picture(game: Game) -> str:
    rows = [list(row) for row in str(game.board).split("\n")]
    for mob in game.mobs:
        rows[mob.pos.y][mob.pos.x] = "X"
    return "\n".join("".join(row) for row in rows)


def _announce(outcome: GameOver, out: TextIO) -> None:
    out.write(f"{STARS}\n{outcome}\n{STARS}\n")


def run(board: Board, keys: Iterable[Key], out: TextIO) -> GameOver:
    """Play ``keys`` on ``board`` and return how the game ended.

    Enemies take one step after every key. Running out of keys ends the
    game as if the player had quit.
    """
    clock = 0
    game = Game(board, start_ms=clock)
    out.write(_picture(game) + "\n")
    try:
        for key in keys:
            if game.handle_key(key):
                out.write(f"Moves: {game.moves}\n")
            clock += game.mob_interval_ms
            game.update_mobs(clock)
    except GameOver as outcome:
        _announce(outcome, out)
        return outcome
    outcome = GameQuit(game.moves)
    _announce(outcome, out)
    return outcome


def _fail(message: str, out: TextIO) -> int:
    out.write(f"Error:\n{message}\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and play it; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    out = sys.stdout
    try:
        path = check_arguments(argv)
    except ValueError as exc:
        return _fail(str(exc), out)
    try:
        board = load_board(path)
    except MapError as exc:
        return _fail(str(exc), out)
    keys = (token for line in sys.stdin for token in line.split())
    run(board, keys, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())