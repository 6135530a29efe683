import io

import pytest

from mazechase.board import NOT_FOUND, check_content, check_paths, check_walls, parse_board
from mazechase.cli import USAGE, check_arguments, main, run
from mazechase.game import GameLost, GameQuit, GameWon

MAP_TEXT = "11111\n1PCE1\n10001\n1X001\n11111\n"


def _board():
    board = parse_board(MAP_TEXT)
    check_walls(board)
    check_content(board)
    check_paths(board)
    return board


def test_check_arguments_accepts_ber_file():
    assert check_arguments(["maps/level.ber"]) == "maps/level.ber"


@pytest.mark.parametrize("argv", [[], ["level.txt"], ["a.ber", "b.ber"]])
def test_check_arguments_rejects_bad_usage(argv):
    with pytest.raises(ValueError, match="Usage"):
        check_arguments(argv)


def test_run_win():
    out = io.StringIO()
    outcome = run(_board(), ["d", "d"], out)
    assert isinstance(outcome, GameWon)
    assert outcome.moves == 2
    assert str(outcome) in out.getvalue()
    assert "Moves: 1" in out.getvalue()


def test_run_lost_when_mob_steps_on_player():
    out = io.StringIO()
    outcome = run(_board(), ["s"], out)
    assert isinstance(outcome, GameLost)
    assert outcome.moves == 1


def test_run_escape_quits():
    outcome = run(_board(), ["esc"], io.StringIO())
    assert isinstance(outcome, GameQuit)
    assert outcome.moves == 0


def test_run_wall_blocks_move():
    out = io.StringIO()
    outcome = run(_board(), ["a"], out)
    assert isinstance(outcome, GameQuit)
    assert outcome.moves == 0
    assert "Moves:" not in out.getvalue()


def test_run_draws_board_first():
    out = io.StringIO()
    run(_board(), [], out)
    assert out.getvalue().startswith(MAP_TEXT.rstrip("\n"))


def test_main_plays_from_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "level.ber"
    path.write_text(MAP_TEXT)
    monkeypatch.setattr("sys.stdin", io.StringIO("d\nd\n"))
    assert main([str(path)]) == 0
    assert str(GameWon(2)) in capsys.readouterr().out


def test_main_usage_error(capsys):
    assert main(["level.txt"]) == 1
    assert capsys.readouterr().out == f"Error:\n{USAGE}\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == f"Error:\n{NOT_FOUND}\n"