import pytest

from conftest import place, plain_board
from scrabbler import MoveEngine, Rack
from scrabbler.cli import main, run_cli


def scripted(*answers):
    it = iter(answers)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def game_files(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("CAT\nCATS\n", encoding="utf-8")
    layout = tmp_path / "board.txt"
    layout.write_text("\n".join(["x" * 9] + ["x.......x"] * 7 + ["x" * 9]), encoding="utf-8")
    game = tmp_path / "game.txt"
    rows = ["......."] * 7
    rows[3] = ".CAT..."
    game.write_text("\n".join(rows), encoding="utf-8")
    return words, layout, game


def test_main_once_prints_best_move(game_files, capsys):
    words, layout, game = game_files
    main(["--once", "--rack", "s", "--dict", str(words), "--board", str(layout), "--game", str(game)])
    out = capsys.readouterr().out
    assert "BEST MOVE" in out
    assert "Points: 6" in out
    assert "S 4 5" in out


def test_play_commits_best_move(cat_lexicon, capsys):
    engine = MoveEngine(cat_lexicon)
    board = place(plain_board(), 4, 2, "CAT")

    final = run_cli(engine, board, Rack.from_string("S"), read=scripted("p", "q"))
    assert final.get(4, 5) == "S"
    out = capsys.readouterr().out
    assert "Played" in out
    assert "No valid moves found" in out


def test_tile_and_rack_commands(cat_lexicon, capsys):
    engine = MoveEngine(cat_lexicon)
    board = plain_board()

    final = run_cli(engine, board, Rack.from_string(""), read=scripted("t Z 9 9", "t C 4 2", "t A 4 3", "t T 4 4", "r S", "f", "q"))
    out = capsys.readouterr().out
    assert "Invalid tile input" in out
    assert "Rack is now S" in out
    assert "Points: 6" in out
    assert final.get(4, 4) == "T"


def test_end_of_input_exits(cat_lexicon):
    engine = MoveEngine(cat_lexicon)
    board = plain_board()
    assert run_cli(engine, board, Rack.from_string("CAT"), read=scripted()) is board


def test_tile_edit_discards_previous_best_move(cat_lexicon, capsys):
    engine = MoveEngine(cat_lexicon)
    board = place(plain_board(), 4, 2, "CAT")

    final = run_cli(engine, board, Rack.from_string("S"), read=scripted("t X 4 5", "p", "q"))
    assert final.get(4, 5) == "X"
    out = capsys.readouterr().out
    assert "Nothing to play" in out
    assert "Played" not in out


def test_rack_edit_discards_previous_best_move(cat_lexicon, capsys):
    engine = MoveEngine(cat_lexicon)
    board = place(plain_board(), 4, 2, "CAT")

    final = run_cli(engine, board, Rack.from_string("S"), read=scripted("r Q", "p", "f", "p", "q"))
    assert final.get(4, 5) == "."
    out = capsys.readouterr().out
    assert "Rack is now Q" in out
    assert "Nothing to play" in out
    assert "Played" not in out
