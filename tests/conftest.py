import pytest

from scrabbler import Board, Lexicon, MoveEngine, TileTable


def plain_board(size=7):
    """Empty size x size board of regular squares (plus the outside ring)."""
    return Board.from_interior(["." * size] * size)


def place(board, row, col, word, direction="H"):
    dr, dc = (0, 1) if direction == "H" else (1, 0)
    for i, ch in enumerate(word):
        board.set(row + i * dr, col + i * dc, ch)
    return board


@pytest.fixture
def tiles():
    return TileTable()


@pytest.fixture
def cat_lexicon():
    return Lexicon({"CAT", "CATS", "AT", "TA"})


@pytest.fixture
def cat_board(cat_lexicon):
    """7x7 board with CAT across row 4, columns 2-4, annotated."""
    board = place(plain_board(), 4, 2, "CAT")
    return MoveEngine(cat_lexicon).annotate(board)
