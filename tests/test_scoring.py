import pytest

from conftest import place, plain_board
from scrabbler import BINGO_BONUS, Board, Placement, Scorer


@pytest.fixture
def scorer(tiles):
    return Scorer(tiles)


def across(row, col, letters):
    return [Placement(row, col + i, ch) for i, ch in enumerate(letters)]


def board_with(row4):
    """7x7 regular board whose fourth row uses the given layout codes."""
    rows = ["......."] * 7
    rows[3] = row4
    return Board.from_interior(rows)


def test_plain_word(scorer):
    assert scorer.score_across(plain_board(), across(4, 2, "CAT")) == 5


def test_empty_placement_scores_zero(scorer):
    assert scorer.score_across(plain_board(), []) == 0


def test_double_letter_beats_regular(scorer):
    regular = scorer.score_across(board_with("......."), across(4, 2, "CAT"))
    doubled = scorer.score_across(board_with(".l....."), across(4, 2, "CAT"))
    assert doubled > regular
    assert doubled == 3 * 2 + 1 + 1


def test_triple_letter(scorer):
    assert scorer.score_across(board_with("...L..."), across(4, 2, "CAT")) == 3 + 1 + 3


def test_word_multipliers_compound(scorer):
    assert scorer.score_across(board_with("..w...."), across(4, 2, "CAT")) == 10
    assert scorer.score_across(board_with(".Ww...."), across(4, 2, "CAT")) == 30


def test_existing_tiles_count_without_bonus(scorer):
    board = place(board_with(".W....."), 4, 2, "CAT")
    # CATS: the triple word under C is already covered
    assert scorer.score_across(board, [Placement(4, 5, "S")]) == 6


def test_extension_on_the_left(scorer):
    board = place(board_with("l......"), 4, 2, "CAT")
    assert scorer.score_across(board, [Placement(4, 1, "S")]) == 2 + 5


def test_existing_tiles_between_new_ones(scorer):
    board = place(plain_board(), 4, 3, "A")
    assert scorer.score_across(board, [Placement(4, 2, "C"), Placement(4, 4, "T")]) == 5


def test_cross_word_points(scorer):
    board = place(plain_board(), 3, 3, "T")
    # CAT across row 4 with T above the A forms TA down
    assert scorer.score_across(board, across(4, 2, "CAT")) == 5 + 2


def test_cross_word_uses_own_word_square(scorer):
    board = place(board_with("..w...."), 3, 3, "T")
    assert scorer.score_across(board, across(4, 2, "CAT")) == 5 * 2 + 2 * 2

    board = place(board_with(".w....."), 3, 3, "T")
    assert scorer.score_across(board, across(4, 2, "CAT")) == 5 * 2 + 2


def test_cross_word_uses_letter_multiplier(scorer):
    board = place(board_with("..l...."), 3, 3, "T")
    assert scorer.score_across(board, across(4, 2, "CAT")) == (3 + 2 + 1) + (1 + 2)


def test_blank_scores_zero(scorer):
    assert scorer.score_across(plain_board(), across(4, 2, "cAT")) == 2
    board = place(plain_board(), 4, 2, "c")
    assert scorer.score_across(board, across(4, 3, "AT")) == 2


def test_bingo_bonus(scorer):
    board = plain_board(9)
    expected = 3 + 1 + 2 + 3 + 1 + 1 + 1 + BINGO_BONUS
    assert scorer.score_across(board, across(5, 2, "BEDPOST")) == expected


def test_bingo_bonus_with_blank(scorer):
    board = plain_board(9)
    expected = 3 + 1 + 2 + 3 + 1 + 1 + 0 + BINGO_BONUS
    assert scorer.score_across(board, across(5, 2, "BEDPOSt")) == expected


def test_score_down_matches_transposed_across(scorer):
    board = Board.from_interior([".......", "...l...", ".......", ".......", ".......", ".......", "......."])
    down = [Placement(2, 4, "C"), Placement(3, 4, "A"), Placement(4, 4, "T")]
    assert scorer.score_down(board, down) == 8
