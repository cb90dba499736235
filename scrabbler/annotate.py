"""Per-square annotations used to prune the move search.

* cross-checks: which letters may go on an empty square without forming an
  invalid vertical word;
* minimum lengths: how many tiles a word starting on a square and running
  right needs before it touches a tile already on the board.

Both depend on every letter on the board, so they are recomputed after any
change (``annotate`` does both).
"""

from __future__ import annotations

from scrabbler.board import OUTSIDE, Board
from scrabbler.constants import ALPHABET, EMPTY, UNUSABLE
from scrabbler.dictionary import Lexicon


def annotate(board: Board, lexicon: Lexicon) -> Board:
    """Recompute cross-checks and minimum lengths in place; returns *board*."""
    update_cross_checks(board, lexicon)
    update_min_lengths(board)
    return board


def update_cross_checks(board: Board, lexicon: Lexicon) -> None:
    letters = board.letters.tolist()
    types = board.types.tolist()
    checks = board.cross_checks

    checks[:] = False
    for r, c in board.squares():
        if letters[r][c] != EMPTY:
            continue

        above = _run(letters, types, r - 1, c, -1)
        below = _run(letters, types, r + 1, c, 1)
        # No vertical neighbours: the square constrains nothing
        if not above and not below:
            checks[r, c] = True
            continue

        for i, ch in enumerate(ALPHABET):
            checks[r, c, i] = (above + ch + below) in lexicon


def _run(letters: list[list[str]], types: list[list[int]], r: int, c: int, step: int) -> str:
    """Contiguous tiles from (r, c) going up (step -1) or down (step 1)."""
    found: list[str] = []
    while letters[r][c] != EMPTY and types[r][c] != OUTSIDE:
        found.append(letters[r][c].upper())
        r += step
    if step < 0:
        found.reverse()
    return "".join(found)


def update_min_lengths(board: Board) -> None:
    letters = board.letters.tolist()
    lengths = board.min_lengths

    lengths[:] = UNUSABLE
    for r in range(1, board.n_rows + 1):
        # Unset until a square touching a tile is met scanning from the right
        running = UNUSABLE
        for c in range(board.n_cols, 0, -1):
            if letters[r][c - 1] != EMPTY:
                lengths[r, c] = UNUSABLE
            elif (
                letters[r - 1][c] != EMPTY
                or letters[r + 1][c] != EMPTY
                or letters[r][c + 1] != EMPTY
                or letters[r][c] != EMPTY
            ):
                lengths[r, c] = 1
                running = 1
            elif running == UNUSABLE:
                lengths[r, c] = UNUSABLE
            else:
                running += 1
                lengths[r, c] = running


def force_opening_anchors(board: Board) -> None:
    """Anchor an empty board along the center row.

    Squares from the left edge through the center get the length that
    reaches the center; the center itself needs 2 since the first move
    places at least two tiles.
    """
    row, mid = board.center
    for col in range(1, mid + 1):
        board.min_lengths[row, col] = mid - col + 1
    board.min_lengths[row, mid] = 2
