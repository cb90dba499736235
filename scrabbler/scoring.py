"""Move scoring."""

from __future__ import annotations

from typing import Sequence

from scrabbler.board import OUTSIDE, Board
from scrabbler.constants import (
    BINGO_BONUS,
    EMPTY,
    LETTER_MULTIPLIERS,
    RACK_SIZE,
    WORD_MULTIPLIERS,
)
from scrabbler.move import Placement, transpose_placements
from scrabbler.tiles import TileTable


class Scorer:
    """Scores placements against the board as it was before they were made."""

    def __init__(self, tiles: TileTable):
        self.tiles = tiles

    def score_across(self, board: Board, placements: Sequence[Placement]) -> int:
        return self.score_grid(board.letters.tolist(), board.types.tolist(), placements)

    def score_down(self, board: Board, placements: Sequence[Placement]) -> int:
        """Score a vertical placement as the horizontal one on the transposed board."""
        return self.score_across(board.transposed(), transpose_placements(list(placements)))

    def score_grid(
        self,
        letters: list[list[str]],
        types: list[list[int]],
        placements: Sequence[Placement],
    ) -> int:
        """Points for a horizontal placement (tiles in left-to-right order).

        The main word counts every letter in the finished row word, doubled
        or tripled once per new tile on a word square. Each new tile with a
        tile above or below it also scores the vertical word it completes,
        multiplied only by that tile's own word square.
        """
        if not placements:
            return 0

        value = self.tiles.value
        row_pts = 0
        total_cross_pts = 0
        word_mult = 1

        for r, c, letter in placements:
            square = types[r][c]
            letter_pts = value(letter) * LETTER_MULTIPLIERS.get(square, 1)
            row_pts += letter_pts

            cross_pts = 0
            if letters[r - 1][c] != EMPTY or letters[r + 1][c] != EMPTY:
                cross_pts = self._column_points(letters, types, r, c) + letter_pts

            mult = WORD_MULTIPLIERS.get(square, 1)
            word_mult *= mult
            total_cross_pts += cross_pts * mult

        row = placements[0].row
        first = placements[0].col
        last = placements[-1].col

        # Existing tiles left of, between and right of the new ones
        col = first - 1
        while types[row][col] != OUTSIDE and letters[row][col] != EMPTY:
            row_pts += value(letters[row][col])
            col -= 1
        for col in range(first, last + 1):
            if letters[row][col] != EMPTY:
                row_pts += value(letters[row][col])
        col = last + 1
        while types[row][col] != OUTSIDE and letters[row][col] != EMPTY:
            row_pts += value(letters[row][col])
            col += 1

        total = row_pts * word_mult + total_cross_pts
        if len(placements) >= RACK_SIZE:
            total += BINGO_BONUS
        return total

    def _column_points(self, letters: list[list[str]], types: list[list[int]], row: int, col: int) -> int:
        """Face value of the tiles directly above and below (row, col)."""
        value = self.tiles.value
        pts = 0
        r = row - 1
        while types[r][col] != OUTSIDE and letters[r][col] != EMPTY:
            pts += value(letters[r][col])
            r -= 1
        r = row + 1
        while types[r][col] != OUTSIDE and letters[r][col] != EMPTY:
            pts += value(letters[r][col])
            r += 1
        return pts
