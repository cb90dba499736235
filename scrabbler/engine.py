"""Move engine -- anchor-based generation with trie pruning
(a trie variant of the Appel-Jacobson algorithm)."""

from __future__ import annotations

import logging

from scrabbler.annotate import annotate, force_opening_anchors
from scrabbler.board import Board
from scrabbler.dictionary import Lexicon
from scrabbler.move import Move, Placement
from scrabbler.rack import Rack
from scrabbler.scoring import Scorer
from scrabbler.search import MoveSearch
from scrabbler.tiles import TileTable

log = logging.getLogger("scrabbler")


class MoveEngine:
    """Finds the highest-scoring move for a board and rack."""

    def __init__(self, lexicon: Lexicon, tiles: TileTable | None = None):
        self.lexicon = lexicon
        self.trie = lexicon.trie
        self.tiles = tiles or TileTable()
        self.scorer = Scorer(self.tiles)

    # public API

    def annotate(self, board: Board) -> Board:
        """Recompute the board's cross-checks and minimum lengths in place."""
        return annotate(board, self.lexicon)

    def find_best_move(self, board: Board, rack: Rack | str) -> Move:
        """Best move on an annotated *board*; an empty Move scoring 0 if none.

        Neither *board* nor *rack* is modified.
        """
        rack = Rack.from_string(rack) if isinstance(rack, str) else rack.copy()

        if board.is_board_empty():
            return self._find_opening_move(board, rack)

        across_tiles, across_pts = self._search(board, rack)
        log.debug("Best across: %s (%d pts)", across_tiles, across_pts)

        down_board = annotate(board.transposed(), self.lexicon)
        down_tiles, down_pts = self._search(down_board, rack)
        log.debug("Best down (transposed): %s (%d pts)", down_tiles, down_pts)

        # Equal scores keep the across move
        if down_pts > across_pts:
            return Move(down_tiles, down_pts, "H").transposed()
        return Move(across_tiles, across_pts, "H")

    def commit(self, board: Board, move: Move) -> Board:
        """New board with *move* placed and annotations recomputed."""
        new_board = board.copy()
        for row, col, letter in move.tiles:
            if new_board.is_occupied(row, col):
                raise ValueError(f"({row},{col}) already holds {new_board.get(row, col)}")
            new_board.set(row, col, letter)
        return annotate(new_board, self.lexicon)

    # search passes

    def _find_opening_move(self, board: Board, rack: Rack) -> Move:
        """First move: across the center row only, covering the center square."""
        opening = annotate(board.copy(), self.lexicon)
        force_opening_anchors(opening)
        tiles, pts = self._search(opening, rack)
        return Move(tiles, pts, "H")

    def _search(self, board: Board, rack: Rack) -> tuple[list[Placement], int]:
        search = MoveSearch(board, self.trie, self.scorer)
        tiles, pts = search.search(rack)
        log.debug("Searched %d anchors, scored %d candidates", search.anchors, search.candidates)
        return tiles, pts
