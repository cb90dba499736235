"""Rightward-extension move search over an annotated board.

Every square with a usable minimum length is a possible start of a
horizontal word. From there the search walks right one square at a time,
following the trie: board tiles must match a child of the current node,
empty squares take any child letter that is both on the rack (or playable
with a blank) and allowed by the square's cross-check. A word is complete
when the search stands on an empty square with a terminal node and has
placed at least the start square's minimum number of tiles.
"""

from __future__ import annotations

from scrabbler.board import OUTSIDE, Board
from scrabbler.constants import EMPTY, UNUSABLE
from scrabbler.move import Placement
from scrabbler.rack import BLANK_INDEX, Rack
from scrabbler.scoring import Scorer
from scrabbler.trie import Trie, TrieNode


class MoveSearch:
    """Finds the best horizontal placement on one board snapshot."""

    def __init__(self, board: Board, trie: Trie, scorer: Scorer):
        self.trie = trie
        self.scorer = scorer
        # Plain lists are much faster to index than numpy scalars
        self.letters: list[list[str]] = board.letters.tolist()
        self.types: list[list[int]] = board.types.tolist()
        self.cross_checks: list[list[list[bool]]] = board.cross_checks.tolist()
        self.min_lengths: list[list[int]] = board.min_lengths.tolist()

        self.best_tiles: list[Placement] = []
        self.best_score = 0
        self.anchors = 0
        self.candidates = 0

    def search(self, rack: Rack, max_length: int | None = None) -> tuple[list[Placement], int]:
        """Try every start square needing 1..*max_length* tiles (default: rack size)."""
        if max_length is None:
            max_length = len(rack)
        n_rows = len(self.letters) - 2
        n_cols = len(self.letters[0]) - 2
        for r in range(1, n_rows + 1):
            for c in range(1, n_cols + 1):
                min_length = self.min_lengths[r][c]
                if min_length != UNUSABLE and 1 <= min_length <= max_length:
                    self.anchors += 1
                    self.extend_right(rack, self.trie.root, r, c, min_length, [])
        return list(self.best_tiles), self.best_score

    def extend_right(
        self,
        rack: Rack,
        node: TrieNode,
        row: int,
        col: int,
        min_length: int,
        placements: list[Placement],
    ) -> None:
        if self.types[row][col] == OUTSIDE:
            return

        letter = self.letters[row][col]
        if letter != EMPTY:
            # Existing tile: follow it through the trie without using the rack
            child = node.child(letter.upper())
            if child is not None:
                self.extend_right(rack, child, row, col + 1, min_length, placements)
            return

        if node.is_terminal and len(placements) >= min_length:
            self._consider(placements)

        allowed = self.cross_checks[row][col]
        for child in node.children:
            index = ord(child.letter) - 65
            if not allowed[index]:
                continue
            if rack.has(index):
                with rack.take(index):
                    self._place(rack, child, row, col, min_length, placements, child.letter)
            if rack.has(BLANK_INDEX):
                with rack.take(BLANK_INDEX):
                    self._place(rack, child, row, col, min_length, placements, child.letter.lower())

    def _place(
        self,
        rack: Rack,
        node: TrieNode,
        row: int,
        col: int,
        min_length: int,
        placements: list[Placement],
        letter: str,
    ) -> None:
        placements.append(Placement(row, col, letter))
        try:
            self.extend_right(rack, node, row, col + 1, min_length, placements)
        finally:
            placements.pop()

    def _consider(self, placements: list[Placement]) -> None:
        self.candidates += 1
        score = self.scorer.score_grid(self.letters, self.types, placements)
        if score > self.best_score:
            self.best_score = score
            self.best_tiles = list(placements)
