"""Tile table: point values and the tile distribution.

Also computes the unseen tile pool (the full distribution minus the tiles on
the board and on the player's rack), shown by the terminal front end.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from scrabbler.constants import (
    ALPHABET,
    BLANK,
    BLANK_ALIASES,
    TILE_DISTRIBUTION,
    TILE_VALUES,
)

if TYPE_CHECKING:
    from scrabbler.board import Board
    from scrabbler.rack import Rack

log = logging.getLogger("scrabbler")


class TileTable:
    """Letter -> point value lookup, with per-letter tile counts."""

    __slots__ = ("_values", "_totals")

    def __init__(
        self,
        values: dict[str, int] | None = None,
        totals: dict[str, int] | None = None,
    ):
        self._values: dict[str, int] = dict(TILE_VALUES if values is None else values)
        self._totals: dict[str, int] = dict(TILE_DISTRIBUTION if totals is None else totals)

    @classmethod
    def load(cls, path: str | None) -> TileTable:
        """Read ``letter points total`` lines, or use the standard table."""
        if not path or not os.path.exists(path):
            if path:
                log.warning("Tile file %s not found -- using standard tile values.", path)
            return cls()

        values: dict[str, int] = {}
        totals: dict[str, int] = {}
        with open(path, "r", encoding="utf-8") as f:
            tokens = f.read().split()
        if len(tokens) % 3:
            raise ValueError(f"{path}: expected 'letter points total' triples")
        for i in range(0, len(tokens), 3):
            letter, points, total = tokens[i:i + 3]
            letter = BLANK if letter in BLANK_ALIASES else letter.upper()
            if letter != BLANK and letter not in ALPHABET:
                raise ValueError(f"{path}: bad tile letter {letter!r}")
            try:
                values[letter] = int(points)
                totals[letter] = int(total)
            except ValueError:
                raise ValueError(f"{path}: bad numbers for tile {letter!r}") from None
        log.info("Loaded %d tiles from %s", len(values), path)
        return cls(values, totals)

    def value(self, letter: str) -> int:
        """Points for a tile; blanks (lowercase letters) are worth 0."""
        if not letter.isupper():
            return 0
        return self._values.get(letter, 0)

    def total(self, letter: str) -> int:
        return self._totals.get(letter, 0)

    def remaining(self, board: Board, rack: Rack) -> list[str]:
        """Unseen tiles: full distribution minus board tiles minus *rack*.

        Lowercase board tiles are blanks and count against the blank supply.
        """
        pool: dict[str, int] = dict(self._totals)

        for letter in board.tiles():
            tile = BLANK if letter.islower() else letter
            pool[tile] = pool.get(tile, 0) - 1

        for tile in rack.tiles():
            pool[tile] = pool.get(tile, 0) - 1

        # Negative counts come from hand-entered boards; ignore them
        remaining: list[str] = []
        for tile, count in pool.items():
            remaining.extend([tile] * max(0, count))
        return remaining
