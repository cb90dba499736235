"""Move representation."""

from __future__ import annotations

from typing import NamedTuple

from scrabbler.constants import RACK_SIZE


class Placement(NamedTuple):
    """One newly placed tile; a lowercase letter is a blank."""

    row: int
    col: int
    letter: str


def transpose_placements(placements: list[Placement]) -> list[Placement]:
    return [Placement(p.col, p.row, p.letter) for p in placements]


class Move:
    """Tiles placed in one turn, in board order, and the points they score."""

    __slots__ = ("tiles", "score", "direction")

    def __init__(self, tiles: list[Placement] | None = None, score: int = 0, direction: str = "H"):
        self.tiles: list[Placement] = list(tiles or [])
        self.score = score
        self.direction = direction  # 'H' or 'V'

    @property
    def is_bingo(self) -> bool:
        return len(self.tiles) >= RACK_SIZE

    def transposed(self) -> Move:
        direction = "V" if self.direction == "H" else "H"
        return Move(transpose_placements(self.tiles), self.score, direction)

    def describe(self) -> list[str]:
        """Printable lines: points, start square, then one line per tile."""
        lines = [f"Points: {self.score}"]
        if self.tiles:
            first = self.tiles[0]
            lines.append(f"Start Row: {first.row}")
            lines.append(f"Start Col: {first.col}")
            lines.extend(f"{p.letter} {p.row} {p.col}" for p in self.tiles)
        return lines

    def __len__(self) -> int:
        return len(self.tiles)

    def __bool__(self) -> bool:
        return bool(self.tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.tiles, self.score, self.direction) == (other.tiles, other.score, other.direction)

    __hash__ = None

    def __repr__(self) -> str:
        if not self.tiles:
            return "Move(pass, 0 pts)"
        arrow = "→" if self.direction == "H" else "↓"
        letters = "".join(p.letter for p in self.tiles)
        first = self.tiles[0]
        bingo = " +BINGO!" if self.is_bingo else ""
        return f"{letters} at ({first.row},{first.col}) {arrow} = {self.score} pts{bingo}"
