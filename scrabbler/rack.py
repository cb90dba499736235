"""Player rack as per-letter counts plus a blank count."""

from __future__ import annotations

import contextlib
from typing import Iterable, Iterator

from scrabbler.constants import ALPHABET, BLANK, BLANK_ALIASES, RACK_SIZE

BLANK_INDEX = len(ALPHABET)


class Rack:
    """Counts of each letter A-Z (indexes 0-25) and of blanks (index 26)."""

    __slots__ = ("counts",)

    def __init__(self, counts: list[int] | None = None):
        self.counts: list[int] = list(counts) if counts else [0] * (BLANK_INDEX + 1)

    @classmethod
    def from_string(cls, letters: str) -> Rack:
        """Parse a rack such as ``"ENTIRE*"``.

        Only the first seven characters are read. Uppercase letters are
        tiles, ``*`` or ``?`` is a blank, anything else is ignored.
        """
        rack = cls()
        for ch in letters[:RACK_SIZE]:
            if ch in BLANK_ALIASES:
                rack.counts[BLANK_INDEX] += 1
            elif ch in ALPHABET:
                rack.counts[ord(ch) - 65] += 1
        return rack

    @property
    def blanks(self) -> int:
        return self.counts[BLANK_INDEX]

    def count(self, letter: str) -> int:
        """Tiles of *letter* on the rack; lowercase letters count blanks."""
        return self.counts[self._index(letter)]

    def has(self, index: int) -> bool:
        return self.counts[index] > 0

    @contextlib.contextmanager
    def take(self, index: int) -> Iterator[None]:
        """Remove one tile for the duration of the ``with`` block.

        The tile goes back on every exit path, so sibling search branches
        always see the counts they started with.
        """
        if self.counts[index] <= 0:
            raise ValueError(f"no {self._label(index)} tile on the rack")
        self.counts[index] -= 1
        try:
            yield
        finally:
            self.counts[index] += 1

    def leave(self, letters: Iterable[str]) -> Rack:
        """Rack left after playing *letters* (lowercase letters are blanks)."""
        rest = self.copy()
        for letter in letters:
            index = self._index(letter)
            if rest.counts[index] <= 0:
                raise ValueError(f"{letter!r} is not on the rack")
            rest.counts[index] -= 1
        return rest

    def tiles(self) -> list[str]:
        """Tiles as a flat list, blanks written ``*``."""
        out: list[str] = []
        for index, n in enumerate(self.counts):
            out.extend([self._label(index)] * n)
        return out

    def copy(self) -> Rack:
        return Rack(self.counts)

    def __len__(self) -> int:
        return sum(self.counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return self.counts == other.counts

    def __str__(self) -> str:
        return "".join(self.tiles())

    def __repr__(self) -> str:
        return f"Rack({str(self)!r})"

    @staticmethod
    def _index(letter: str) -> int:
        if letter in BLANK_ALIASES:
            return BLANK_INDEX
        if len(letter) != 1 or letter.upper() not in ALPHABET:
            raise ValueError(f"{letter!r} is not a tile")
        return BLANK_INDEX if letter.islower() else ord(letter) - 65

    @staticmethod
    def _label(index: int) -> str:
        return BLANK if index == BLANK_INDEX else ALPHABET[index]
